# topmark:header:start
#
#   project      : GridNotices
#   file         : types.py
#   file_relpath : src/gridnotices/notice/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for GridNotices.

`RenderContext` is the narrow view of the owning grid that a
`NoticeRegistry` reads while rendering. Any object with these attributes
works; the registry never mutates it. `GridRenderContext` in
[`gridnotices.rendering.context`][gridnotices.rendering.context] is the
bundled implementation.
"""

from __future__ import annotations

from typing import Protocol


class RenderContext(Protocol):
    """Structural interface for the grid that owns a notice registry.

    The tracing hooks (`is_tracing`, `trace`) are optional at runtime: a
    context that lacks them is treated as non-tracing.
    """

    @property
    def width(self) -> int | float | str | None:
        """Grid width, written verbatim into the wrapper's ``width`` attribute."""
        ...

    @property
    def grid_id(self) -> str | None:
        """Grid identifier, used to build the wrapper's DOM id."""
        ...

    @property
    def theme_flag(self) -> bool:
        """True if the host page uses the jQuery UI CSS framework."""
        ...

    def lookup_label(self, key: str) -> str | None:
        """Resolve a localized display label (e.g. ``"SystemMessage"``)."""
        ...

    def is_tracing(self) -> bool:
        """Return True if diagnostic tracing is enabled."""
        ...

    def trace(self, message: str) -> None:
        """Record a diagnostic trace message."""
        ...
