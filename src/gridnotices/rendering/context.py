# topmark:header:start
#
#   project      : GridNotices
#   file         : context.py
#   file_relpath : src/gridnotices/rendering/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled `RenderContext` implementation.

`GridRenderContext` carries the few grid properties the renderer reads. Hosts
with a richer grid object can pass that object directly instead, as long as it
satisfies [`RenderContext`][gridnotices.notice.types.RenderContext].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from gridnotices.config.logging import get_logger
from gridnotices.constants import DEFAULT_SYSTEM_MESSAGE_LABEL, SYSTEM_MESSAGE_LABEL_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gridnotices.config.logging import GridNoticesLogger

logger: GridNoticesLogger = get_logger(__name__)


def default_labels() -> Mapping[str, str]:
    """Return the built-in label table (read-only)."""
    return MappingProxyType({SYSTEM_MESSAGE_LABEL_KEY: DEFAULT_SYSTEM_MESSAGE_LABEL})


@dataclass(frozen=True)
class GridRenderContext:
    """Static description of a grid for rendering its notices.

    Attributes:
        grid_id: Grid identifier (the wrapper's DOM id is ``wgSystemMessage_<grid_id>``).
        width: Grid width, written verbatim (e.g. ``300`` or ``"100%"``).
        theme_flag: True if the host page uses the jQuery UI CSS framework.
        labels: Localized labels by key. Unknown keys resolve to ``None``.
        tracing: If True, `trace()` messages are logged at TRACE level.
    """

    grid_id: str | None = None
    width: int | float | str | None = None
    theme_flag: bool = False
    labels: Mapping[str, str] = field(default_factory=default_labels)
    tracing: bool = False

    def lookup_label(self, key: str) -> str | None:
        """Return the label for ``key``, or ``None`` if none is configured."""
        return self.labels.get(key)

    def is_tracing(self) -> bool:
        """Return True if tracing is enabled for this grid."""
        return self.tracing

    def trace(self, message: str) -> None:
        """Log a trace message tagged with the grid id."""
        logger.trace("[grid %s] %s", self.grid_id, message)
