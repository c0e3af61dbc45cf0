# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers for GridNotices.

- [`gridnotices.rendering.markup`][gridnotices.rendering.markup]: the
  system-message wrapper and `render_notices()`.
- [`gridnotices.rendering.context`][gridnotices.rendering.context]: the
  bundled `GridRenderContext`.
- [`gridnotices.rendering.colored_enum`][gridnotices.rendering.colored_enum]:
  color-aware enums for terminal output.
"""

from __future__ import annotations

# Do NOT import submodules here: the notice model imports colored_enum, and
# markup imports the notice model.
__all__: list[str] = []
