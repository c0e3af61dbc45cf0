# topmark:header:start
#
#   project      : GridNotices
#   file         : markup.py
#   file_relpath : src/gridnotices/rendering/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render accumulated notices into the grid's system-message markup.

The fragment is a single ``<table>`` wrapper with a caption row (the localized
``SystemMessage`` label) and a body row holding one ``<br/>``-terminated line
per notice. Two wrapper variants exist, selected by the render context's
theme flag:

    - ``WrapperTheme.JQUERY_UI``: classes from the jQuery UI CSS framework
      (``ui-state-error``) for hosts that use it.
    - ``WrapperTheme.PLAIN``: the grid's own classes only.

Rendering is gated: nothing is emitted unless at least one notice has
`NoticeStyle.GRID`. Once emitted, the body lists *every* notice, whatever its
style.

Notice texts are embedded verbatim; they may carry markup of their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from gridnotices.config.logging import get_logger
from gridnotices.constants import SYSTEM_MESSAGE_DOM_ID_PREFIX, SYSTEM_MESSAGE_LABEL_KEY
from gridnotices.core.enum_mixins import KeyedStrEnum
from gridnotices.notice.model import NoticeStyle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gridnotices.config.logging import GridNoticesLogger
    from gridnotices.notice.model import Notice
    from gridnotices.notice.types import RenderContext

logger: GridNoticesLogger = get_logger(__name__)


class WrapperTheme(KeyedStrEnum):
    """Wrapper markup variant."""

    JQUERY_UI = ("jquery_ui", "jQuery UI CSS framework", ("jqueryui", "jquery"))
    PLAIN = ("plain", "Plain markup")

    @classmethod
    def from_flag(cls, theme_flag: bool) -> WrapperTheme:
        """Return the theme selected by a render context's ``theme_flag``."""
        return cls.JQUERY_UI if theme_flag else cls.PLAIN


# Placeholders: {width}, {label}, {dom_id}
_WRAPPER_OPEN: Final[dict[WrapperTheme, str]] = {
    WrapperTheme.JQUERY_UI: (
        '<table id="{dom_id}" class="ui-state-error wgsystemmessagebox"'
        ' style="margin-bottom: 5px" width="{width}">'
        '<tr><td class="ui-state-error-text wgsystemmessagecell">{label}</td></tr>'
        '<tr><td class="wgsystemmessagecell">'
    ),
    WrapperTheme.PLAIN: (
        '<table id="{dom_id}" class="wgsystemmessagebox" width="{width}" >'
        '<tr><td class="wgsystemmessagecell">{label}</td></tr>'
        '<tr><td class="wgsystemmessagecell">'
    ),
}
_WRAPPER_CLOSE: Final[str] = "</td></tr></table>"
LINE_BREAK: Final[str] = "<br/>"

TRACE_START: Final[str] = "Start NoticeRegistry.render"
TRACE_EMPTY: Final[str] = "End NoticeRegistry.render, no notices"
TRACE_NO_GRID_STYLE: Final[str] = "NoticeRegistry.render, no grid-styled notices"
TRACE_FINISHED: Final[str] = "Finished NoticeRegistry.render"


def _text(value: object) -> str:
    """Return ``value`` as embeddable text; ``None`` becomes empty text."""
    return "" if value is None else str(value)


def _trace(context: RenderContext, message: str) -> None:
    """Call the context's tracing hook if it has one and tracing is on."""
    is_tracing = getattr(context, "is_tracing", None)
    trace = getattr(context, "trace", None)
    if is_tracing is None or trace is None:
        return
    if is_tracing():
        trace(message)


def system_message_dom_id(grid_id: str | None) -> str:
    """Return the DOM id of the wrapper table for ``grid_id``."""
    return f"{SYSTEM_MESSAGE_DOM_ID_PREFIX}{_text(grid_id)}"


def has_grid_style(notices: Sequence[Notice]) -> bool:
    """Return True if at least one notice uses `NoticeStyle.GRID`."""
    return any(n.style is NoticeStyle.GRID for n in notices)


def render_wrapper_open(context: RenderContext) -> str:
    """Return the opening markup of the wrapper selected by ``context``."""
    theme: WrapperTheme = WrapperTheme.from_flag(bool(context.theme_flag))
    return _WRAPPER_OPEN[theme].format(
        width=_text(context.width),
        label=_text(context.lookup_label(SYSTEM_MESSAGE_LABEL_KEY)),
        dom_id=system_message_dom_id(context.grid_id),
    )


def render_notices(notices: Sequence[Notice], context: RenderContext) -> str | None:
    """Render ``notices`` into the grid's system-message fragment.

    Args:
        notices: Notices in insertion order.
        context: The grid being rendered.

    Returns:
        The markup fragment, or ``None`` when there are no notices or when
        none of them uses `NoticeStyle.GRID`.
    """
    _trace(context, TRACE_START)
    if not notices:
        _trace(context, TRACE_EMPTY)
        return None

    if not has_grid_style(notices):
        _trace(context, TRACE_NO_GRID_STYLE)
        return None

    parts: list[str] = [render_wrapper_open(context)]
    parts.extend(f"{n.text}{LINE_BREAK}" for n in notices)
    parts.append(_WRAPPER_CLOSE)

    _trace(context, TRACE_FINISHED)
    logger.debug("Rendered %d notice(s) for grid %r", len(notices), context.grid_id)
    return "".join(parts)
