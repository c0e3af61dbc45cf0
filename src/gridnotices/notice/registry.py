# topmark:header:start
#
#   project      : GridNotices
#   file         : registry.py
#   file_relpath : src/gridnotices/notice/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered store of the notices reported by one grid.

The owning grid records notices while it evaluates (`add`, `add_options`,
`add_text`) and asks the registry for markup once while it renders
(`render`). Insertion order is significant: it is the order in which notices
are rendered and the order in which location-key lookups scan.

Two legacy contracts hold:

    - `add` returns the count *after* insertion, i.e. the 1-based position of
      the new notice, not its 0-based index.
    - `remove` ignores the last index: only ``0 <= index < count - 1`` is
      removed, anything else is a silent no-op.

The registry holds no derived state; every count and lookup scans the live
sequence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridnotices.config.logging import get_logger
from gridnotices.notice.model import Notice, NoticeOptions, NoticeStats, NoticeStyle

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from gridnotices.config.logging import GridNoticesLogger
    from gridnotices.notice.types import RenderContext

logger: GridNoticesLogger = get_logger(__name__)


class NoticeRegistry:
    """Notices reported by one grid, in insertion order.

    Args:
        context: The owning grid, read while rendering.
        default_style: Style of notices added without an explicit style.
    """

    __slots__ = ("_context", "_default_style", "_items")

    def __init__(
        self,
        context: RenderContext,
        default_style: NoticeStyle = NoticeStyle.GRID,
    ) -> None:
        self._context: RenderContext = context
        self._default_style: NoticeStyle = default_style
        self._items: list[Notice] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(count={len(self._items)}, "
            f"default_style={self._default_style.key!r})"
        )

    @property
    def context(self) -> RenderContext:
        """The render context of the owning grid."""
        return self._context

    @property
    def default_style(self) -> NoticeStyle:
        """Style applied to notices added without an explicit style."""
        return self._default_style

    # --- mutation ---

    def _append(self, notice: Notice) -> int:
        self._items.append(notice)
        logger.trace(
            "Adding [%s/%s] at %r: %r",
            notice.severity.value,
            notice.style.key,
            notice.location_key,
            notice.text,
        )
        return len(self._items)

    def add(
        self,
        text: str,
        *,
        critical: bool = False,
        style: NoticeStyle | None = None,
        location_key: str | None = None,
    ) -> int:
        """Add a notice at the end of the registry.

        Args:
            text: The message to display.
            critical: True for internal failures (not caused by the user).
            style: How the notice should be displayed; defaults to the
                registry's default style.
            location_key: ``"rowID;columnID"`` of the cell the notice belongs
                to, or ``None``.

        Returns:
            The number of notices after insertion (the 1-based position of
            the new notice).

        Raises:
            InvalidNoticeError: If ``text``, ``style`` or ``location_key`` has
                the wrong type.
        """
        return self.add_options(
            NoticeOptions(text=text, critical=critical, style=style, location_key=location_key)
        )

    def add_options(self, options: NoticeOptions) -> int:
        """Add a notice described by ``options``; see `add` for the return value."""
        return self._append(options.to_notice(self._default_style))

    def add_text(self, parts: Iterable[str]) -> int:
        """Add a non-critical notice whose text is the concatenation of ``parts``.

        Useful when the message was assembled piecewise. Returns the same
        value as `add`.
        """
        return self.add("".join(parts))

    def remove(self, index: int) -> None:
        """Remove the notice at ``index``.

        Only ``0 <= index < count - 1`` is honoured; the last notice and
        out-of-range indices are left alone without raising.
        """
        if 0 <= index < len(self._items) - 1:
            del self._items[index]
            return
        logger.debug("Ignoring remove(%d) on registry with %d notice(s)", index, len(self._items))

    def clear(self) -> None:
        """Remove every notice."""
        logger.trace("Clearing %d notice(s)", len(self._items))
        self._items.clear()

    # --- queries ---

    @property
    def count(self) -> int:
        """Number of notices."""
        return len(self._items)

    @property
    def critical_count(self) -> int:
        """Number of critical notices."""
        if not self._items:
            return 0
        return sum(1 for n in self._items if n.critical)

    def has_critical(self) -> bool:
        """Return True if the registry contains a critical notice."""
        return any(n.critical for n in self._items)

    def find(self, location_key: str) -> Notice | None:
        """Return the first notice whose location key equals ``location_key``.

        The comparison is exact and case-sensitive. Returns ``None`` when no
        notice matches.
        """
        for notice in self._items:
            if notice.location_key == location_key:
                return notice
        return None

    def __getitem__(self, location_key: str) -> Notice | None:
        """Return ``find(location_key)``; a miss yields ``None``, not ``KeyError``."""
        if not isinstance(location_key, str):
            raise TypeError(
                f"{type(self).__name__} is indexed by location key (str), "
                f"not {type(location_key).__name__}"
            )
        return self.find(location_key)

    def stats(self) -> NoticeStats:
        """Return per-severity counts."""
        n_critical: int = self.critical_count
        return NoticeStats(n_error=len(self._items) - n_critical, n_critical=n_critical)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"error"``, ``"critical"`` and ``"total"``.
        """
        stats: NoticeStats = self.stats()
        return {
            "error": stats.n_error,
            "critical": stats.n_critical,
            "total": stats.total,
        }

    def __iter__(self) -> Iterator[Notice]:
        """Iterate over notices in insertion order."""
        return iter(tuple(self._items))

    def __len__(self) -> int:
        """Return the number of notices."""
        return len(self._items)

    # --- rendering ---

    def render(self) -> str | None:
        """Render the notices into the grid's system-message markup.

        Returns:
            The markup fragment, or ``None`` when the registry is empty or
            holds no `NoticeStyle.GRID` notice.
        """
        # Imported here: gridnotices.rendering.markup imports the notice model.
        from gridnotices.rendering.markup import render_notices

        return render_notices(tuple(self._items), self._context)
