# topmark:header:start
#
#   project      : GridNotices
#   file         : model.py
#   file_relpath : src/gridnotices/notice/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core notice types for GridNotices.

A grid reports two kinds of notices while it evaluates: user-facing
validation notices ("errors", e.g. invalid input in a cell) and critical
notices caused by internal failures. Each one is recorded as an immutable
`Notice`.

Sections:
    * NoticeStyle: presentation style (the grid's own wrapper vs. host page).
    * NoticeSeverity: severity derived from the ``critical`` flag, with
      terminal colors.
    * Notice: immutable notice payload.
    * NoticeOptions: option object accepted by `NoticeRegistry.add_options`.
    * NoticeStats: aggregated per-severity counts.
    * make_location_key / split_location_key: ``"rowID;columnID"`` helpers.
"""

from __future__ import annotations

from dataclasses import dataclass

from yachalk import chalk

from gridnotices.constants import LOCATION_KEY_SEPARATOR
from gridnotices.core.enum_mixins import KeyedStrEnum
from gridnotices.core.errors import InvalidNoticeError
from gridnotices.rendering.colored_enum import ColoredStrEnum


class NoticeStyle(KeyedStrEnum):
    """How a notice should be displayed.

    ``GRID`` notices belong in the grid's own themed wrapper. ``PLAIN``
    notices are meant for display managed by the host page. The grid only
    renders its wrapper when at least one ``GRID`` notice exists.
    """

    GRID = ("grid", "Grid wrapper", ("webgrid", "host_theme"))
    PLAIN = ("plain", "Host page", ("page", "plain_theme"))


class NoticeSeverity(ColoredStrEnum):
    """Severity of a notice, for human-readable output only."""

    ERROR = ("error", chalk.yellow)
    CRITICAL = ("critical", chalk.red_bright)


def _check_notice_fields(
    text: object,
    critical: object,
    style: object,
    location_key: object,
    *,
    style_optional: bool = False,
) -> None:
    if not isinstance(text, str):
        raise InvalidNoticeError(f"Notice text must be a str, got {type(text).__name__}")
    if not isinstance(critical, bool):
        raise InvalidNoticeError(
            f"Notice critical flag must be a bool, got {type(critical).__name__}"
        )
    if not (isinstance(style, NoticeStyle) or (style_optional and style is None)):
        raise InvalidNoticeError(f"Notice style must be a NoticeStyle, got {style!r}")
    if location_key is not None and not isinstance(location_key, str):
        raise InvalidNoticeError(
            f"Notice location key must be a str or None, got {type(location_key).__name__}"
        )


@dataclass(frozen=True, slots=True)
class Notice:
    """One reported condition.

    Attributes:
        text: The message to display.
        critical: True if the notice comes from an internal failure rather
            than from something the user did.
        style: Which wrapper the notice is meant for.
        location_key: ``"rowID;columnID"`` of the cell the notice is attached
            to, or ``None`` when unlocated.

    Raises:
        InvalidNoticeError: If a field has the wrong type (e.g. ``text=None``).
    """

    text: str
    critical: bool = False
    style: NoticeStyle = NoticeStyle.GRID
    location_key: str | None = None

    def __post_init__(self) -> None:
        _check_notice_fields(self.text, self.critical, self.style, self.location_key)

    @property
    def severity(self) -> NoticeSeverity:
        """Return the severity derived from the ``critical`` flag."""
        return NoticeSeverity.CRITICAL if self.critical else NoticeSeverity.ERROR

    @property
    def is_located(self) -> bool:
        """Return True if the notice is attached to a row/column."""
        return self.location_key is not None


@dataclass(frozen=True, slots=True)
class NoticeOptions:
    """Options for adding one notice to a registry.

    ``style=None`` means "use the registry's default style".
    """

    text: str
    critical: bool = False
    style: NoticeStyle | None = None
    location_key: str | None = None

    def __post_init__(self) -> None:
        _check_notice_fields(
            self.text, self.critical, self.style, self.location_key, style_optional=True
        )

    def to_notice(self, default_style: NoticeStyle) -> Notice:
        """Build the `Notice`, filling in ``default_style`` when no style is set."""
        return Notice(
            text=self.text,
            critical=self.critical,
            style=self.style if self.style is not None else default_style,
            location_key=self.location_key,
        )


@dataclass(frozen=True)
class NoticeStats:
    """Aggregated counts for notices by severity."""

    n_error: int
    n_critical: int

    @property
    def total(self) -> int:
        """Return the total count of notices."""
        return self.n_error + self.n_critical


def make_location_key(row_id: object, column_id: object) -> str:
    """Return the location key ``"rowID;columnID"`` for a grid cell."""
    return f"{row_id}{LOCATION_KEY_SEPARATOR}{column_id}"


def split_location_key(key: str) -> tuple[str, str]:
    """Split a location key into ``(row_id, column_id)``.

    Only the first separator splits; column ids may contain ``";"``.

    Raises:
        InvalidNoticeError: If ``key`` has no separator.
    """
    row_id, sep, column_id = key.partition(LOCATION_KEY_SEPARATOR)
    if not sep:
        raise InvalidNoticeError(f"Not a location key (expected 'row;column'): {key!r}")
    return row_id, column_id
