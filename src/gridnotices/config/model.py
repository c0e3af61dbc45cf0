# topmark:header:start
#
#   project      : GridNotices
#   file         : model.py
#   file_relpath : src/gridnotices/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grid settings and notice entries read from a notices document.

A notices document is a TOML file with one ``[grid]`` table and any number of
``[[notice]]`` entries (in ``pyproject.toml`` both live under
``[tool.gridnotices]``):

```toml
[grid]
id = "g1"
width = 300
jquery_ui = false
default_style = "grid"
tracing = false

[grid.labels]
SystemMessage = "System message"

[[notice]]
text = "Name required"
location = "1;2"          # or: row = 1, column = 2

[[notice]]
text = "DB timeout"
critical = true
style = "plain"
```

All keys are optional except ``text``. Values of the wrong type raise
`ConfigError`; the message names the offending key.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from gridnotices.config.logging import get_logger
from gridnotices.core.errors import ConfigError
from gridnotices.notice.model import NoticeOptions, NoticeStyle, make_location_key
from gridnotices.notice.registry import NoticeRegistry
from gridnotices.rendering.context import GridRenderContext, default_labels

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gridnotices.config.io import TomlTable
    from gridnotices.config.logging import GridNoticesLogger

logger: GridNoticesLogger = get_logger(__name__)

_GRID_KEYS: frozenset[str] = frozenset(
    {"id", "width", "jquery_ui", "default_style", "labels", "tracing"}
)
_NOTICE_KEYS: frozenset[str] = frozenset(
    {"text", "critical", "style", "location", "row", "column"}
)


def _expect(value: object, types: type | tuple[type, ...], where: str) -> Any:
    # bool is an int subclass; a width of `true` is a typo, not a number
    if isinstance(value, bool) and bool not in (types if isinstance(types, tuple) else (types,)):
        raise ConfigError(f"{where}: expected {_type_names(types)}, got bool")
    if not isinstance(value, types):
        raise ConfigError(f"{where}: expected {_type_names(types)}, got {type(value).__name__}")
    return value


def _type_names(types: type | tuple[type, ...]) -> str:
    seq = types if isinstance(types, tuple) else (types,)
    return " or ".join(t.__name__ for t in seq)


def _parse_style(raw: object, where: str) -> NoticeStyle:
    token: str = _expect(raw, str, where)
    style: NoticeStyle | None = NoticeStyle.parse(token)
    if style is None:
        raise ConfigError(
            f"{where}: unknown notice style {token!r} (expected one of {NoticeStyle.keys()})"
        )
    return style


def _warn_unknown_keys(table: Mapping[str, Any], known: frozenset[str], where: str) -> None:
    for key in sorted(set(table) - known):
        logger.warning("Ignoring unknown key %r in %s", key, where)


@dataclass(frozen=True)
class GridConfig:
    """Settings of the grid whose notices are rendered.

    Attributes:
        grid_id: Grid identifier (used in the wrapper's DOM id).
        width: Grid width, written verbatim into the wrapper.
        jquery_ui: True if the host page uses the jQuery UI CSS framework.
        default_style: Style of notices that do not name one.
        labels: Localized labels by key (``SystemMessage`` is the caption).
        tracing: Log render traces at TRACE level.
    """

    grid_id: str | None = None
    width: int | float | str | None = None
    jquery_ui: bool = False
    default_style: NoticeStyle = NoticeStyle.GRID
    labels: Mapping[str, str] = field(default_factory=default_labels)
    tracing: bool = False

    @classmethod
    def from_dict(cls, data: TomlTable) -> GridConfig:
        """Build a `GridConfig` from a ``[grid]`` table.

        Raises:
            ConfigError: If a value has the wrong type or a style is unknown.
        """
        where = "[grid]"
        _warn_unknown_keys(data, _GRID_KEYS, where)

        grid_id = data.get("id")
        if grid_id is not None:
            grid_id = str(_expect(grid_id, (str, int), f"{where}.id"))

        width = data.get("width")
        if width is not None:
            width = _expect(width, (int, float, str), f"{where}.width")

        labels: Mapping[str, str] = default_labels()
        raw_labels = data.get("labels")
        if raw_labels is not None:
            table = cast("dict[str, Any]", _expect(raw_labels, dict, f"{where}.labels"))
            merged: dict[str, str] = dict(labels)
            for key, value in table.items():
                merged[key] = _expect(value, str, f"{where}.labels.{key}")
            labels = MappingProxyType(merged)

        default_style = NoticeStyle.GRID
        if "default_style" in data:
            default_style = _parse_style(data["default_style"], f"{where}.default_style")

        return cls(
            grid_id=grid_id,
            width=width,
            jquery_ui=_expect(data.get("jquery_ui", False), bool, f"{where}.jquery_ui"),
            default_style=default_style,
            labels=labels,
            tracing=_expect(data.get("tracing", False), bool, f"{where}.tracing"),
        )

    def with_theme(self, *, jquery_ui: bool) -> GridConfig:
        """Return a copy with the theme flag replaced."""
        return replace(self, jquery_ui=jquery_ui)

    def to_context(self) -> GridRenderContext:
        """Return the render context described by these settings."""
        return GridRenderContext(
            grid_id=self.grid_id,
            width=self.width,
            theme_flag=self.jquery_ui,
            labels=self.labels,
            tracing=self.tracing,
        )

    def new_registry(self) -> NoticeRegistry:
        """Return an empty registry bound to this grid."""
        return NoticeRegistry(self.to_context(), default_style=self.default_style)


def notice_options_from_dict(data: TomlTable, *, position: int) -> NoticeOptions:
    """Build `NoticeOptions` from one ``[[notice]]`` entry.

    Args:
        data: The entry table.
        position: 1-based position of the entry (for error messages).

    Raises:
        ConfigError: If ``text`` is missing or a value has the wrong type.
    """
    where = f"[[notice]] #{position}"
    _warn_unknown_keys(data, _NOTICE_KEYS, where)

    if "text" not in data:
        raise ConfigError(f"{where}: missing required key 'text'")
    text: str = _expect(data["text"], str, f"{where}.text")
    critical: bool = _expect(data.get("critical", False), bool, f"{where}.critical")

    style: NoticeStyle | None = None
    if "style" in data:
        style = _parse_style(data["style"], f"{where}.style")

    location_key: str | None = None
    if "location" in data:
        if "row" in data or "column" in data:
            raise ConfigError(f"{where}: use either 'location' or 'row'/'column', not both")
        location_key = _expect(data["location"], str, f"{where}.location")
    elif "row" in data or "column" in data:
        if "row" not in data or "column" not in data:
            raise ConfigError(f"{where}: 'row' and 'column' must be given together")
        location_key = make_location_key(
            _expect(data["row"], (str, int), f"{where}.row"),
            _expect(data["column"], (str, int), f"{where}.column"),
        )

    return NoticeOptions(text=text, critical=critical, style=style, location_key=location_key)
