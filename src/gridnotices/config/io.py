# topmark:header:start
#
#   project      : GridNotices
#   file         : io.py
#   file_relpath : src/gridnotices/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load notices documents and grid settings from TOML.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Parse errors raise `ConfigError`; I/O errors propagate as `OSError` so the
CLI can map them to its own exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from gridnotices.config.logging import get_logger
from gridnotices.config.model import GridConfig, notice_options_from_dict
from gridnotices.constants import GRID_TABLE, NOTICE_ARRAY, PYPROJECT_TOOL_TABLE
from gridnotices.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from gridnotices.config.logging import GridNoticesLogger
    from gridnotices.notice.model import NoticeOptions
    from gridnotices.notice.registry import NoticeRegistry

logger: GridNoticesLogger = get_logger(__name__)

TomlTable = dict[str, Any]

PYPROJECT_FILENAME: str = "pyproject.toml"


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def read_toml_document(path: Path) -> TomlTable:
    """Read and parse a TOML file.

    Raises:
        ConfigError: If the file is not valid TOML.
        OSError: If the file cannot be read.
    """
    text: str = path.read_text(encoding="utf-8")
    return parse_toml_text(text, source=str(path))


def tool_table(data: TomlTable) -> TomlTable:
    """Return the ``[tool.gridnotices]`` table of a parsed pyproject.toml (or ``{}``)."""
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return {}
    table: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_TABLE, {})
    return cast("TomlTable", table) if isinstance(table, dict) else {}


def _document_root(path: Path, data: TomlTable) -> TomlTable:
    if path.name == PYPROJECT_FILENAME:
        return tool_table(data)
    return data


def grid_config_from_document(data: TomlTable) -> GridConfig:
    """Return the `GridConfig` of a notices document (defaults if no ``[grid]``)."""
    grid: Any = data.get(GRID_TABLE, {})
    if not isinstance(grid, dict):
        raise ConfigError(f"[{GRID_TABLE}] must be a table, got {type(grid).__name__}")
    return GridConfig.from_dict(cast("TomlTable", grid))


def notice_options_from_document(data: TomlTable) -> list[NoticeOptions]:
    """Return the ``[[notice]]`` entries of a notices document, in order."""
    entries: Any = data.get(NOTICE_ARRAY, [])
    if not isinstance(entries, list):
        raise ConfigError(f"[[{NOTICE_ARRAY}]] must be an array of tables")
    options: list[NoticeOptions] = []
    for position, entry in enumerate(cast("list[Any]", entries), start=1):
        if not isinstance(entry, dict):
            raise ConfigError(f"[[{NOTICE_ARRAY}]] #{position}: expected a table")
        options.append(notice_options_from_dict(cast("TomlTable", entry), position=position))
    return options


def load_notices_document(
    path: Path,
    *,
    grid_config: GridConfig | None = None,
) -> tuple[GridConfig, NoticeRegistry]:
    """Load a notices document and return its grid settings and populated registry.

    For a file named ``pyproject.toml`` the document is read from
    ``[tool.gridnotices]``. If ``grid_config`` is given it replaces the
    document's own ``[grid]`` table.

    Raises:
        ConfigError: If the document is malformed.
        OSError: If the file cannot be read.
    """
    data: TomlTable = _document_root(path, read_toml_document(path))
    config: GridConfig = grid_config or grid_config_from_document(data)
    registry: NoticeRegistry = config.new_registry()
    for options in notice_options_from_document(data):
        registry.add_options(options)
    logger.debug("Loaded %d notice(s) from %s", len(registry), path)
    return config, registry


def load_grid_config(path: Path) -> GridConfig:
    """Return the grid settings stored in ``path``.

    Reads ``[grid]`` (or ``[tool.gridnotices.grid]`` for ``pyproject.toml``).

    Raises:
        ConfigError: If the file is malformed or has no grid table.
        OSError: If the file cannot be read.
    """
    data: TomlTable = _document_root(path, read_toml_document(path))
    if GRID_TABLE not in data:
        raise ConfigError(f"{path}: no [{GRID_TABLE}] table found")
    return grid_config_from_document(data)
