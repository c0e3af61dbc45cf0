# topmark:header:start
#
#   project      : GridNotices
#   file         : constants.py
#   file_relpath : src/gridnotices/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    GRIDNOTICES_VERSION: str = get_version("gridnotices")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    GRIDNOTICES_VERSION = "0.0.0"

# Environment variable consulted by `setup_logging()` when no level is given:
LOG_LEVEL_ENV_VAR: str = "GRIDNOTICES_LOG_LEVEL"

# Label key resolved through the render context for the wrapper caption:
SYSTEM_MESSAGE_LABEL_KEY: str = "SystemMessage"
DEFAULT_SYSTEM_MESSAGE_LABEL: str = "System message"

# DOM id prefix of the rendered wrapper table (followed by the grid id):
SYSTEM_MESSAGE_DOM_ID_PREFIX: str = "wgSystemMessage_"

# Separator between row id and column id in a location key:
LOCATION_KEY_SEPARATOR: str = ";"

# Tables of a notices document (and of `[tool.gridnotices]` in pyproject.toml):
GRID_TABLE: str = "grid"
NOTICE_ARRAY: str = "notice"
PYPROJECT_TOOL_TABLE: str = "gridnotices"
