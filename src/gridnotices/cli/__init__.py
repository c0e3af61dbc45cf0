# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices CLI package.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        gridnotices = "gridnotices.cli.main:cli"

All subcommands live in [`gridnotices.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
