# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices CLI subcommands (`render`, `summary`, `version`)."""

from __future__ import annotations
