# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for GridNotices: logging setup, TOML loading, grid settings.

Modules:
    - [`gridnotices.config.logging`][gridnotices.config.logging]: TRACE level,
      colored formatter, `setup_logging()`.
    - [`gridnotices.config.io`][gridnotices.config.io]: TOML parsing with tomlkit.
    - [`gridnotices.config.model`][gridnotices.config.model]: `GridConfig`.
"""

from __future__ import annotations
