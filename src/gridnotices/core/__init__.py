# topmark:header:start
#
#   project      : GridNotices
#   file         : __init__.py
#   file_relpath : src/gridnotices/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks (errors, enum helpers)."""

from __future__ import annotations
