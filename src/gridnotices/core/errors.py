# topmark:header:start
#
#   project      : GridNotices
#   file         : errors.py
#   file_relpath : src/gridnotices/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the GridNotices core.

Policy:
    Invalid *values* raise: building a notice from a non-string text, a
    non-bool critical flag, a non-`NoticeStyle` style or a non-string location
    key raises `InvalidNoticeError`; malformed configuration raises `ConfigError`.

    Misses return sentinels: a lookup that finds nothing returns ``None``,
    a suppressed render returns ``None`` and an out-of-range removal is a
    silent no-op.

CLI-facing exceptions with exit codes live in
[`gridnotices.cli.errors`][gridnotices.cli.errors].
"""

from __future__ import annotations


class GridNoticesError(Exception):
    """Base class for all GridNotices errors."""


class InvalidNoticeError(GridNoticesError, TypeError):
    """A notice was built from a value of the wrong type (e.g. ``text=None``)."""


class ConfigError(GridNoticesError, ValueError):
    """Configuration or notices document is malformed."""
