# topmark:header:start
#
#   project      : GridNotices
#   file         : exit_codes.py
#   file_relpath : src/gridnotices/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the GridNotices CLI.

Codes follow the BSD `sysexits` convention where practical. The one divergence
is ``HAS_CRITICAL=3``, returned by ``summary --strict`` when the document holds
a critical notice. It stays clear of 1 (generic failure) and 2 (Click usage errors).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the GridNotices CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        HAS_CRITICAL: ``summary --strict`` found at least one critical notice.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Malformed notices document or settings. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    HAS_CRITICAL = 3  # summary --strict

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
