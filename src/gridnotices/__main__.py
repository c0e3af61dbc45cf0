# topmark:header:start
#
#   project      : GridNotices
#   file         : __main__.py
#   file_relpath : src/gridnotices/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running GridNotices via ``python -m gridnotices``.

Delegates to `gridnotices.cli.main.cli`, the same entry point as the
``gridnotices`` console script.

Examples:
    Preview the markup of a notices document::

        python -m gridnotices render notices.toml
"""

from __future__ import annotations

from gridnotices.cli.main import cli

if __name__ == "__main__":
    cli()
