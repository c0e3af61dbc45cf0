# topmark:header:start
#
#   project      : GridNotices
#   file         : version.py
#   file_relpath : src/gridnotices/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices `version` command.

Prints the current GridNotices version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from gridnotices.cli.options import OutputFormat, output_format_option
from gridnotices.constants import GRIDNOTICES_VERSION

if TYPE_CHECKING:
    from gridnotices.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of GridNotices.",
)
@output_format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of GridNotices.

    Args:
        output_format (OutputFormat): Plain text or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": GRIDNOTICES_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("GridNotices version:", bold=True, underline=True))
        console.print(f"    {console.styled(GRIDNOTICES_VERSION, bold=True)}")
    else:
        console.print(console.styled(GRIDNOTICES_VERSION, bold=True))
