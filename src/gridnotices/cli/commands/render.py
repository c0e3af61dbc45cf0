# topmark:header:start
#
#   project      : GridNotices
#   file         : render.py
#   file_relpath : src/gridnotices/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices `render` command.

Prints the system-message markup the grid would attach to its output for the
notices in a TOML document. Prints nothing when rendering is suppressed (no
notices, or no grid-styled notice).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gridnotices.cli.options import load_document_or_exit, notices_document_options
from gridnotices.config.logging import get_logger
from gridnotices.rendering.markup import WrapperTheme, render_notices

if TYPE_CHECKING:
    from pathlib import Path

    from gridnotices.cli.console import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render the notices of DOCUMENT into the grid's system-message markup.",
)
@notices_document_options
@click.option(
    "--theme",
    type=click.Choice(WrapperTheme.keys(), case_sensitive=False),
    default=None,
    help="Override the grid's theme (jquery_ui or plain).",
)
def render_command(
    *,
    document: Path,
    config_path: Path | None,
    theme: str | None,
) -> None:
    """Render the notices of a document.

    Args:
        document (Path): The notices document.
        config_path (Path | None): Optional file with grid settings.
        theme (str | None): Optional theme override.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    grid_config, registry = load_document_or_exit(document, config_path)

    if theme is None:
        markup: str | None = registry.render()
    else:
        jquery_ui: bool = WrapperTheme.parse(theme) is WrapperTheme.JQUERY_UI
        context = grid_config.with_theme(jquery_ui=jquery_ui).to_context()
        markup = render_notices(tuple(registry), context)

    if markup is None:
        logger.info("Nothing to render for %s", document)
        if verbosity > 0:
            console.warn(
                f"Nothing to render: {len(registry)} notice(s), none with the 'grid' style."
            )
        return

    console.print(markup)
