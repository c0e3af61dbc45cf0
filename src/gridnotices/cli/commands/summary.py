# topmark:header:start
#
#   project      : GridNotices
#   file         : summary.py
#   file_relpath : src/gridnotices/cli/commands/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GridNotices `summary` command.

Lists the notices of a TOML document with their severity, style and location,
followed by per-severity counts. With ``--strict`` the command exits with
`ExitCode.HAS_CRITICAL` when a critical notice is present, so it can gate CI
jobs that validate fixture documents.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from gridnotices.cli.exit_codes import ExitCode
from gridnotices.cli.options import (
    OutputFormat,
    load_document_or_exit,
    notices_document_options,
    output_format_option,
)
from gridnotices.notice.model import NoticeSeverity

if TYPE_CHECKING:
    from pathlib import Path

    from gridnotices.cli.console import ConsoleLike
    from gridnotices.config.model import GridConfig
    from gridnotices.notice.registry import NoticeRegistry


def _summary_payload(config: GridConfig, registry: NoticeRegistry) -> dict[str, Any]:
    return {
        "grid": config.grid_id,
        "counts": registry.to_dict(),
        "renders": registry.render() is not None,
        "notices": [
            {
                "text": n.text,
                "severity": n.severity.value,
                "style": n.style.key,
                "location": n.location_key,
            }
            for n in registry
        ],
    }


def _emit_text(
    console: ConsoleLike,
    config: GridConfig,
    registry: NoticeRegistry,
    *,
    verbosity: int,
) -> None:
    color: bool = console.enable_color
    width: int = max(len(s.value) for s in NoticeSeverity) + 2

    if verbosity >= 0:
        title = f"Notices for grid {config.grid_id!r}:" if config.grid_id else "Notices:"
        console.print(console.styled(title, bold=True))
        for position, notice in enumerate(registry, start=1):
            tag: str = f"[{notice.severity.value}]".ljust(width)
            line: str = f"  {position:>3}. {notice.severity.paint(tag, enabled=color)} {notice.text}"
            if verbosity > 0:
                line += f"  (style={notice.style.key}, location={notice.location_key or '-'})"
            console.print(line)

    stats = registry.stats()
    console.print(
        f"{stats.total} notice(s): "
        f"{NoticeSeverity.ERROR.paint(f'{stats.n_error} error', enabled=color)}, "
        f"{NoticeSeverity.CRITICAL.paint(f'{stats.n_critical} critical', enabled=color)}"
    )


@click.command(
    name="summary",
    help="Summarize the notices of DOCUMENT by severity.",
)
@notices_document_options
@output_format_option
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help=f"Exit with code {int(ExitCode.HAS_CRITICAL)} if a critical notice is present.",
)
def summary_command(
    *,
    document: Path,
    config_path: Path | None,
    output_format: OutputFormat,
    strict: bool,
) -> None:
    """Summarize the notices of a document.

    Args:
        document (Path): The notices document.
        config_path (Path | None): Optional file with grid settings.
        output_format (OutputFormat): Plain text or JSON.
        strict (bool): Exit with `ExitCode.HAS_CRITICAL` if a critical notice exists.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    config, registry = load_document_or_exit(document, config_path)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps(_summary_payload(config, registry), indent=2))
    else:
        _emit_text(console, config, registry, verbosity=verbosity)

    if strict and registry.has_critical():
        ctx.exit(ExitCode.HAS_CRITICAL)
