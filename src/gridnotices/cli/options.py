# topmark:header:start
#
#   project      : GridNotices
#   file         : options.py
#   file_relpath : src/gridnotices/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the GridNotices CLI.

This module centralizes reusable options (verbosity, color, input document)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from gridnotices.cli.errors import (
    ConfigCliError,
    FileNotFoundCliError,
    IOCliError,
    UsageCliError,
)
from gridnotices.config.io import load_grid_config, load_notices_document
from gridnotices.config.logging import get_logger
from gridnotices.core.enum_mixins import KeyedStrEnum
from gridnotices.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable

    from gridnotices.config.model import GridConfig
    from gridnotices.notice.registry import NoticeRegistry

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` / ``-q`` counts.

    Returns:
        ``verbose_count`` if ``-v`` was given, ``-quiet_count`` if ``-q`` was
        given, 0 otherwise.

    Raises:
        UsageCliError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise UsageCliError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet options that count occurrences."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


class OutputFormat(KeyedStrEnum):
    """Output format of reporting commands."""

    TEXT = ("text", "Human-readable text", ("default", "plain"))
    JSON = ("json", "JSON document")


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add a --format option parsed into `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(OutputFormat.keys(), case_sensitive=False),
        default=OutputFormat.TEXT.key,
        callback=lambda _ctx, _param, value: OutputFormat.parse(value),
        help=f"Output format ({', '.join(OutputFormat.keys())}).",
    )(f)


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for the JSON output format.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == "json":
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def notices_document_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the DOCUMENT argument and the --config option to a command."""
    f = click.argument(
        "document",
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Take grid settings from this file ([grid] or [tool.gridnotices.grid]).",
    )(f)
    return f


def _check_exists(path: Path) -> None:
    if not path.exists():
        raise FileNotFoundCliError(f"No such file: {path}")


def load_document_or_exit(
    document: Path,
    config_path: Path | None,
) -> tuple[GridConfig, NoticeRegistry]:
    """Load a notices document, mapping failures to CLI errors.

    Raises:
        FileNotFoundCliError: If ``document`` or ``config_path`` does not exist.
        ConfigCliError: If either file is malformed.
        IOCliError: If a file cannot be read.
    """
    _check_exists(document)
    if config_path is not None:
        _check_exists(config_path)
    try:
        grid_config: GridConfig | None = (
            load_grid_config(config_path) if config_path is not None else None
        )
        return load_notices_document(document, grid_config=grid_config)
    except ConfigError as exc:
        logger.debug("Rejected notices document %s: %s", document, exc)
        raise ConfigCliError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigCliError(f"Input is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise IOCliError(f"Cannot read {exc.filename or document}: {exc.strerror or exc}") from exc
