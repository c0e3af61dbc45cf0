# topmark:header:start
#
#   project      : GridNotices
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `render` command output and error exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridnotices.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    NOTICES_DOC,
    PLAIN_MARKUP,
    assert_SUCCESS,
    run_cli_in,
    write_document,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_render_prints_markup(tmp_path: Path) -> None:
    write_document(tmp_path, NOTICES_DOC)

    result = run_cli_in(tmp_path, ["--no-color", "render", "notices.toml"])

    assert_SUCCESS(result)
    assert result.stdout == PLAIN_MARKUP + "\n"


@mark_cli
def test_render_theme_override(tmp_path: Path) -> None:
    write_document(tmp_path, NOTICES_DOC)

    result = run_cli_in(
        tmp_path, ["--no-color", "render", "notices.toml", "--theme", "jquery_ui"]
    )

    assert_SUCCESS(result)
    assert result.stdout.startswith(
        '<table id="wgSystemMessage_g1" class="ui-state-error wgsystemmessagebox"'
    )
    assert "Name required<br/>DB timeout<br/>" in result.stdout


@mark_cli
def test_render_with_separate_grid_config(tmp_path: Path) -> None:
    write_document(tmp_path, '[[notice]]\ntext = "Only one"\n')
    write_document(
        tmp_path,
        '[tool.gridnotices.grid]\nid = "from-config"\nwidth = "100%"\n',
        name="pyproject.toml",
    )

    result = run_cli_in(
        tmp_path, ["--no-color", "render", "notices.toml", "--config", "pyproject.toml"]
    )

    assert_SUCCESS(result)
    assert 'id="wgSystemMessage_from-config"' in result.stdout
    assert 'width="100%"' in result.stdout
    assert "Only one<br/>" in result.stdout


@mark_cli
def test_render_prints_nothing_without_grid_notices(tmp_path: Path) -> None:
    write_document(tmp_path, '[[notice]]\ntext = "Page only"\nstyle = "plain"\n')

    result = run_cli_in(tmp_path, ["--no-color", "render", "notices.toml"])

    assert_SUCCESS(result)
    assert result.stdout == ""


@mark_cli
def test_render_verbose_explains_empty_output(tmp_path: Path) -> None:
    write_document(tmp_path, "")

    result = run_cli_in(tmp_path, ["--no-color", "-v", "render", "notices.toml"])

    assert_SUCCESS(result)
    assert "Nothing to render: 0 notice(s)" in result.output


@mark_cli
def test_render_missing_document(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", "absent.toml"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "No such file: absent.toml" in result.output


@mark_cli
def test_render_missing_config(tmp_path: Path) -> None:
    write_document(tmp_path, NOTICES_DOC)

    result = run_cli_in(
        tmp_path, ["--no-color", "render", "notices.toml", "--config", "grid.toml"]
    )

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@mark_cli
def test_render_malformed_document(tmp_path: Path) -> None:
    write_document(tmp_path, "[[notice]]\ncritical = true\n")

    result = run_cli_in(tmp_path, ["--no-color", "render", "notices.toml"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "missing required key 'text'" in result.output


@mark_cli
def test_render_config_without_grid_table(tmp_path: Path) -> None:
    write_document(tmp_path, NOTICES_DOC)
    write_document(tmp_path, '[[notice]]\ntext = "x"\n', name="grid.toml")

    result = run_cli_in(
        tmp_path, ["--no-color", "render", "notices.toml", "--config", "grid.toml"]
    )

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


@mark_cli
def test_render_non_utf8_document(tmp_path: Path) -> None:
    (tmp_path / "notices.toml").write_bytes(b'[[notice]]\ntext = "\xff\xfe"\n')

    result = run_cli_in(tmp_path, ["--no-color", "render", "notices.toml"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "not valid UTF-8" in result.output
