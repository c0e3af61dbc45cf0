# topmark:header:start
#
#   project      : GridNotices
#   file         : test_markup.py
#   file_relpath : tests/rendering/test_markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the system-message markup renderer."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest

from gridnotices.notice.model import Notice, NoticeStyle
from gridnotices.notice.registry import NoticeRegistry
from gridnotices.rendering.context import GridRenderContext
from gridnotices.rendering.markup import (
    TRACE_EMPTY,
    TRACE_FINISHED,
    TRACE_NO_GRID_STYLE,
    TRACE_START,
    WrapperTheme,
    has_grid_style,
    render_notices,
    system_message_dom_id,
)

if TYPE_CHECKING:
    from tests.conftest import RecordingContext

PLAIN_EXPECTED = (
    '<table id="wgSystemMessage_g1" class="wgsystemmessagebox" width="300" >'
    '<tr><td class="wgsystemmessagecell">System message</td></tr>'
    '<tr><td class="wgsystemmessagecell">'
    "Name required<br/>DB timeout<br/>"
    "</td></tr></table>"
)

JQUERY_UI_EXPECTED = (
    '<table id="wgSystemMessage_g1" class="ui-state-error wgsystemmessagebox"'
    ' style="margin-bottom: 5px" width="300">'
    '<tr><td class="ui-state-error-text wgsystemmessagecell">System message</td></tr>'
    '<tr><td class="wgsystemmessagecell">'
    "Name required<br/>DB timeout<br/>"
    "</td></tr></table>"
)


def _fill(registry: NoticeRegistry) -> None:
    registry.add("Name required", location_key="1;2")
    registry.add("DB timeout", critical=True)


def test_render_plain_theme(registry: NoticeRegistry) -> None:
    _fill(registry)

    assert registry.render() == PLAIN_EXPECTED
    assert registry.critical_count == 1


def test_render_jquery_ui_theme() -> None:
    registry = NoticeRegistry(GridRenderContext(grid_id="g1", width=300, theme_flag=True))
    _fill(registry)

    assert registry.render() == JQUERY_UI_EXPECTED


def test_render_empty_registry_is_none(registry: NoticeRegistry) -> None:
    assert registry.render() is None


def test_render_without_grid_style_is_none(registry: NoticeRegistry) -> None:
    registry.add("host only", style=NoticeStyle.PLAIN)
    registry.add("also host only", critical=True, style=NoticeStyle.PLAIN)

    assert registry.count == 2
    assert registry.render() is None


def test_one_grid_notice_renders_every_notice(registry: NoticeRegistry) -> None:
    """The body is not filtered by style once a grid-styled notice exists."""
    registry.add("page notice", style=NoticeStyle.PLAIN)
    registry.add("grid notice", style=NoticeStyle.GRID)

    markup = registry.render()

    assert markup is not None
    assert "page notice<br/>grid notice<br/>" in markup


def test_render_is_idempotent_and_does_not_mutate(registry: NoticeRegistry) -> None:
    _fill(registry)
    before = list(registry)

    assert registry.render() == registry.render()
    assert list(registry) == before


def test_texts_are_embedded_verbatim(registry: NoticeRegistry) -> None:
    registry.add("<b>bold</b> & more")
    markup = registry.render()
    assert markup is not None
    assert "<b>bold</b> & more<br/>" in markup


def test_missing_collaborator_values_embed_as_empty_text() -> None:
    context = GridRenderContext(grid_id=None, width=None, labels={})
    markup = render_notices([Notice("x")], context)

    assert markup is not None
    assert markup.startswith('<table id="wgSystemMessage_" class="wgsystemmessagebox" width="" >')
    assert '<td class="wgsystemmessagecell"></td>' in markup


def test_width_is_written_verbatim() -> None:
    markup = render_notices([Notice("x")], GridRenderContext(grid_id="g", width="100%"))
    assert markup is not None
    assert 'width="100%"' in markup


def test_label_is_looked_up_once(recording_context: RecordingContext) -> None:
    render_notices([Notice("x")], recording_context)
    assert recording_context.label_lookups == ["SystemMessage"]


def test_trace_points_when_rendering(recording_context: RecordingContext) -> None:
    render_notices([Notice("x")], recording_context)
    assert recording_context.traces == [TRACE_START, TRACE_FINISHED]


@pytest.mark.parametrize(
    ("notices", "expected_traces"),
    [
        ([], [TRACE_START, TRACE_EMPTY]),
        ([Notice("x", style=NoticeStyle.PLAIN)], [TRACE_START, TRACE_NO_GRID_STYLE]),
    ],
)
def test_trace_points_on_early_exit(
    recording_context: RecordingContext,
    notices: list[Notice],
    expected_traces: list[str],
) -> None:
    assert render_notices(notices, recording_context) is None
    assert recording_context.traces == expected_traces


def test_no_traces_when_tracing_is_off(recording_context: RecordingContext) -> None:
    recording_context.tracing = False
    render_notices([Notice("x")], recording_context)
    assert recording_context.traces == []


def test_context_without_tracing_hooks() -> None:
    """A context that only has the rendering attributes still renders."""
    context: Any = SimpleNamespace(
        width=10,
        grid_id="bare",
        theme_flag=False,
        lookup_label=lambda key: key,
    )
    markup = render_notices([Notice("x")], context)
    assert markup is not None
    assert 'id="wgSystemMessage_bare"' in markup
    assert ">SystemMessage</td>" in markup


def test_wrapper_theme_from_flag() -> None:
    assert WrapperTheme.from_flag(True) is WrapperTheme.JQUERY_UI
    assert WrapperTheme.from_flag(False) is WrapperTheme.PLAIN
    assert WrapperTheme.parse("jquery-ui") is WrapperTheme.JQUERY_UI


def test_helpers() -> None:
    assert system_message_dom_id("g7") == "wgSystemMessage_g7"
    assert system_message_dom_id(None) == "wgSystemMessage_"
    assert has_grid_style([Notice("a", style=NoticeStyle.PLAIN), Notice("b")]) is True
    assert has_grid_style([Notice("a", style=NoticeStyle.PLAIN)]) is False
