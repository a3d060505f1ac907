"""Row derivation, rendering and selection parsing."""

from __future__ import annotations

import pytest

from core.errors import FormatError
from workspaces.renderer import parse_selection, render_lines, render_list_entries
from world_model.desktop_state import DesktopState, merge_rows


def test_render_lines_plain_listing() -> None:
    rows = merge_rows(DesktopState(workspace_count=3, active_index=1, dynamic=False), ["Web", "Chat"])

    assert render_lines(rows) == ["1: Web", "2: Chat", "3: Workspace 3"]
    assert [row.active for row in rows] == [False, True, False]


def test_render_lines_highlights_active_row_for_fuzzy_finder() -> None:
    rows = merge_rows(DesktopState(workspace_count=3, active_index=1), ["Web", "Chat"])

    assert render_lines(rows, highlight_color="#ff5555") == [
        "1: Web",
        "<span foreground='#ff5555'>2: Chat</span>",
        "3: Workspace 3",
    ]


def test_dynamic_mode_overrides_last_label() -> None:
    rows = merge_rows(DesktopState(workspace_count=3, active_index=0, dynamic=True), ["A", "B", "C", "D"])

    assert [row.label for row in rows] == ["A", "B", "New Workspace"]


def test_no_active_workspace_marks_nothing() -> None:
    rows = merge_rows(DesktopState(workspace_count=2, active_index=None), [])

    assert not any(row.active for row in rows)
    assert render_lines(rows, highlight_color="red") == ["1: Workspace 1", "2: Workspace 2"]


def test_render_list_entries_pads_active_marker() -> None:
    rows = merge_rows(DesktopState(workspace_count=3, active_index=0), ["Web", "Long name here"])

    assert render_list_entries(rows) == [
        "(1) Web             *",
        "(2) Long name here",
        "(3) Workspace 3",
    ]


def test_parse_selection_basic() -> None:
    selection = parse_selection("3: Editor")

    assert selection.index == 3
    assert selection.label == "Editor"


def test_parse_selection_trims_both_sides() -> None:
    selection = parse_selection("  2 :  Build ")

    assert selection.index == 2
    assert selection.label == "Build"


def test_parse_selection_splits_on_first_colon_only() -> None:
    selection = parse_selection("4: notes: draft\n")

    assert selection.index == 4
    assert selection.label == "notes: draft"


def test_parse_selection_strips_markup_from_highlighted_line() -> None:
    selection = parse_selection("<span foreground='#ff5555'>2: Chat</span>")

    assert selection.index == 2
    assert selection.label == "Chat"


@pytest.mark.parametrize("line", ["no colon here", "", "   \n", "two: Chat", ": Chat"])
def test_parse_selection_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(FormatError):
        parse_selection(line)


@pytest.mark.parametrize("line", ["1_0: Web", "３: Web", "٣: Web", "+: Web", "1.0: Web"])
def test_parse_selection_accepts_only_ascii_integers(line: str) -> None:
    with pytest.raises(FormatError):
        parse_selection(line)


def test_parse_selection_allows_signed_index() -> None:
    assert parse_selection("-1: Web").index == -1
    assert parse_selection("+2: Chat").index == 2


def test_markup_feed_escapes_labels() -> None:
    rows = merge_rows(DesktopState(workspace_count=2, active_index=1), ["Tom & Jerry", "<b>old</b>"])

    assert render_lines(rows, highlight_color="#ff5555") == [
        "1: Tom &amp; Jerry",
        "<span foreground='#ff5555'>2: &lt;b&gt;old&lt;/b&gt;</span>",
    ]
    assert render_lines(rows) == ["1: Tom & Jerry", "2: <b>old</b>"]


def test_parse_selection_unescapes_markup_feed_label() -> None:
    selection = parse_selection("<span foreground='#ff5555'>2: &lt;b&gt;old&lt;/b&gt; &amp; new</span>")

    assert selection.index == 2
    assert selection.label == "<b>old</b> & new"
