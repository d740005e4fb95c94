"""Tests for weekplan/text_parser.py."""

import pytest

from weekplan.text_parser import (
    count_lines,
    count_stats,
    filter_by_status,
    parse_content,
    parse_line,
    visible_lines,
)


def test_done_marker():
    line = parse_content("++ Buy milk")[0]
    assert line.status == "done"
    assert line.display_text == "Buy milk"
    assert line.type == "task"
    assert line.time is None


def test_partial_marker_anywhere():
    line = parse_line("Write +- report")
    assert line.status == "partial"
    assert line.display_text == "Writereport"


def test_done_marker_wins_over_partial():
    line = parse_line("++ A +- B")
    assert line.status == "done"
    assert line.display_text == "A +- B"


def test_all_done_markers_removed():
    line = parse_line("++ Buy ++ milk ++")
    assert line.display_text == "Buymilk"


def test_time_single():
    line = parse_line("10:00 Standup")
    assert line.time == "10:00"
    assert line.display_text == "Standup"


def test_time_range_normalized():
    line = parse_line("10 - 11:30 Deep work")
    assert line.time == "10 - 11:30"
    assert line.display_text == "Deep work"


@pytest.mark.parametrize("raw,time", [
    ("9 Gym", "9"),
    ("10-11 Gym", "10 - 11"),
    ("10  -11:00 Gym", "10 - 11:00"),
    ("09:15 - 10:45 Gym", "09:15 - 10:45"),
])
def test_time_shapes(raw, time):
    line = parse_line(raw)
    assert line.time == time
    assert line.display_text == "Gym"


def test_time_needs_trailing_whitespace():
    line = parse_line("10:00")
    assert line.time is None
    assert line.display_text == "10:00"


def test_year_is_not_a_time():
    line = parse_line("2024 plans")
    assert line.time is None
    assert line.display_text == "2024 plans"


def test_time_after_status_marker():
    line = parse_line("++ 10:00 Standup")
    assert line.status == "done"
    assert line.time == "10:00"
    assert line.display_text == "Standup"


@pytest.mark.parametrize("raw", ["WORK", "Monday", "Shopping", "Понедельник", "ЗАДАЧИ", "Ёлка"])
def test_headers(raw):
    assert parse_line(raw).type == "header"


@pytest.mark.parametrize("raw", ["Monday Review", "work", "Q3", "Plan!", "A1", "C"])
def test_not_headers(raw):
    assert parse_line(raw).type == "task"


def test_header_with_status_marker_uses_original_line():
    # "WORK ++" is not a single word, so it stays a task
    line = parse_line("WORK ++")
    assert line.type == "task"
    assert line.status == "done"
    assert line.display_text == "WORK"


def test_subtask_hyphen():
    line = parse_line("- Follow up")
    assert line.type == "subtask"
    assert line.display_text == "Follow up"


def test_subtask_em_dash_with_status():
    line = parse_line("— ++ Call mom")
    assert line.type == "subtask"
    assert line.status == "done"
    assert line.display_text == "Call mom"


def test_subtask_with_time():
    line = parse_line("  - 9:30 Call  ")
    assert line.type == "subtask"
    assert line.time == "9:30"
    assert line.display_text == "Call"


def test_raw_text_kept():
    line = parse_line("  ++ Buy milk  ")
    assert line.text == "  ++ Buy milk  "
    assert line.display_text == "Buy milk"


@pytest.mark.parametrize("raw", ["Write report", "  Call Bob  ", "Ping the team about Q3"])
def test_plain_lines_unchanged(raw):
    line = parse_content(raw)[0]
    assert line.display_text == raw.strip()
    assert line.status == "none"


def test_one_line_per_segment():
    assert len(parse_content("")) == 1
    assert len(parse_content("a\nb")) == 2
    assert len(parse_content("Mon\n")) == 2


def test_empty_line():
    line = parse_content("")[0]
    assert line.type == "task"
    assert line.status == "none"
    assert line.display_text == ""
    assert line.is_visible is False


def test_parse_is_deterministic():
    text = "WORK\n10 - 11 Sync\n++ Done\n- sub"
    assert parse_content(text) == parse_content(text)


def test_count_stats():
    stats = count_stats("++ A\n+- B\nC")
    assert (stats.total, stats.done, stats.partial) == (3, 1, 1)
    assert stats.remaining == 2


def test_count_stats_ignores_headers_and_subtasks():
    stats = count_stats("WORK\n- ++ sub\n++ task")
    assert (stats.total, stats.done, stats.partial) == (1, 1, 0)


def test_visible_lines():
    lines = parse_content("A\n\n   \n10 \nB")
    assert [l.display_text for l in visible_lines(lines)] == ["A", "10", "B"]


def test_filter_by_status_keeps_headers():
    lines = parse_content("WORK\n++ Done\n+- Half\nTodo")
    kept = filter_by_status(lines, ("none", "partial"))
    assert [l.display_text for l in kept] == ["WORK", "Half", "Todo"]


def test_count_lines():
    assert count_lines("") == 0
    assert count_lines("a\n\n b \n") == 2
