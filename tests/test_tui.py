"""Tests for the Rich markup rendering in cli/tui.py."""

from datetime import date

from cli.tui import day_markup, line_markup
from weekplan.models import Day, Week
from weekplan.text_parser import parse_line


def test_line_markup_done():
    markup = line_markup(parse_line("++ Buy milk"))
    assert "[strike dim]Buy milk[/]" in markup
    assert "✓" in markup


def test_line_markup_partial_subtask():
    markup = line_markup(parse_line("- +- Draft"))
    assert markup.startswith("    ")
    assert "◐" in markup


def test_line_markup_header_and_time():
    assert line_markup(parse_line("WORK")) == "[bold]WORK[/]"
    assert line_markup(parse_line("10:00 Standup")).startswith("[blue]10:00")


def test_line_markup_escapes_brackets():
    assert "\\[x]" in line_markup(parse_line("[x] thing"))


def _week() -> Week:
    return Week(year=2025, week_number=10, days=[Day(0, "WORK\n++ Done\nTodo")])


def test_day_markup():
    markup = day_markup(_week(), 0, "en", today=date(2025, 1, 1))
    rows = markup.split("\n")
    assert rows[0] == "[b]3[/b] Monday  [dim]1/2[/]"
    assert rows[1] == "[bold]WORK[/]"
    assert len(rows) == 4


def test_day_markup_today_badge():
    markup = day_markup(_week(), 0, "ru", today=date(2025, 3, 3))
    assert "Понедельник" in markup
    assert "Сегодня" in markup


def test_day_markup_only_incomplete():
    rows = day_markup(_week(), 0, "en", only_incomplete=True, today=date(2025, 1, 1)).split("\n")
    assert rows[1:] == ["[bold]WORK[/]", "Todo"]


def test_day_markup_empty_day():
    markup = day_markup(_week(), 3, "en", today=date(2025, 1, 1))
    assert "No tasks" in markup
