"""Tests for weekplan/models.py: dataclass serialization and validation."""

import pytest

from weekplan.models import (
    Day,
    DayStats,
    ImportResult,
    ParsedLine,
    Settings,
    Week,
    validate_day_index,
    validate_week_ref,
)


def test_week_defaults_to_seven_empty_days():
    week = Week(year=2025, week_number=10)
    assert [d.day_index for d in week.days] == list(range(7))
    assert all(d.content == "" for d in week.days)


def test_week_fills_and_orders_days():
    week = Week(year=2025, week_number=10, days=[Day(3, "Thu"), Day(0, "Mon")])
    assert [d.day_index for d in week.days] == list(range(7))
    assert week.day(0).content == "Mon"
    assert week.day(3).content == "Thu"
    assert week.day(6).content == ""


def test_week_from_dict():
    week = Week.from_dict({
        "year": 2025,
        "week_number": 10,
        "focus_text": "Ship",
        "days": [{"day_index": 2, "content": "Gym"}],
        "unknown_key": True,
    })
    assert week.focus_text == "Ship"
    assert week.retro_notes == ""
    assert week.day(2).content == "Gym"
    assert len(week.days) == 7


def test_week_to_dict_round_trip():
    week = Week(year=2025, week_number=10, focus_text="F", retro_notes="R", days=[Day(1, "x")])
    d = week.to_dict()
    assert d["days"][1] == {"day_index": 1, "content": "x"}
    assert Week.from_dict(d) == week


def test_week_validation():
    with pytest.raises(ValueError):
        Week(year=2025, week_number=0)
    with pytest.raises(ValueError):
        Week(year=2025, week_number=54)
    with pytest.raises(ValueError):
        Week.from_dict({"year": 2025, "week_number": 10, "days": [{"day_index": 7}]})


def test_week_day_out_of_range():
    week = Week(year=2025, week_number=10)
    with pytest.raises(ValueError):
        week.day(-1)


def test_validators():
    assert validate_day_index(6) == 6
    assert validate_week_ref(2025, 53) == (2025, 53)
    with pytest.raises(ValueError):
        validate_day_index(7)
    with pytest.raises(ValueError):
        validate_week_ref(0, 1)


def test_parsed_line_to_dict():
    line = ParsedLine(text="10:00 Standup", display_text="Standup", time="10:00")
    assert line.to_dict() == {
        "text": "10:00 Standup",
        "displayText": "Standup",
        "type": "task",
        "status": "none",
        "time": "10:00",
    }
    assert "time" not in ParsedLine(text="a", display_text="a").to_dict()


def test_parsed_line_visibility():
    assert ParsedLine(text="", display_text="").is_visible is False
    assert ParsedLine(text="10 ", display_text="", time="10").is_visible is True


def test_day_stats():
    stats = DayStats(total=4, done=1, partial=2)
    assert stats.remaining == 3
    assert stats.to_dict() == {"total": 4, "done": 1, "partial": 2}


def test_import_result_properties():
    result = ImportResult(days=[Day(0, "a"), Day(4, "b")])
    assert result.day_count == 2
    assert result.updates_focus is False
    assert ImportResult(focus_text="F").updates_focus is True


def test_settings_from_dict():
    assert Settings.from_dict(None) == Settings()
    s = Settings.from_dict({"locale": "ru", "other": 1})
    assert s.locale == "ru"
    assert s.exports_dir == "exports"
    assert s.to_dict() == {"locale": "ru", "exports_dir": "exports"}
