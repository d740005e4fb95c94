"""Tests for weekplan/i18n.py."""

import pytest

from weekplan.i18n import STRINGS, day_abbr, day_name, pluralize, resolve_locale, t


@pytest.mark.parametrize("value,locale", [
    ("ru", "ru"),
    ("ru-RU", "ru"),
    ("ru_RU", "ru"),
    ("RU", "ru"),
    ("en", "en"),
    ("en-US", "en"),
    ("de", "en"),
    ("", "en"),
    (None, "en"),
])
def test_resolve_locale(value, locale):
    assert resolve_locale(value) == locale


def test_locales_have_same_core_keys():
    core = {"week_plan", "focus_header", "day_abbr", "day_names", "month_abbr", "import_confirm", "import_parse_error"}
    for strings in STRINGS.values():
        assert core <= strings.keys()
        assert len(strings["day_abbr"]) == 7
        assert len(strings["month_abbr"]) == 12


def test_day_names():
    assert day_abbr(0, "ru") == "Пн"
    assert day_abbr(6, "en") == "Sun"
    assert day_name(2, "en") == "Wednesday"


def test_t_formats_kwargs():
    assert t("week_title", "en", number=10) == "Week 10"
    assert t("week_title", "ru", number=3) == "Неделя 3"


@pytest.mark.parametrize("count,text", [
    (1, "1 line"),
    (2, "2 lines"),
    (0, "0 lines"),
])
def test_pluralize_en(count, text):
    assert pluralize("lines", count, "en") == text


@pytest.mark.parametrize("count,text", [
    (1, "1 строка"),
    (3, "3 строки"),
    (5, "5 строк"),
    (11, "11 строк"),
    (21, "21 строка"),
    (22, "22 строки"),
    (14, "14 строк"),
])
def test_pluralize_ru(count, text):
    assert pluralize("lines", count, "ru") == text
