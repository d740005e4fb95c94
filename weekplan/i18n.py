"""Locale strings for weekplan (Russian and English)."""

from __future__ import annotations

from typing import Any


DEFAULT_LOCALE = "en"

STRINGS: dict[str, dict[str, Any]] = {
    "en": {
        "week_plan": "Week plan",
        "focus_header": "🎯 Week Focus:",
        "focus_title": "Week Focus",
        "day_abbr": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
        "day_names": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
        "month_abbr": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
        "week_title": "Week {number}",
        "today": "Today",
        "no_tasks": "No tasks",
        "more": "more...",
        "lines_one": "{count} line",
        "lines_other": "{count} lines",
        "import_confirm": "Import data?\n\n{days} will be updated.\n{focus}\n\nCurrent data will be replaced.",
        "days_one": "{count} day",
        "days_other": "{count} days",
        "import_confirm_focus": "Week focus will be updated.",
        "import_success": "Data imported successfully!",
        "import_parse_error": "Failed to parse format. Please check that the text contains the correct structure.",
        "export_tooltip": "Export week to text file",
        "import_tooltip": "Import week from text file",
    },
    "ru": {
        "week_plan": "План на неделю",
        "focus_header": "🎯 Фокус недели:",
        "focus_title": "Фокус недели",
        "day_abbr": ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"],
        "day_names": ["Понедельник", "Вторник", "Среда", "Четверг", "Пятница", "Суббота", "Воскресенье"],
        "month_abbr": ["янв", "фев", "мар", "апр", "мая", "июн", "июл", "авг", "сен", "окт", "ноя", "дек"],
        "week_title": "Неделя {number}",
        "today": "Сегодня",
        "no_tasks": "Нет задач",
        "more": "ещё...",
        "lines_one": "{count} строка",
        "lines_few": "{count} строки",
        "lines_many": "{count} строк",
        "import_confirm": "Импортировать данные?\n\nБудет обновлено: {days}.\n{focus}\n\nТекущие данные будут заменены.",
        "days_one": "{count} день",
        "days_few": "{count} дня",
        "days_many": "{count} дней",
        "import_confirm_focus": "Фокус недели будет обновлен.",
        "import_success": "Данные успешно импортированы!",
        "import_parse_error": "Не удалось распознать формат. Проверьте что текст содержит правильную структуру.",
        "export_tooltip": "Экспорт недели в текстовый файл",
        "import_tooltip": "Импорт недели из текстового файла",
    },
}


def resolve_locale(value: str | None) -> str:
    """Map 'ru', 'ru-RU', 'RU_ru' to 'ru'; anything else to the default."""
    lang = (value or "").strip().lower().replace("_", "-").split("-")[0]
    return lang if lang in STRINGS else DEFAULT_LOCALE


def t(key: str, locale: str | None = None, **kwargs: Any) -> Any:
    value = STRINGS[resolve_locale(locale)][key]
    if kwargs and isinstance(value, str):
        return value.format(**kwargs)
    return value


def day_abbr(day_index: int, locale: str | None = None) -> str:
    return t("day_abbr", locale)[day_index]


def day_name(day_index: int, locale: str | None = None) -> str:
    return t("day_names", locale)[day_index]


def month_abbr(month: int, locale: str | None = None) -> str:
    return t("month_abbr", locale)[month - 1]


def plural_key(count: int, locale: str | None = None) -> str:
    """CLDR plural category suffix: one, few, many or other."""
    if resolve_locale(locale) == "ru":
        mod10, mod100 = count % 10, count % 100
        if mod10 == 1 and mod100 != 11:
            return "one"
        if 2 <= mod10 <= 4 and not 12 <= mod100 <= 14:
            return "few"
        return "many"
    return "one" if count == 1 else "other"


def pluralize(base: str, count: int, locale: str | None = None) -> str:
    return t(f"{base}_{plural_key(count, locale)}", locale, count=count)
