"""Plain-text export/import of a week (Apple Notes compatible).

Export layout:

    Week plan 03.03.25 - 09.03.25

    🎯 Week Focus:
    Ship the release

    Mon
    10:00 Standup
    ++ Review PRs

    Tue
    *

Import accepts the same layout in either language, plus hand-edited text
that only uses day markers (Mon, Пн, Monday, ...).
"""

from __future__ import annotations

import logging
from enum import Enum, auto

from weekplan.dates import week_dates
from weekplan.i18n import STRINGS, pluralize, resolve_locale, t
from weekplan.models import DAYS_PER_WEEK, Day, ImportResult, Week

logger = logging.getLogger(__name__)


EMPTY_DAY_PLACEHOLDER = "* "
FOCUS_GLYPH = "🎯"
BOM = "\ufeff"
DATE_FORMAT = "%d.%m.%y"

TITLE_MARKERS = tuple(s["week_plan"] for s in STRINGS.values())
FOCUS_WORDS = ("Focus", "Фокус")

# Checked regardless of the active locale
DAY_TOKENS: dict[str, int] = {}
for _tokens in (
    ["пн", "вт", "ср", "чт", "пт", "сб", "вс"],
    ["mon", "tue", "wed", "thu", "fri", "sat", "sun"],
    ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"],
):
    for _i, _token in enumerate(_tokens):
        DAY_TOKENS[_token] = _i


# ── Export ────────────────────────────────────────────────────


def export_week_to_text(week: Week, locale: str = "ru") -> str:
    """Render a week as a single text block. Output is byte-stable."""
    locale = resolve_locale(locale)
    wd = week_dates(week.year, week.week_number)
    title = f"{t('week_plan', locale)} {wd.start.strftime(DATE_FORMAT)} - {wd.end.strftime(DATE_FORMAT)}"

    parts = [title, ""]

    focus = (week.focus_text or "").strip()
    if focus:
        parts += [t("focus_header", locale), focus, ""]

    day_names = t("day_abbr", locale)
    for index in range(DAYS_PER_WEEK):
        content = week.day(index).content.strip()
        parts += [day_names[index], content or EMPTY_DAY_PLACEHOLDER, ""]

    return "\n".join(parts).strip()


def export_filename(week: Week) -> str:
    return f"week-{week.year}-{week.week_number:02d}.txt"


# ── Import ────────────────────────────────────────────────────


class ImportState(Enum):
    SEEKING = auto()
    IN_FOCUS = auto()
    IN_DAY = auto()


def parse_day_name(text: str) -> int:
    """Day index (0=Monday) for a day marker line, or -1."""
    return DAY_TOKENS.get(text.strip().casefold(), -1)


def _is_title(line_no: int, trimmed: str) -> bool:
    return line_no == 0 and any(marker in trimmed for marker in TITLE_MARKERS)


def _is_focus_opener(trimmed: str) -> bool:
    return trimmed.startswith(FOCUS_GLYPH) and any(w in trimmed for w in FOCUS_WORDS)


class _WeekTextReader:
    """Line-by-line state machine behind import_week_from_text."""

    def __init__(self) -> None:
        self.state = ImportState.SEEKING
        self.focus_text = ""
        self.days: list[Day] = []
        self.focus_lines: list[str] = []
        self.day_index = -1
        self.day_lines: list[str] = []

    def feed(self, line_no: int, line: str) -> None:
        trimmed = line.strip()

        if _is_title(line_no, trimmed):
            return

        if _is_focus_opener(trimmed):
            self._leave_state()
            self.focus_lines = []
            self.state = ImportState.IN_FOCUS
            return

        day_index = parse_day_name(trimmed)
        if day_index != -1:
            self._leave_state()
            self.day_index = day_index
            self.day_lines = []
            self.state = ImportState.IN_DAY
            return

        if self.state is ImportState.IN_FOCUS:
            if not trimmed and self.focus_lines:
                self._leave_state()
                self.state = ImportState.SEEKING
            elif trimmed:
                self.focus_lines.append(line)
        elif self.state is ImportState.IN_DAY:
            self.day_lines.append(line)

    def close(self) -> ImportResult | None:
        self._leave_state()
        self.state = ImportState.SEEKING
        if not self.days and not self.focus_text:
            return None
        return ImportResult(focus_text=self.focus_text, days=self.days)

    def _leave_state(self) -> None:
        """Flush the accumulator of the current state."""
        if self.state is ImportState.IN_FOCUS:
            if self.focus_lines:
                self.focus_text = "\n".join(self.focus_lines).strip()
            self.focus_lines = []
        elif self.state is ImportState.IN_DAY:
            self.days.append(Day(day_index=self.day_index, content="\n".join(self.day_lines).strip()))
            self.day_lines = []
            self.day_index = -1


def import_week_from_text(text: str) -> ImportResult | None:
    """Recover focus text and day contents from exported or pasted text.

    Returns None when neither a day nor focus text was found. Days missing
    from the text are missing from the result.
    """
    try:
        reader = _WeekTextReader()
        text = text.removeprefix(BOM).replace("\r\n", "\n")
        for line_no, line in enumerate(text.split("\n")):
            reader.feed(line_no, line)
        return reader.close()
    except Exception:
        logger.exception("Failed to parse week text")
        return None


def import_confirmation(result: ImportResult, locale: str | None = None) -> str:
    """Prompt shown before an import is applied."""
    focus = t("import_confirm_focus", locale) if result.updates_focus else ""
    days = pluralize("days", result.day_count, locale)
    return t("import_confirm", locale, days=days, focus=focus)
