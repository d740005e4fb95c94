"""Typed dataclasses for the weekplan data model.

All persisted models use from_dict/to_dict for YAML serialization.
Unknown keys are ignored; missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


LINE_TYPES = ("header", "task", "subtask", "note")
LINE_STATUSES = ("none", "done", "partial")

DAYS_PER_WEEK = 7
MAX_WEEK_NUMBER = 53


def validate_day_index(day_index: int) -> int:
    if not isinstance(day_index, int) or not 0 <= day_index < DAYS_PER_WEEK:
        raise ValueError(f"Invalid day index: {day_index!r} (expected 0-6)")
    return day_index


def validate_week_ref(year: int, week_number: int) -> tuple[int, int]:
    """Check a (year, week_number) pair, returning it unchanged."""
    if not isinstance(year, int) or year < 1 or year > 9998:
        raise ValueError(f"Invalid year: {year!r}")
    if not isinstance(week_number, int) or not 1 <= week_number <= MAX_WEEK_NUMBER:
        raise ValueError(f"Invalid week number: {week_number!r} (expected 1-53)")
    return year, week_number


# ── Parsed text ───────────────────────────────────────────────


@dataclass
class ParsedLine:
    """One line of a day's text, classified for display. Never persisted."""

    text: str
    display_text: str
    type: str = "task"  # header, task, subtask, note
    status: str = "none"  # none, done, partial
    time: str | None = None

    @property
    def is_visible(self) -> bool:
        """Blank lines without a time are not rendered."""
        return bool(self.display_text.strip()) or self.time is not None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "text": self.text,
            "displayText": self.display_text,
            "type": self.type,
            "status": self.status,
        }
        if self.time is not None:
            d["time"] = self.time
        return d


@dataclass
class DayStats:
    total: int = 0
    done: int = 0
    partial: int = 0

    @property
    def remaining(self) -> int:
        return self.total - self.done

    def to_dict(self) -> dict[str, int]:
        return {"total": self.total, "done": self.done, "partial": self.partial}


# ── Weeks ─────────────────────────────────────────────────────


@dataclass
class Day:
    day_index: int
    content: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Day:
        return cls(
            day_index=validate_day_index(int(d.get("day_index", 0))),
            content=str(d.get("content", "") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"day_index": self.day_index, "content": self.content}


def _empty_days() -> list[Day]:
    return [Day(day_index=i) for i in range(DAYS_PER_WEEK)]


@dataclass
class Week:
    """A planned week: focus text plus seven days of free-form content."""

    year: int
    week_number: int
    focus_text: str = ""
    retro_notes: str = ""
    days: list[Day] = field(default_factory=_empty_days)

    def __post_init__(self) -> None:
        validate_week_ref(self.year, self.week_number)
        by_index = {d.day_index: d for d in self.days}
        self.days = [by_index.get(i) or Day(day_index=i) for i in range(DAYS_PER_WEEK)]

    def day(self, day_index: int) -> Day:
        return self.days[validate_day_index(day_index)]

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Week:
        days = [Day.from_dict(x) for x in (d.get("days") or []) if isinstance(x, dict)]
        return cls(
            year=int(d.get("year", 0)),
            week_number=int(d.get("week_number", 0)),
            focus_text=str(d.get("focus_text", "") or ""),
            retro_notes=str(d.get("retro_notes", "") or ""),
            days=days,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "week_number": self.week_number,
            "focus_text": self.focus_text,
            "retro_notes": self.retro_notes,
            "days": [d.to_dict() for d in self.days],
        }


@dataclass
class ImportResult:
    """Week-shaped patch recovered from text.

    Only days found in the source are listed; the rest must be left alone.
    """

    focus_text: str = ""
    days: list[Day] = field(default_factory=list)

    @property
    def day_count(self) -> int:
        return len(self.days)

    @property
    def updates_focus(self) -> bool:
        return bool(self.focus_text)

    def to_dict(self) -> dict[str, Any]:
        return {
            "focusText": self.focus_text,
            "days": [{"dayIndex": d.day_index, "content": d.content} for d in self.days],
        }


# ── Settings ──────────────────────────────────────────────────


@dataclass
class Settings:
    locale: str = "en"
    exports_dir: str = "exports"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            locale=str(d.get("locale", "en") or "en"),
            exports_dir=str(d.get("exports_dir", "exports") or "exports"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"locale": self.locale, "exports_dir": self.exports_dir}
