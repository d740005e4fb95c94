"""Week date arithmetic for weekplan.

Weeks start on Monday. Week 1 is the week that contains January 1st, so the
first days of week 1 may fall in the previous calendar year.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from weekplan.i18n import month_abbr
from weekplan.models import DAYS_PER_WEEK, validate_week_ref


@dataclass(frozen=True)
class WeekDates:
    start: date
    end: date
    days: tuple[date, ...]


def start_of_week(d: date) -> date:
    """Monday on or before *d*."""
    return d - timedelta(days=d.weekday())


def week_dates(year: int, week_number: int) -> WeekDates:
    """Monday-to-Sunday dates of a week."""
    validate_week_ref(year, week_number)
    start = start_of_week(date(year, 1, 1) + timedelta(weeks=week_number - 1))
    days = tuple(start + timedelta(days=i) for i in range(DAYS_PER_WEEK))
    return WeekDates(start=start, end=days[-1], days=days)


def week_ref(d: date) -> tuple[int, int]:
    """(year, week_number) of the week containing *d*.

    The last days of December belong to week 1 of the next year when that
    week contains January 1st.
    """
    next_first = start_of_week(date(d.year + 1, 1, 1))
    if d >= next_first:
        return d.year + 1, 1
    first = start_of_week(date(d.year, 1, 1))
    return d.year, (start_of_week(d) - first).days // 7 + 1


def week_number(d: date) -> int:
    return week_ref(d)[1]


def current_week(today: date | None = None) -> tuple[int, int]:
    return week_ref(today or date.today())


def weeks_in_year(year: int) -> int:
    """Number of weeks in *year* (52 or 53), up to the week holding next January 1st."""
    first = start_of_week(date(year, 1, 1))
    next_first = start_of_week(date(year + 1, 1, 1))
    return (next_first - first).days // 7


def previous_week(year: int, week_number: int) -> tuple[int, int]:
    if week_number > 1:
        return year, week_number - 1
    return year - 1, weeks_in_year(year - 1)


def next_week(year: int, week_number: int) -> tuple[int, int]:
    if week_number < weeks_in_year(year):
        return year, week_number + 1
    return year + 1, 1


def format_week_range(year: int, week_number: int, locale: str = "en") -> str:
    """'3 Mar — 9 Mar 2025' style label."""
    wd = week_dates(year, week_number)
    start = f"{wd.start.day} {month_abbr(wd.start.month, locale)}"
    end = f"{wd.end.day} {month_abbr(wd.end.month, locale)} {wd.end.year}"
    return f"{start} — {end}"
