"""Week persistence for weekplan.

Each week lives in weeks/<year>/week-<ww>.yaml. Writes are atomic and the
last write wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from weekplan.fileio import read_yaml, write_text_atomic, write_yaml_atomic
from weekplan.models import ImportResult, Week, validate_day_index
from weekplan.week_export import export_filename, export_week_to_text
from weekplan.workspace import exports_dir, get_locale, week_path

logger = logging.getLogger(__name__)


def load_week(year: int, week_number: int, root: Path | None = None) -> Week:
    """Load a week, or an empty one if nothing was saved yet."""
    data = read_yaml(week_path(year, week_number, root))
    if not data:
        return Week(year=year, week_number=week_number)
    data["year"] = year
    data["week_number"] = week_number
    return Week.from_dict(data)


def save_week(week: Week, root: Path | None = None) -> None:
    path = week_path(week.year, week.week_number, root)
    write_yaml_atomic(path, week.to_dict())
    logger.info("Saved week %s-%02d", week.year, week.week_number)


def update_day(year: int, week_number: int, day_index: int, content: str, root: Path | None = None) -> Week:
    validate_day_index(day_index)
    week = load_week(year, week_number, root)
    week.day(day_index).content = content
    save_week(week, root)
    return week


def update_focus(year: int, week_number: int, text: str, root: Path | None = None) -> Week:
    week = load_week(year, week_number, root)
    week.focus_text = text
    save_week(week, root)
    return week


def update_retro(year: int, week_number: int, notes: str, root: Path | None = None) -> Week:
    week = load_week(year, week_number, root)
    week.retro_notes = notes
    save_week(week, root)
    return week


def apply_import(year: int, week_number: int, result: ImportResult, root: Path | None = None) -> Week:
    """Apply an import patch to a stored week.

    Only the days present in the patch are replaced, and the focus text only
    when the patch carries one. Unmentioned days keep their content.
    """
    week = load_week(year, week_number, root)
    if result.focus_text:
        week.focus_text = result.focus_text
    for day in result.days:
        week.day(day.day_index).content = day.content
    save_week(week, root)
    logger.info(
        "Imported %d day(s) into week %s-%02d (focus updated: %s)",
        result.day_count, year, week_number, result.updates_focus,
    )
    return week


def write_export(week: Week, locale: str | None = None, root: Path | None = None) -> Path:
    """Write the week's text export into the exports dir, returning its path."""
    if locale is None:
        locale = get_locale(root)
    path = exports_dir(root) / export_filename(week)
    write_text_atomic(path, export_week_to_text(week, locale))
    logger.info("Exported week %s-%02d to %s", week.year, week.week_number, path)
    return path
