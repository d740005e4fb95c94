"""Shared test fixtures for weekplan tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
import yaml

from weekplan.models import Day, Week


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with settings and one saved week."""
    root = tmp_path / "workspace"
    (root / "weeks" / "2025").mkdir(parents=True)

    (root / "settings.yaml").write_text(
        yaml.dump({"locale": "en", "exports_dir": "exports"}), encoding="utf-8"
    )

    week = {
        "year": 2025,
        "week_number": 10,
        "focus_text": "Ship v2\nHire designer",
        "retro_notes": "",
        "days": [
            {"day_index": 0, "content": "WORK\n10:00 Standup\n++ Review PRs\n+- Write report\n- Ping Anna"},
            {"day_index": 2, "content": "Gym"},
        ],
    }
    (root / "weeks" / "2025" / "week-10.yaml").write_text(
        yaml.dump(week, allow_unicode=True), encoding="utf-8"
    )

    saved = {k: os.environ.pop(k) for k in ("WEEKPLAN_LOCALE", "WEEKPLAN_USERNAME", "WEEKPLAN_PASSWORD") if k in os.environ}
    os.environ["WEEKPLAN_ROOT"] = str(root)
    yield root
    # Cleanup
    if "WEEKPLAN_ROOT" in os.environ:
        del os.environ["WEEKPLAN_ROOT"]
    os.environ.update(saved)


@pytest.fixture
def full_week() -> Week:
    """A week with focus text and all seven days populated."""
    return Week(
        year=2025,
        week_number=10,
        focus_text="  Ship v2\n++ Hire designer\n",
        days=[
            Day(0, "WORK\n10:00 Standup\n++ Review PRs\n+- Write report\n- Ping Anna"),
            Day(1, "9 - 10:30 Deep work\n\nHOME\n— ++ Call mom"),
            Day(2, "Gym\n18 Dinner with Sam"),
            Day(3, "++ Pay rent\n+- Tax forms"),
            Day(4, "ПРОЕКТ\n- Обновить документацию\n++ 11:00 Созвон"),
            Day(5, "Market\n- apples\n- bread"),
            Day(6, "  Rest  \n"),
        ],
    )
