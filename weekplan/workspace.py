"""Workspace root, settings and path helpers for weekplan."""

from __future__ import annotations

import os
from pathlib import Path

from weekplan.fileio import read_yaml, write_yaml_atomic
from weekplan.i18n import resolve_locale
from weekplan.models import Settings, validate_week_ref


def workspace_root() -> Path:
    """Get the workspace root directory (holds settings.yaml and weeks/)."""
    return Path(
        os.environ.get("WEEKPLAN_ROOT", str(Path.home() / "weekplan"))
    ).expanduser().resolve()


def settings_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "settings.yaml"


def load_settings(root: Path | None = None) -> Settings:
    """Settings from settings.yaml; WEEKPLAN_LOCALE overrides the locale."""
    settings = Settings.from_dict(read_yaml(settings_path(root)))
    env_locale = os.environ.get("WEEKPLAN_LOCALE")
    if env_locale:
        settings.locale = env_locale
    settings.locale = resolve_locale(settings.locale)
    return settings


def save_settings(settings: Settings, root: Path | None = None) -> None:
    write_yaml_atomic(settings_path(root), settings.to_dict())


def get_locale(root: Path | None = None) -> str:
    return load_settings(root).locale


# ── Path helpers ──────────────────────────────────────────────

def weeks_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "weeks"


def week_path(year: int, week_number: int, root: Path | None = None) -> Path:
    validate_week_ref(year, week_number)
    return weeks_dir(root) / str(year) / f"week-{week_number:02d}.yaml"


def exports_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / load_settings(root).exports_dir
