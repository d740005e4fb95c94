"""File I/O for the weekplan workspace.

Week files and exports are replaced atomically: content goes to a locked
temp file in the target directory, which is then renamed over the target.
"""

from __future__ import annotations

import fcntl
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, TextIO

import yaml


def read_text(path: Path) -> str:
    """File contents, or "" when the file does not exist."""
    return path.read_text(encoding="utf-8") if path.exists() else ""


def read_yaml(path: Path) -> dict[str, Any]:
    """YAML mapping from *path*; {} when missing, blank or not a mapping."""
    text = read_text(path)
    data = yaml.safe_load(text) if text.strip() else None
    return data if isinstance(data, dict) else {}


def dump_yaml(data: dict[str, Any]) -> str:
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


@contextmanager
def replacing(path: Path, suffix: str = ".tmp") -> Iterator[TextIO]:
    """Yield a locked temp file that replaces *path* on clean exit."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=suffix)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                yield f
                f.flush()
                os.fsync(f.fileno())
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def write_text_atomic(path: Path, content: str) -> None:
    with replacing(path, suffix=".txt") as f:
        f.write(content)


def write_yaml_atomic(path: Path, data: dict[str, Any]) -> None:
    with replacing(path, suffix=".yaml") as f:
        f.write(dump_yaml(data))
