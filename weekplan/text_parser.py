"""Day text markup parsing for weekplan.

Each line of a day is classified for display:

    WORK                 -> header
    ++ Buy milk          -> task, done
    +- Write report      -> task, partial
    - Follow up          -> subtask
    10 - 11:30 Deep work -> task with time "10 - 11:30"
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from weekplan.models import DayStats, ParsedLine


_STATUS_MARKERS = (
    ("++", "done", re.compile(r"\s*\+\+\s*")),
    ("+-", "partial", re.compile(r"\s*\+-\s*")),
)

# Capitalized word or acronym of two or more letters
_HEADER_RES = (
    re.compile(r"[A-ZА-ЯЁ][A-Za-zА-Яа-яЁё]+"),
    re.compile(r"[A-ZА-ЯЁ]{2,}"),
)
_SUBTASK_RE = re.compile(r"[—\-]")
_SUBTASK_PREFIX_RE = re.compile(r"^[—\-]\s*")

# 10:00, 10, 10-11, 10 - 11, 10:00 - 12:30, 10-11:00
_TIME_RE = re.compile(
    r"^([0-9]{1,2}(?::[0-9]{2})?\s*-\s*[0-9]{1,2}(?::[0-9]{2})?|[0-9]{1,2}:[0-9]{2}|[0-9]{1,2})\s+"
)
_RANGE_DASH_RE = re.compile(r"\s*-\s*")


def _is_header(trimmed: str) -> bool:
    return any(r.fullmatch(trimmed) for r in _HEADER_RES)


def _is_subtask(trimmed: str) -> bool:
    return _SUBTASK_RE.match(trimmed) is not None


def _strip_subtask_dash(display: str) -> str:
    return _SUBTASK_PREFIX_RE.sub("", display, count=1)


# Evaluated in order on the trimmed original line; first match wins.
_TYPE_RULES = (
    ("header", _is_header, None),
    ("subtask", _is_subtask, _strip_subtask_dash),
)


def _extract_status(trimmed: str) -> tuple[str, str]:
    for marker, status, pattern in _STATUS_MARKERS:
        if marker in trimmed:
            return status, pattern.sub("", trimmed)
    return "none", trimmed


def _extract_time(display: str) -> tuple[str | None, str]:
    m = _TIME_RE.match(display)
    if not m:
        return None, display
    time = _RANGE_DASH_RE.sub(" - ", m.group(1), count=1)
    return time, display[m.end():]


def parse_line(line: str) -> ParsedLine:
    trimmed = line.strip()
    status, display = _extract_status(trimmed)

    line_type = "task"
    for name, matches, transform in _TYPE_RULES:
        if matches(trimmed):
            line_type = name
            if transform is not None:
                display = transform(display)
            break

    time, display = _extract_time(display)
    return ParsedLine(text=line, display_text=display, type=line_type, status=status, time=time)


def parse_content(text: str) -> list[ParsedLine]:
    """Parse a day's raw text, one ParsedLine per "\\n"-separated line.

    Never fails: any string yields a best-effort classification.
    """
    return [parse_line(line) for line in text.split("\n")]


def count_stats(text: str) -> DayStats:
    """Count task lines and how many are done or partial.

    Headers and subtasks never count toward the total.
    """
    tasks = [line for line in parse_content(text) if line.type == "task"]
    return DayStats(
        total=len(tasks),
        done=sum(1 for t in tasks if t.status == "done"),
        partial=sum(1 for t in tasks if t.status == "partial"),
    )


def visible_lines(lines: Iterable[ParsedLine]) -> list[ParsedLine]:
    return [line for line in lines if line.is_visible]


def filter_by_status(lines: Iterable[ParsedLine], statuses: Iterable[str]) -> list[ParsedLine]:
    """Keep lines whose status is one of *statuses*.

    Headers pass through so filtered days keep their sections.
    """
    wanted = set(statuses)
    return [line for line in lines if line.type == "header" or line.status in wanted]


def count_lines(text: str) -> int:
    """Number of non-blank lines, as shown next to the week focus."""
    return sum(1 for line in text.split("\n") if line.strip())
