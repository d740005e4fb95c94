from __future__ import annotations

import logging
import os
import secrets
from datetime import date
from typing import Any

from fastapi import Body, Depends, FastAPI, File, Form, HTTPException, UploadFile, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from weekplan import (
    ParsedLine,
    Week,
    apply_import,
    count_lines,
    count_stats,
    current_week,
    export_filename,
    export_week_to_text,
    filter_by_status,
    format_week_range,
    get_locale,
    import_confirmation,
    import_week_from_text,
    load_week,
    next_week,
    parse_content,
    previous_week,
    resolve_locale,
    update_day,
    update_focus,
    update_retro,
    visible_lines,
    week_dates,
)
from weekplan.i18n import day_name, pluralize, t
from weekplan.models import validate_day_index, validate_week_ref

logger = logging.getLogger(__name__)

INCOMPLETE = ("none", "partial")
PREVIEW_LINES = 5

CSS = """
body { font-family: -apple-system, system-ui, sans-serif; background: #f7f7f8; color: #222; margin: 0; }
.container { max-width: 960px; margin: 0 auto; padding: 16px; }
.top { display: flex; justify-content: space-between; align-items: center; gap: 12px; }
.nav a { margin-right: 10px; }
.card { background: #fff; border: 1px solid #eee; border-radius: 14px; padding: 12px 16px; margin: 12px 0; }
.card.today { border-color: #93c5fd; }
.day-head { display: flex; justify-content: space-between; }
.muted { color: #888; } .small { font-size: 13px; }
.line { padding: 2px 0; font-size: 14px; }
.line.header { font-weight: 600; margin-top: 8px; }
.line.subtask { padding-left: 16px; color: #555; }
.time { color: #2563eb; font-family: monospace; display: inline-block; min-width: 80px; }
.done .text { text-decoration: line-through; color: #aaa; }
.partial .text { color: #ea580c; }
.mark-done { color: #22c55e; margin-left: 6px; } .mark-partial { color: #f97316; margin-left: 6px; }
textarea { width: 100%; font-family: monospace; font-size: 14px; }
.badge { background: #dbeafe; color: #2563eb; border-radius: 10px; padding: 0 8px; font-size: 12px; }
pre.mono { white-space: pre-wrap; background: #fafafa; padding: 8px; border-radius: 6px; }
"""


# ── HTML helpers ──────────────────────────────────────────────

def _escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _render_line(line: ParsedLine) -> str:
    time = f'<span class="time">{_escape(line.time)}</span>' if line.time else ""
    mark = {"done": '<span class="mark-done">✓</span>', "partial": '<span class="mark-partial">◐</span>'}.get(line.status, "")
    return (
        f'<div class="line {line.type} {line.status}">{time}'
        f'<span class="text">{_escape(line.display_text)}</span>{mark}</div>'
    )


def _page(title: str, body: str) -> HTMLResponse:
    return HTMLResponse(f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{_escape(title)}</title>
  <style>{CSS}</style>
</head>
<body>
  <div class="container">
{body}
  </div>
</body>
</html>""")


def _week_url(year: int, week_number: int) -> str:
    return f"/week/{year}/{week_number}"


def _load(year: int, week_number: int) -> Week:
    try:
        validate_week_ref(year, week_number)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return load_week(year, week_number)


def _week_payload(week: Week) -> dict[str, Any]:
    days = []
    for day in week.days:
        days.append({
            "day_index": day.day_index,
            "content": day.content,
            "lines": [line.to_dict() for line in parse_content(day.content)],
            "stats": count_stats(day.content).to_dict(),
        })
    return {
        "year": week.year,
        "week_number": week.week_number,
        "focus_text": week.focus_text,
        "focus_lines": count_lines(week.focus_text),
        "retro_notes": week.retro_notes,
        "days": days,
    }


# ── Auth ──────────────────────────────────────────────────────

app = FastAPI(title="weekplan UI", version="0.1.0")

security = HTTPBasic(auto_error=False)


def get_current_user(credentials: HTTPBasicCredentials | None = Depends(security)) -> str:
    expected_username = os.environ.get("WEEKPLAN_USERNAME", "")
    expected_password = os.environ.get("WEEKPLAN_PASSWORD", "")

    if not expected_username or not expected_password:
        return "guest"

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )

    correct_username = secrets.compare_digest(credentials.username.encode("utf-8"), expected_username.encode("utf-8"))
    correct_password = secrets.compare_digest(credentials.password.encode("utf-8"), expected_password.encode("utf-8"))

    if not (correct_username and correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )

    return credentials.username


# ── Pages ─────────────────────────────────────────────────────

@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"ok": "true"}


@app.get("/")
def index(username: str = Depends(get_current_user)) -> RedirectResponse:
    year, week_number = current_week()
    return RedirectResponse(url=_week_url(year, week_number), status_code=303)


@app.get("/week/{year}/{week_number}", response_class=HTMLResponse)
def week_view(year: int, week_number: int, only: str = "", username: str = Depends(get_current_user)) -> HTMLResponse:
    week = _load(year, week_number)
    locale = get_locale()
    only_incomplete = only == "incomplete"
    dates = week_dates(year, week_number).days
    today = date.today()

    cards = []
    for day in week.days:
        lines = visible_lines(parse_content(day.content))
        if only_incomplete:
            lines = filter_by_status(lines, INCOMPLETE)
        stats = count_stats(day.content)
        is_today = dates[day.day_index] == today
        shown = "".join(_render_line(line) for line in lines[:PREVIEW_LINES])
        if len(lines) > PREVIEW_LINES:
            shown += f'<div class="muted small">+{len(lines) - PREVIEW_LINES} {t("more", locale)}</div>'
        if not lines:
            shown = f'<div class="muted small">{t("no_tasks", locale)}</div>'
        all_lines = "".join(_render_line(line) for line in lines)
        cards.append(f"""
    <section class="card{' today' if is_today else ''}">
      <div class="day-head">
        <div><b>{dates[day.day_index].day}</b> {_escape(day_name(day.day_index, locale))}
          {f'<span class="badge">{t("today", locale)}</span>' if is_today else ''}</div>
        <div class="muted small">{stats.done}/{stats.total}</div>
      </div>
      <div>{shown}</div>
      <details>
        <summary class="muted small">…</summary>
        <div>{all_lines}</div>
        <form method="post" action="/save_day">
          <input type="hidden" name="year" value="{year}" />
          <input type="hidden" name="week_number" value="{week_number}" />
          <input type="hidden" name="day_index" value="{day.day_index}" />
          <textarea name="content" rows="10">{_escape(day.content)}</textarea>
          <button type="submit">Save</button>
        </form>
      </details>
    </section>""")

    prev_y, prev_w = previous_week(year, week_number)
    next_y, next_w = next_week(year, week_number)
    focus_count = pluralize("lines", count_lines(week.focus_text), locale)
    filter_link = (
        f'<a href="{_week_url(year, week_number)}">all</a>' if only_incomplete
        else f'<a href="{_week_url(year, week_number)}?only=incomplete">incomplete</a>'
    )

    body = f"""
    <header class="top">
      <div>
        <h1>{_escape(t("week_title", locale, number=week_number))}</h1>
        <div class="muted small">{_escape(format_week_range(year, week_number, locale))}</div>
      </div>
      <div class="nav">
        <a href="{_week_url(prev_y, prev_w)}">←</a>
        <a href="{_week_url(next_y, next_w)}">→</a>
        {filter_link}
        <a href="/export/{year}/{week_number}" title="{_escape(t("export_tooltip", locale))}">📤</a>
      </div>
    </header>

    <section class="card">
      <h2>{_escape(t("focus_title", locale))} <span class="muted small">{_escape(focus_count)}</span></h2>
      <form method="post" action="/save_focus">
        <input type="hidden" name="year" value="{year}" />
        <input type="hidden" name="week_number" value="{week_number}" />
        <textarea name="focus_text" rows="4">{_escape(week.focus_text)}</textarea>
        <button type="submit">Save</button>
      </form>
    </section>
{''.join(cards)}
    <section class="card">
      <details>
        <summary><b>📥 {_escape(t("import_tooltip", locale))}</b></summary>
        <form method="post" action="/import/{year}/{week_number}" enctype="multipart/form-data">
          <input type="file" name="file" accept=".txt" />
          <textarea name="text" rows="8" placeholder="Mon&#10;10:00 Standup"></textarea>
          <button type="submit">Import</button>
        </form>
      </details>
    </section>"""
    return _page(f"weekplan {year}-{week_number:02d}", body)


@app.post("/save_day")
def save_day(
    year: int = Form(...),
    week_number: int = Form(...),
    day_index: int = Form(...),
    content: str = Form(""),
    username: str = Depends(get_current_user),
) -> RedirectResponse:
    try:
        update_day(year, week_number, day_index, content.replace("\r\n", "\n"))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RedirectResponse(url=_week_url(year, week_number), status_code=303)


@app.post("/save_focus")
def save_focus(
    year: int = Form(...),
    week_number: int = Form(...),
    focus_text: str = Form(""),
    username: str = Depends(get_current_user),
) -> RedirectResponse:
    try:
        update_focus(year, week_number, focus_text.replace("\r\n", "\n"))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return RedirectResponse(url=_week_url(year, week_number), status_code=303)


@app.get("/export/{year}/{week_number}")
def export_week(year: int, week_number: int, locale: str = "", username: str = Depends(get_current_user)) -> PlainTextResponse:
    week = _load(year, week_number)
    text = export_week_to_text(week, resolve_locale(locale) if locale else get_locale())
    return PlainTextResponse(
        text,
        headers={"Content-Disposition": f'attachment; filename="{export_filename(week)}"'},
    )


@app.post("/import/{year}/{week_number}", response_class=HTMLResponse, response_model=None)
async def import_form(
    year: int,
    week_number: int,
    text: str = Form(""),
    file: UploadFile | None = File(None),
    confirm: bool = Form(False),
    username: str = Depends(get_current_user),
) -> HTMLResponse | RedirectResponse:
    """Upload and paste share one parsing path; a file wins over pasted text."""
    _load(year, week_number)
    locale = get_locale()
    if file is not None and file.filename:
        text = (await file.read()).decode("utf-8-sig", errors="replace")
    text = text.replace("\r\n", "\n")

    result = import_week_from_text(text)
    if result is None:
        logger.warning("Import into %s-%02d not recognized", year, week_number)
        raise HTTPException(status_code=422, detail=t("import_parse_error", locale))

    if not confirm:
        body = f"""
    <section class="card">
      <pre class="mono">{_escape(import_confirmation(result, locale))}</pre>
      <form method="post" action="/import/{year}/{week_number}" enctype="multipart/form-data">
        <textarea name="text" rows="8" style="display:none">{_escape(text)}</textarea>
        <input type="hidden" name="confirm" value="true" />
        <button type="submit">OK</button>
        <a href="{_week_url(year, week_number)}">Cancel</a>
      </form>
    </section>"""
        return _page("Import", body)

    apply_import(year, week_number, result)
    return RedirectResponse(url=_week_url(year, week_number), status_code=303)


# ── JSON API ──────────────────────────────────────────────────

@app.get("/api/week/{year}/{week_number}")
def api_get_week(year: int, week_number: int, username: str = Depends(get_current_user)) -> dict[str, Any]:
    """Week with parsed lines and stats per day."""
    return _week_payload(_load(year, week_number))


@app.post("/api/week/{year}/{week_number}/day/{day_index}")
def api_update_day(
    year: int,
    week_number: int,
    day_index: int,
    payload: dict[str, Any] = Body(...),
    username: str = Depends(get_current_user),
) -> dict[str, Any]:
    try:
        validate_day_index(day_index)
        week = update_day(year, week_number, day_index, str(payload.get("content", "")))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True, "stats": count_stats(week.day(day_index).content).to_dict()}


@app.post("/api/week/{year}/{week_number}/focus")
def api_update_focus(
    year: int,
    week_number: int,
    payload: dict[str, Any] = Body(...),
    username: str = Depends(get_current_user),
) -> dict[str, Any]:
    try:
        week = update_focus(year, week_number, str(payload.get("text", "")))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True, "focus_lines": count_lines(week.focus_text)}


@app.post("/api/week/{year}/{week_number}/retro")
def api_update_retro(
    year: int,
    week_number: int,
    payload: dict[str, Any] = Body(...),
    username: str = Depends(get_current_user),
) -> dict[str, Any]:
    try:
        update_retro(year, week_number, str(payload.get("notes", "")))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True}


@app.post("/api/import/{year}/{week_number}")
def api_import(
    year: int,
    week_number: int,
    payload: dict[str, Any] = Body(...),
    username: str = Depends(get_current_user),
) -> dict[str, Any]:
    """Preview an import; apply it when the payload says confirm: true."""
    _load(year, week_number)
    locale = get_locale()
    result = import_week_from_text(str(payload.get("text", "")))
    if result is None:
        logger.warning("Import into %s-%02d not recognized", year, week_number)
        raise HTTPException(status_code=422, detail=t("import_parse_error", locale))

    preview = {
        "days": result.day_count,
        "updates_focus": result.updates_focus,
        "message": import_confirmation(result, locale),
        "patch": result.to_dict(),
    }
    if not payload.get("confirm"):
        return {"ok": True, "applied": False, **preview}

    week = apply_import(year, week_number, result)
    return {"ok": True, "applied": True, **preview, "week": _week_payload(week)}


def main() -> None:
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=os.environ.get("WEEKPLAN_HOST", "127.0.0.1"), port=int(os.environ.get("WEEKPLAN_PORT", "8000")))


if __name__ == "__main__":
    main()
