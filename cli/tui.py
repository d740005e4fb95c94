#!/usr/bin/env python3
"""weekplan TUI: interactive terminal week planner powered by Textual."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Footer, Header, Static, TextArea

from weekplan import (
    ImportResult,
    ParsedLine,
    Week,
    apply_import,
    count_lines,
    count_stats,
    current_week,
    filter_by_status,
    format_week_range,
    get_locale,
    import_confirmation,
    import_week_from_text,
    load_week,
    next_week,
    parse_content,
    previous_week,
    update_day,
    update_focus,
    visible_lines,
    week_dates,
    workspace_root,
    write_export,
)
from weekplan.i18n import day_name, pluralize, t


# ── Rendering ─────────────────────────────────────────────────


def line_markup(line: ParsedLine) -> str:
    """Rich markup for one parsed line."""
    text = escape(line.display_text)
    if line.status == "done":
        text = f"[strike dim]{text}[/] [green]✓[/]"
    elif line.status == "partial":
        text = f"[dark_orange]{text}[/] [orange1]◐[/]"
    if line.type == "header":
        text = f"[bold]{text}[/]"
    if line.time:
        text = f"[blue]{escape(line.time):<13}[/] {text}"
    if line.type == "subtask":
        text = "    " + text
    return text


def day_markup(
    week: Week,
    day_index: int,
    locale: str,
    only_incomplete: bool = False,
    today: date | None = None,
) -> str:
    """Card body for one day: title row, stats, then rendered lines."""
    content = week.day(day_index).content
    day_date = week_dates(week.year, week.week_number).days[day_index]
    stats = count_stats(content)

    title = f"[b]{day_date.day}[/b] {escape(day_name(day_index, locale))}"
    if day_date == (today or date.today()):
        title += f"  [reverse] {escape(t('today', locale))} [/]"
    rows = [f"{title}  [dim]{stats.done}/{stats.total}[/]"]

    lines = visible_lines(parse_content(content))
    if only_incomplete:
        lines = filter_by_status(lines, ("none", "partial"))
    if not lines:
        rows.append(f"[dim]{escape(t('no_tasks', locale))}[/]")
    rows.extend(line_markup(line) for line in lines)
    return "\n".join(rows)


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#focus-view {
    height: auto;
    padding: 0 1;
    margin: 1 1 0 1;
    border: round $primary-background-darken-2;
}

#days {
    height: 1fr;
    padding: 0 1;
}

.day-card {
    height: auto;
    padding: 0 1;
    margin: 1 0 0 0;
    border: round $primary-background-darken-2;
}

.day-card.selected {
    border: round $accent;
}

#editor {
    dock: bottom;
    height: 14;
    display: none;
    border: tall $accent;
}
"""


# ── Widgets ────────────────────────────────────────────────────


class DayCard(Static):
    """One day of the week, rendered from its raw text."""

    def __init__(self, day_index: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self.day_index = day_index


# ── Main app ───────────────────────────────────────────────────


class WeekplanApp(App):
    """Week planner: focus text plus seven days of plain-text plans."""

    TITLE = "weekplan"
    CSS = CSS
    AUTO_FOCUS = None

    BINDINGS = [
        Binding("left", "select_day(-1)", "Prev day"),
        Binding("right", "select_day(1)", "Next day"),
        Binding("p", "previous_week", "Prev week"),
        Binding("n", "next_week", "Next week"),
        Binding("c", "this_week", "This week"),
        Binding("e", "edit_day", "Edit day"),
        Binding("f", "edit_focus", "Edit focus"),
        Binding("o", "toggle_incomplete", "Only incomplete"),
        Binding("x", "export_week", "Export"),
        Binding("i", "import_text", "Import"),
        Binding("y", "apply_import", "Apply import"),
        Binding("ctrl+s", "save", "Save"),
        Binding("escape", "cancel", "Cancel"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(self, root: Path | None = None) -> None:
        super().__init__()
        self._root = root or workspace_root()
        self._locale = get_locale(self._root)
        self._year, self._week_number = current_week()
        self._week = load_week(self._year, self._week_number, self._root)
        self._selected = date.today().weekday()
        self._editing: str | None = None  # day, focus, import
        self._only_incomplete = False
        self._pending_import: ImportResult | None = None

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Control which bindings appear in the footer based on context."""
        if action in {"save", "cancel"}:
            return True if self._editing or action == "cancel" and self._pending_import else None
        if action == "apply_import":
            return True if self._pending_import is not None else None
        if action == "quit_app":
            return True
        return None if self._editing else True

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static(id="focus-view"),
            VerticalScroll(
                *[DayCard(i, id=f"day-{i}", classes="day-card") for i in range(7)],
                id="days",
                can_focus=False,
            ),
            TextArea(id="editor"),
            id="main",
        )
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_view()

    # ── View ───────────────────────────────────────────────────

    def _load_week(self, year: int, week_number: int) -> None:
        self._year, self._week_number = year, week_number
        self._week = load_week(year, week_number, self._root)
        self._pending_import = None
        self._refresh_view()

    def _refresh_view(self) -> None:
        self.sub_title = (
            f"{t('week_title', self._locale, number=self._week_number)} · "
            f"{format_week_range(self._year, self._week_number, self._locale)}"
        )

        focus = self._week.focus_text.strip()
        count = pluralize("lines", count_lines(focus), self._locale)
        header = f"[b]🎯 {escape(t('focus_title', self._locale))}[/b]  [dim]{escape(count)}[/]"
        self.query_one("#focus-view", Static).update(
            header + ("\n" + escape(focus) if focus else "")
        )

        for card in self.query(DayCard):
            card.update(day_markup(self._week, card.day_index, self._locale, self._only_incomplete))
            card.set_class(card.day_index == self._selected, "selected")
        self.refresh_bindings()

    def _open_editor(self, mode: str, text: str) -> None:
        self._editing = mode
        editor = self.query_one("#editor", TextArea)
        editor.load_text(text)
        editor.display = True
        editor.focus()
        self.refresh_bindings()

    def _close_editor(self) -> None:
        self._editing = None
        editor = self.query_one("#editor", TextArea)
        editor.display = False
        self.set_focus(None)
        self.refresh_bindings()

    # ── Actions ────────────────────────────────────────────────

    def action_select_day(self, step: int) -> None:
        self._selected = (self._selected + step) % 7
        self._refresh_view()
        self.query_one(f"#day-{self._selected}", DayCard).scroll_visible()

    def action_previous_week(self) -> None:
        self._load_week(*previous_week(self._year, self._week_number))

    def action_next_week(self) -> None:
        self._load_week(*next_week(self._year, self._week_number))

    def action_this_week(self) -> None:
        self._selected = date.today().weekday()
        self._load_week(*current_week())

    def action_edit_day(self) -> None:
        self._open_editor("day", self._week.day(self._selected).content)

    def action_edit_focus(self) -> None:
        self._open_editor("focus", self._week.focus_text)

    def action_import_text(self) -> None:
        """Paste exported (or hand-written) week text, then Ctrl+S."""
        self._pending_import = None
        self._open_editor("import", "")

    def action_toggle_incomplete(self) -> None:
        self._only_incomplete = not self._only_incomplete
        self._refresh_view()

    def action_save(self) -> None:
        text = self.query_one("#editor", TextArea).text
        mode = self._editing
        if mode == "day":
            self._week = update_day(self._year, self._week_number, self._selected, text, self._root)
        elif mode == "focus":
            self._week = update_focus(self._year, self._week_number, text, self._root)
        elif mode == "import":
            result = import_week_from_text(text)
            if result is None:
                self.notify(t("import_parse_error", self._locale), title="Import", severity="error")
                return
            self._pending_import = result
            self.notify(
                escape(import_confirmation(result, self._locale) + "\n\n[y] apply · [esc] cancel"),
                title="Import",
                timeout=30,
            )
        self._close_editor()
        self._refresh_view()

    def action_apply_import(self) -> None:
        if self._pending_import is None:
            return
        self._week = apply_import(self._year, self._week_number, self._pending_import, self._root)
        self._pending_import = None
        self.notify(t("import_success", self._locale), title="Import")
        self._refresh_view()

    def action_cancel(self) -> None:
        """Escape handler: leave the editor or drop a pending import."""
        if self._editing:
            self._close_editor()
        self._pending_import = None
        self.refresh_bindings()

    def action_export_week(self) -> None:
        path = write_export(self._week, self._locale, self._root)
        self.notify(escape(f"{t('export_tooltip', self._locale)}: {path}"), title="Export")

    def action_quit_app(self) -> None:
        self.exit()


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    root = workspace_root()
    root.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(root / "weekplan.log"),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = WeekplanApp(root)
    app.run()


if __name__ == "__main__":
    main()
