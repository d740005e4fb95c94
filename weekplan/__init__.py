"""weekplan core library: day text parser, week text codec and storage.

Public API re-exports for convenient imports:
    from weekplan import parse_content, export_week_to_text, load_week, ...
"""

# Models
from weekplan.models import (
    ParsedLine,
    DayStats,
    Day,
    Week,
    ImportResult,
    Settings,
)

# Day text parsing
from weekplan.text_parser import (
    parse_line,
    parse_content,
    count_stats,
    visible_lines,
    filter_by_status,
    count_lines,
)

# Week text export/import
from weekplan.week_export import (
    export_week_to_text,
    export_filename,
    import_week_from_text,
    import_confirmation,
    parse_day_name,
)

# Dates
from weekplan.dates import (
    week_dates,
    week_number,
    current_week,
    previous_week,
    next_week,
    format_week_range,
)

# Locale
from weekplan.i18n import resolve_locale, DEFAULT_LOCALE

# Workspace & storage
from weekplan.workspace import (
    workspace_root,
    load_settings,
    save_settings,
    get_locale,
    week_path,
    exports_dir,
)
from weekplan.store import (
    load_week,
    save_week,
    update_day,
    update_focus,
    update_retro,
    apply_import,
    write_export,
)
