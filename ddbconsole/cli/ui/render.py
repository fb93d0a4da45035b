"""
cli/ui/render.py - Frame rendering

render_frame(state) builds one full-screen rich renderable from a
ConsoleState. It only reads the state.

Layout:
    header  region, mode, loading indicator
    body    depends on state.mode
    footer  status message, recent log lines, key hints
"""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ddbconsole.core.log import LogLevel
from ddbconsole.core.models import BillingMode, TableDetail
from ddbconsole.core.region.data import get_region_name
from ddbconsole.core.state.app import AppMode, ConsoleState, TableTarget
from ddbconsole.core.state.editor import EditingField, EditorMode
from ddbconsole.core.state.keys import Command, Context
from ddbconsole.core.state.wizard import WizardField, WizardStep
from ddbconsole.i18n import get_lang, t

LOG_LINES = 3
VALUE_WIDTH = 40
SUMMARY_WIDTH = 16
CURSOR = "█"

LOG_STYLES = {
    LogLevel.INFO: "dim",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


def _format_size(size: int | None) -> str:
    if size is None:
        return "-"
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024:
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} TB"


def _marker(selected: bool) -> str:
    return "▶" if selected else " "


# =============================================================================
# Header / footer
# =============================================================================


def _header(state: ConsoleState) -> RenderableType:
    text = Text()
    text.append("ddbconsole", style="bold #FF9900")
    text.append("  │  ", style="dim")
    text.append(state.region, style="bold cyan")
    text.append(f" ({get_region_name(state.region, get_lang())})", style="dim")
    text.append("  │  ", style="dim")
    text.append(t(f"console.mode_{state.mode.value}"), style="white")
    if state.is_loading:
        text.append("  │  ", style="dim")
        text.append(t("common.loading"), style="bold yellow")
    return Panel(text, border_style="#FF9900")


def _footer(state: ConsoleState) -> RenderableType:
    lines: list[Text] = []
    if state.status_message:
        lines.append(Text(state.status_message, style="bold"))
    for entry in state.log.tail(LOG_LINES):
        line = Text(f"{entry.timestamp} {entry.level.value:<7} ", style="dim")
        line.append(entry.message, style=LOG_STYLES[entry.level])
        lines.append(line)
    lines.append(Text(_key_hints(state), style="cyan"))
    return Panel(Group(*lines), title=t("console.log_title"), border_style="dim")


# =============================================================================
# Key hints
# =============================================================================

# (binding context, commands, label key); keys are looked up in state.keymap
HintSpec = tuple[Context, tuple[Command, ...], str]

_MOVE = (Command.UP, Command.DOWN)

FOOTER_HINTS: dict[AppMode, tuple[HintSpec, ...]] = {
    AppMode.BROWSING_TABLES: (
        (Context.TABLES, _MOVE, "console.hint_move"),
        (Context.TABLES, (Command.OPEN,), "console.hint_open"),
        (Context.TABLES, (Command.CREATE_TABLE,), "console.hint_create"),
        (Context.TABLES, (Command.DELETE,), "console.hint_delete"),
        (Context.TABLES, (Command.REFRESH,), "console.hint_refresh"),
        (Context.TABLES, (Command.OPEN_REGIONS,), "console.hint_region"),
        (Context.TABLES, (Command.HELP,), "console.hint_help"),
        (Context.TABLES, (Command.QUIT,), "console.hint_quit"),
    ),
    AppMode.BROWSING_RECORDS: (
        (Context.RECORDS, _MOVE, "console.hint_move"),
        (Context.RECORDS, (Command.CREATE_RECORD,), "console.hint_insert"),
        (Context.RECORDS, (Command.EDIT_RECORD,), "console.hint_edit"),
        (Context.RECORDS, (Command.DELETE,), "console.hint_delete"),
        (Context.RECORDS, (Command.NEXT_PAGE,), "console.hint_next_page"),
        (Context.RECORDS, (Command.RELOAD_RECORD,), "console.hint_reload"),
        (Context.RECORDS, (Command.HELP,), "console.hint_help"),
        (Context.RECORDS, (Command.BACK,), "console.hint_back"),
    ),
    AppMode.SELECTING_REGION: (
        (Context.SELECTOR, _MOVE, "console.hint_move"),
        (Context.SELECTOR, (Command.SUBMIT,), "console.hint_select"),
        (Context.SELECTOR, (Command.CANCEL,), "console.hint_cancel"),
    ),
    AppMode.CREATING_TABLE: (
        (Context.WIZARD, (Command.NEXT_FIELD,), "console.hint_next_field"),
        (Context.WIZARD, (Command.SUBMIT,), "console.hint_next_step"),
        (Context.WIZARD, (Command.CANCEL,), "console.hint_cancel"),
    ),
    AppMode.EDITING_RECORD: (
        (Context.EDITOR, _MOVE, "console.hint_move"),
        (Context.EDITOR, (Command.EDIT_VALUE,), "console.hint_edit_value"),
        (Context.EDITOR, (Command.EDIT_NAME,), "console.hint_rename"),
        (Context.EDITOR, (Command.CYCLE_TYPE,), "console.hint_type"),
        (Context.EDITOR, (Command.ADD_ATTRIBUTE,), "console.hint_add"),
        (Context.EDITOR, (Command.DELETE_ATTRIBUTE,), "console.hint_delete"),
        (Context.EDITOR, (Command.SAVE,), "console.hint_save"),
        (Context.EDITOR, (Command.BACK,), "console.hint_discard"),
    ),
    AppMode.CONFIRMING_DELETE: (
        (Context.CONFIRM, (Command.CONFIRM,), "console.hint_delete"),
        (Context.CONFIRM, (Command.DENY,), "console.hint_cancel"),
    ),
}

# While a name or value is being typed in the editor
TEXT_INPUT_HINTS: tuple[HintSpec, ...] = (
    (Context.TEXT_INPUT, (Command.SUBMIT,), "console.hint_apply"),
    (Context.TEXT_INPUT, (Command.CANCEL,), "console.hint_cancel"),
)

# Keys handled outside the keymap
FOOTER_NOTES = {
    AppMode.SELECTING_REGION: "console.note_selecting_region",
    AppMode.CREATING_TABLE: "console.note_creating_table",
    AppMode.SHOWING_HELP: "console.note_showing_help",
}

KEY_LABELS = {
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
    "enter": "Enter",
    "esc": "Esc",
    "tab": "Tab",
    "backspace": "Backspace",
    "delete": "Del",
    "home": "Home",
    "end": "End",
    "pageup": "PgUp",
    "pagedown": "PgDn",
    "space": "Space",
}


def _key_label(binding: str) -> str:
    """Display form of a binding string: "ctrl+s" -> "Ctrl+S", "up" -> "↑" """
    prefix = ""
    rest = binding
    for modifier in ("ctrl+", "alt+"):
        if rest.startswith(modifier) and len(rest) > len(modifier):
            prefix += modifier.capitalize()
            rest = rest[len(modifier) :]
    name = KEY_LABELS.get(rest, rest.upper() if prefix else rest)
    return prefix + name


def _key_hints(state: ConsoleState) -> str:
    specs = FOOTER_HINTS.get(state.mode, ())
    if state.mode is AppMode.EDITING_RECORD and state.editor is not None and state.editor.editing is not None:
        specs = TEXT_INPUT_HINTS

    parts = []
    note = FOOTER_NOTES.get(state.mode)
    if note is not None:
        parts.append(t(note))
    for context, commands, label in specs:
        keys = [_key_label(binding) for command in commands for binding in state.keymap.keys_for(context, command)]
        # unbound commands get no hint
        if keys:
            parts.append(f"{'/'.join(keys)} {t(label)}")
    return " | ".join(parts)


# =============================================================================
# Tables view
# =============================================================================


def _detail_panel(state: ConsoleState) -> RenderableType:
    catalog = state.catalog
    name = catalog.selected_name
    if name is None:
        return Panel(Text(t("console.no_tables"), style="dim"), title=t("console.detail_title"))

    detail = catalog.selected_detail
    if detail is None:
        index = catalog.selected
        failed = index is not None and catalog.attempted[index]
        message = t("console.detail_unavailable") if failed else t("common.loading")
        return Panel(Text(message, style="dim"), title=Text(name))

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for label, value in _detail_rows(detail):
        grid.add_row(label, Text(value))
    return Panel(grid, title=Text(detail.name), border_style="cyan")


def _detail_rows(detail: TableDetail) -> list[tuple[str, str]]:
    rows = [
        (t("console.field_status"), detail.status),
        (t("console.field_hash_key"), f"{detail.hash_key.name} ({detail.hash_key.key_type.value})"),
    ]
    if detail.range_key is not None:
        rows.append((t("console.field_range_key"), f"{detail.range_key.name} ({detail.range_key.key_type.value})"))
    rows.append((t("console.field_billing"), detail.billing_mode.label))
    if detail.billing_mode is BillingMode.PROVISIONED:
        rows.append((t("console.field_capacity"), f"R {detail.read_capacity or 0} / W {detail.write_capacity or 0}"))
    rows.append((t("console.field_items"), "-" if detail.item_count is None else str(detail.item_count)))
    rows.append((t("console.field_size"), _format_size(detail.size_bytes)))
    rows.append((t("console.field_region"), detail.region))
    return rows


def _tables_body(state: ConsoleState) -> RenderableType:
    catalog = state.catalog
    table = Table(title=t("console.tables_title", count=len(catalog)), expand=True, show_edge=False)
    table.add_column("", width=1)
    table.add_column(t("console.column_table"))
    for index, name in enumerate(catalog.names):
        selected = index == catalog.selected
        table.add_row(_marker(selected), Text(name), style="reverse" if selected else None)

    layout = Layout()
    layout.split_row(Layout(table, ratio=3), Layout(_detail_panel(state), ratio=2))
    return layout


# =============================================================================
# Records view
# =============================================================================


def _records_body(state: ConsoleState) -> RenderableType:
    detail = state.open_table
    browser = state.browser
    pagination = browser.pagination
    if detail is None:
        return Panel(Text(t("console.no_table_open"), style="dim"))

    more = t("console.more_pages") if pagination.has_more else t("console.last_page")
    title = t("console.records_title", table=detail.name, page=pagination.page, count=len(browser), more=more)
    table = Table(title=Text(title), expand=True, show_edge=False)
    table.add_column("", width=1)

    hash_name, range_name = detail.key_names
    table.add_column(Text(hash_name), style="bold")
    if range_name:
        table.add_column(Text(range_name), style="bold")
    table.add_column(t("console.column_attributes"))

    for index, record in enumerate(browser.records):
        selected = index == browser.selected
        cells: list[RenderableType] = [_marker(selected), Text(record.hash_key_value.display_short(SUMMARY_WIDTH))]
        if range_name:
            value = record.range_key_value
            cells.append(Text(value.display_short(SUMMARY_WIDTH) if value is not None else ""))
        others = [
            f"{name}={value.display_short(SUMMARY_WIDTH)}"
            for name, value in sorted(record.attributes.items())
            if name not in (hash_name, range_name)
        ]
        cells.append(Text(", ".join(others)))
        table.add_row(*cells, style="reverse" if selected else None)

    if not browser.records and not state.is_loading:
        return Group(table, Text(t("console.no_records"), style="dim"))
    return table


# =============================================================================
# Region selector
# =============================================================================


def _region_body(state: ConsoleState) -> RenderableType:
    selector = state.region_selector
    lang = get_lang()

    filter_line = Text(f"{t('console.filter')}: ", style="bold")
    filter_line.append(selector.filter_text + CURSOR)

    table = Table(expand=True, show_header=False, show_edge=False)
    table.add_column("", width=1)
    table.add_column(t("console.column_region"))
    table.add_column("")
    for index, region in enumerate(selector.filtered):
        selected = index == selector.selected
        name = get_region_name(region, lang)
        if region == selector.current:
            name = f"{name}  {t('console.current')}"
        table.add_row(_marker(selected), region, name, style="reverse" if selected else None)

    parts: list[RenderableType] = [filter_line, table]
    if not selector.filtered:
        parts.append(Text(t("console.no_match"), style="yellow"))
    return Panel(Group(*parts), title=t("console.region_title"), border_style="cyan")


# =============================================================================
# Create wizard
# =============================================================================


def _wizard_value(state: ConsoleState, field: WizardField) -> str:
    wizard = state.wizard
    if field is WizardField.HASH_KEY_TYPE:
        return f"{wizard.hash_key_type.label}  [S/N/B]"
    if field is WizardField.RANGE_KEY_TYPE:
        return f"{wizard.range_key_type.label}  [S/N/B]"
    if field is WizardField.HAS_RANGE_KEY:
        return "[x]" if wizard.has_range_key else "[ ]"
    if field is WizardField.BILLING_MODE:
        return f"{wizard.billing_mode.label}  [O/P]"
    text = getattr(wizard, field.value)
    return text + CURSOR if field is wizard.field else text


def _wizard_body(state: ConsoleState) -> RenderableType:
    wizard = state.wizard
    F = WizardField

    if wizard.step is WizardStep.BASIC_CONFIG:
        fields = [F.TABLE_NAME, F.HASH_KEY_NAME, F.HASH_KEY_TYPE, F.HAS_RANGE_KEY]
        if wizard.has_range_key:
            fields += [F.RANGE_KEY_NAME, F.RANGE_KEY_TYPE]
    elif wizard.step is WizardStep.BILLING_CONFIG:
        fields = [F.BILLING_MODE]
        if wizard.billing_mode is BillingMode.PROVISIONED:
            fields += [F.READ_CAPACITY, F.WRITE_CAPACITY]
    else:
        return _wizard_review(state)

    grid = Table.grid(padding=(0, 2))
    grid.add_column(width=1)
    grid.add_column(style="bold")
    grid.add_column()
    for field in fields:
        focused = field is wizard.field
        grid.add_row(
            _marker(focused),
            t(f"wizard.field_{field.value}"),
            Text(_wizard_value(state, field), style="reverse" if focused else ""),
        )
    title = t(f"wizard.step_{wizard.step.value}")
    return Panel(grid, title=title, border_style="green")


def _wizard_review(state: ConsoleState) -> RenderableType:
    config = state.wizard.to_table_config()
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    grid.add_row(t("wizard.field_table_name"), Text(config.name))
    grid.add_row(t("wizard.field_hash_key_name"), Text(f"{config.hash_key.name} ({config.hash_key.key_type.label})"))
    if config.range_key is not None:
        grid.add_row(
            t("wizard.field_range_key_name"), Text(f"{config.range_key.name} ({config.range_key.key_type.label})")
        )
    grid.add_row(t("wizard.field_billing_mode"), config.billing_mode.label)
    if config.billing_mode is BillingMode.PROVISIONED:
        grid.add_row(t("wizard.field_read_capacity"), str(config.read_capacity))
        grid.add_row(t("wizard.field_write_capacity"), str(config.write_capacity))
    return Panel(
        Group(grid, Text(""), Text(t("wizard.review_confirm"), style="bold green")),
        title=t("wizard.step_review"),
        border_style="green",
    )


# =============================================================================
# Record editor
# =============================================================================


def _editor_body(state: ConsoleState) -> RenderableType:
    editor = state.editor
    if editor is None:
        return Text("")

    mode_label = t("editor.mode_create") if editor.mode is EditorMode.CREATE else t("editor.mode_edit")
    table = Table(title=Text(f"{mode_label}: {editor.table_name}"), expand=True, show_edge=False)
    table.add_column("", width=1)
    table.add_column(t("editor.column_name"))
    table.add_column(t("editor.column_type"), width=5)
    table.add_column(t("editor.column_value"))

    for index, (name, value) in enumerate(editor.attributes):
        selected = index == editor.selected
        name_cell = name
        value_cell = value.display_short(VALUE_WIDTH)
        if selected and editor.editing is EditingField.KEY:
            name_cell = editor.buffer + CURSOR
        elif selected and editor.editing is EditingField.VALUE:
            value_cell = editor.buffer + CURSOR
        if editor.is_key_attribute(name):
            name_cell = f"{name_cell} *"
        table.add_row(
            _marker(selected),
            Text(name_cell),
            value.type_label,
            Text(value_cell),
            style="reverse" if selected and editor.editing is None else None,
        )

    add_selected = editor.on_add_row
    table.add_row(
        _marker(add_selected),
        Text(t("editor.add_row"), style="italic green"),
        "",
        "",
        style="reverse" if add_selected else None,
    )
    return Panel(table, border_style="magenta")


# =============================================================================
# Confirmation / help
# =============================================================================


def _confirm_body(state: ConsoleState) -> RenderableType:
    target = state.delete_target
    if isinstance(target, TableTarget):
        question = t("console.confirm_delete_table", table=target.name)
    else:
        record = state.browser.selected_record
        key = record.hash_key_value.display_short(VALUE_WIDTH) if record is not None else "?"
        question = t("console.confirm_delete_record", item=key)
    body = Group(Text(question, style="bold"), Text(""), Text(t("console.confirm_hint"), style="cyan"))
    return Panel(body, title=t("console.confirm_title"), border_style="red")


HELP_SECTIONS = (
    ("help.tables_title", ("help.tables_nav", "help.tables_open", "help.tables_actions", "help.tables_region")),
    ("help.records_title", ("help.records_nav", "help.records_edit", "help.records_delete", "help.records_page")),
    (
        "help.editor_title",
        ("help.editor_edit", "help.editor_name", "help.editor_type", "help.editor_add", "help.editor_save"),
    ),
    ("help.wizard_title", ("help.wizard_fields", "help.wizard_types", "help.wizard_back")),
    ("help.global_title", ("help.global_quit", "help.global_close")),
)


def _help_body(state: ConsoleState) -> RenderableType:
    lines: list[Text] = []
    for title, keys in HELP_SECTIONS:
        lines.append(Text(t(title), style="bold underline cyan"))
        for key in keys:
            lines.append(Text(f"  {t(key)}"))
        lines.append(Text(""))
    return Panel(Group(*lines), title=t("help.title"), border_style="cyan")


_BODIES = {
    AppMode.BROWSING_TABLES: _tables_body,
    AppMode.BROWSING_RECORDS: _records_body,
    AppMode.SELECTING_REGION: _region_body,
    AppMode.CREATING_TABLE: _wizard_body,
    AppMode.EDITING_RECORD: _editor_body,
    AppMode.CONFIRMING_DELETE: _confirm_body,
    AppMode.SHOWING_HELP: _help_body,
}


def render_frame(state: ConsoleState) -> RenderableType:
    """Build the full-screen frame for the current state"""
    layout = Layout()
    layout.split_column(
        Layout(_header(state), name="header", size=3),
        Layout(_BODIES[state.mode](state), name="body"),
        Layout(_footer(state), name="footer", size=LOG_LINES + 4),
    )
    return layout
