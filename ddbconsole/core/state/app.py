"""
core/state/app.py - Console state

ConsoleState aggregates everything the dispatcher mutates and the renderer
reads: the active mode, the table catalog, the item browser, the region
selector, the wizard, the editor, pending backend actions and the activity
log.

Transitions that touch more than one substate live here as methods so the
dispatcher and the runner share one definition of "enter records view",
"close editor" and so on. None of them call the backend; work for the runner
is requested through ``state.pending``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ddbconsole.core.config import settings
from ddbconsole.core.log import AppLog
from ddbconsole.core.models import TableConfig, TableDetail
from ddbconsole.core.state.browser import ItemBrowser, TableCatalog
from ddbconsole.core.state.editor import AttributeEditorState
from ddbconsole.core.state.keys import Keymap
from ddbconsole.core.state.selector import FilterSelector, make_region_selector
from ddbconsole.core.state.wizard import WizardState
from ddbconsole.i18n import t


class AppMode(Enum):
    BROWSING_TABLES = "browsing_tables"
    BROWSING_RECORDS = "browsing_records"
    SELECTING_REGION = "selecting_region"
    CREATING_TABLE = "creating_table"
    EDITING_RECORD = "editing_record"
    CONFIRMING_DELETE = "confirming_delete"
    SHOWING_HELP = "showing_help"


@dataclass(frozen=True)
class TableTarget:
    name: str


@dataclass(frozen=True)
class RecordTarget:
    """The record currently selected in the item browser"""


DeleteTarget = Union[TableTarget, RecordTarget]


@dataclass
class PendingActions:
    """Backend work requested by the dispatcher, drained by the runner"""

    create_table: TableConfig | None = None
    delete_table: str | None = None
    delete_record: bool = False
    save_record: bool = False
    region_changed: bool = False
    refresh: bool = False
    load_records: bool = False
    next_page: bool = False
    reload_record: bool = False


class ConsoleState:
    """Whole console state

    Args:
        region: Region the catalog belongs to
        log: Activity log (a new one is created when None)
        keymap: Key bindings (defaults when None)
        page_size: Items per scan page (settings.PAGE_SIZE when None)
    """

    def __init__(
        self,
        region: str,
        log: AppLog | None = None,
        keymap: Keymap | None = None,
        page_size: int | None = None,
    ):
        self.mode = AppMode.BROWSING_TABLES
        self.region = region
        self.catalog = TableCatalog()
        self.browser = ItemBrowser(page_size)
        self.region_selector: FilterSelector[str] = make_region_selector(region)
        self.wizard = WizardState()
        self.editor: AttributeEditorState | None = None
        self.open_table: TableDetail | None = None
        self.delete_target: DeleteTarget | None = None
        self.help_return = AppMode.BROWSING_TABLES
        self.pending = PendingActions()
        self.is_loading = False
        self.status_message = ""
        self.log = log if log is not None else AppLog(settings.LOG_CAPACITY)
        self.keymap = keymap if keymap is not None else Keymap()

    def set_status(self, message: str) -> None:
        self.status_message = message

    # =========================================================================
    # Tables / records views
    # =========================================================================

    def enter_records(self) -> bool:
        """Open the selected table; needs its detail for the key schema"""
        detail = self.catalog.selected_detail
        if detail is None:
            if self.catalog.selected_name is not None:
                self.set_status(t("console.detail_not_loaded", table=self.catalog.selected_name))
            return False
        self.open_table = detail
        self.browser.reset()
        self.mode = AppMode.BROWSING_RECORDS
        self.pending.load_records = True
        return True

    def exit_records(self) -> None:
        self.mode = AppMode.BROWSING_TABLES
        self.browser.reset()
        self.open_table = None

    # =========================================================================
    # Region selector
    # =========================================================================

    def open_region_selector(self) -> None:
        self.region_selector.current = self.region
        self.region_selector.open()
        self.mode = AppMode.SELECTING_REGION

    def confirm_region(self) -> bool:
        region = self.region_selector.confirm()
        if region is None:
            return False
        self.region = region
        self.mode = AppMode.BROWSING_TABLES
        self.pending.region_changed = True
        return True

    def close_region_selector(self) -> None:
        self.mode = AppMode.BROWSING_TABLES

    # =========================================================================
    # Create wizard
    # =========================================================================

    def open_wizard(self) -> None:
        self.wizard = WizardState()
        self.mode = AppMode.CREATING_TABLE

    def close_wizard(self) -> None:
        self.mode = AppMode.BROWSING_TABLES

    # =========================================================================
    # Record editor
    # =========================================================================

    def start_create_record(self) -> bool:
        if self.open_table is None:
            return False
        self.editor = AttributeEditorState.for_create(self.open_table)
        self.mode = AppMode.EDITING_RECORD
        return True

    def start_edit_record(self) -> bool:
        record = self.browser.selected_record
        if self.open_table is None or record is None:
            return False
        self.editor = AttributeEditorState.for_edit(self.open_table, record)
        self.mode = AppMode.EDITING_RECORD
        return True

    def close_editor(self) -> None:
        self.editor = None
        self.mode = AppMode.BROWSING_RECORDS

    # =========================================================================
    # Delete confirmation
    # =========================================================================

    def ask_delete(self, target: DeleteTarget) -> None:
        self.delete_target = target
        self.mode = AppMode.CONFIRMING_DELETE

    def resolve_delete(self, confirmed: bool) -> None:
        """Leave the confirmation; on confirm raise the matching pending action"""
        target = self.delete_target
        self.delete_target = None
        if isinstance(target, TableTarget):
            if confirmed:
                self.pending.delete_table = target.name
            self.mode = AppMode.BROWSING_TABLES
        elif isinstance(target, RecordTarget):
            if confirmed:
                self.pending.delete_record = True
            self.mode = AppMode.BROWSING_RECORDS
        else:
            self.mode = AppMode.BROWSING_TABLES

    # =========================================================================
    # Help
    # =========================================================================

    def toggle_help(self) -> None:
        if self.mode is AppMode.SHOWING_HELP:
            self.mode = self.help_return
        else:
            self.help_return = self.mode
            self.mode = AppMode.SHOWING_HELP
