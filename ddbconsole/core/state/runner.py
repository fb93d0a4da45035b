"""
core/state/runner.py - Orchestration loop

ConsoleRunner owns the poll -> dispatch -> tick cycle:

    1. render the current state
    2. wait up to POLL_INTERVAL_MS for one key and dispatch it
    3. tick(): perform at most one backend operation

tick() drains pending actions in a fixed priority order:

    create table > delete table > delete record > save record >
    region change > refresh > load records > next page > reload record >
    lazy describe of the selected table

``state.is_loading`` is true only while a backend call is in flight. Backend
failures never escape tick(): they become a status message plus an ERROR log
entry (describe failures: WARNING) and the state falls back to a safe view.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ddbconsole.core.config import settings
from ddbconsole.core.exceptions import ConsoleError, format_error_for_user
from ddbconsole.core.state.app import AppMode, ConsoleState
from ddbconsole.core.state.dispatch import handle_key_event
from ddbconsole.core.state.keys import KeyEvent
from ddbconsole.i18n import t

logger = logging.getLogger(__name__)

KeyReader = Callable[[float], Optional[KeyEvent]]
Renderer = Callable[[ConsoleState], None]


class ConsoleRunner:
    """Drives a ConsoleState against a backend

    Args:
        state: Console state
        backend: DynamoDBBackend (or anything with the same methods)
        read_key: Returns the next key event or None after ``timeout`` seconds
        render: Draws one frame (optional; tests run without it)
        poll_interval_ms: Key poll timeout (settings.POLL_INTERVAL_MS when None)
    """

    def __init__(
        self,
        state: ConsoleState,
        backend: Any,
        read_key: KeyReader | None = None,
        render: Renderer | None = None,
        poll_interval_ms: int | None = None,
    ):
        self.state = state
        self.backend = backend
        self._read_key = read_key
        self._render = render
        interval = poll_interval_ms if poll_interval_ms is not None else settings.POLL_INTERVAL_MS
        self.poll_timeout = interval / 1000

        self._operations: list[Callable[[], bool]] = [
            self._create_table,
            self._delete_table,
            self._delete_record,
            self._save_record,
            self._change_region,
            self._refresh,
            self._load_records,
            self._next_page,
            self._reload_record,
            self._describe_selected,
        ]

    # =========================================================================
    # Loop
    # =========================================================================

    def run(self) -> None:
        """Run until the operator quits"""
        if self._read_key is None:
            raise ValueError("ConsoleRunner.run() needs a key reader")

        self.state.pending.refresh = True
        while True:
            if self._render is not None:
                self._render(self.state)
            event = self._read_key(self.poll_timeout)
            if event is not None and handle_key_event(self.state, event):
                logger.debug("quit requested")
                return
            self.tick()

    def tick(self) -> bool:
        """Perform the highest priority due operation

        Returns:
            True when an operation was handled this tick
        """
        for operation in self._operations:
            if operation():
                return True
        return False

    # =========================================================================
    # Helpers
    # =========================================================================

    def _call(self, method: str, *args: Any) -> Any:
        self.state.is_loading = True
        try:
            return getattr(self.backend, method)(*args)
        finally:
            self.state.is_loading = False

    def _fail(self, key: str, error: ConsoleError, **params: Any) -> None:
        message = t(key, error=format_error_for_user(error), **params)
        logger.debug("%s", error)
        self.state.log.error(message)
        self.state.set_status(message)

    def _success(self, message: str) -> None:
        self.state.log.info(message)
        self.state.set_status(message)

    # =========================================================================
    # Tables
    # =========================================================================

    def _create_table(self) -> bool:
        state = self.state
        config = state.pending.create_table
        if config is None:
            return False
        state.pending.create_table = None

        state.log.info(t("console.creating_table", table=config.name))
        try:
            self._call("create_table", config)
        except ConsoleError as e:
            self._fail("console.create_failed", e)
        else:
            self._success(t("console.table_created", table=config.name))
            state.pending.refresh = True
        state.close_wizard()
        return True

    def _delete_table(self) -> bool:
        state = self.state
        name = state.pending.delete_table
        if name is None:
            return False
        state.pending.delete_table = None

        state.log.info(t("console.deleting_table", table=name))
        try:
            self._call("delete_table", name)
        except ConsoleError as e:
            self._fail("console.delete_table_failed", e)
        else:
            self._success(t("console.table_deleted", table=name))
            state.pending.refresh = True
        state.mode = AppMode.BROWSING_TABLES
        return True

    def _change_region(self) -> bool:
        state = self.state
        if not state.pending.region_changed:
            return False
        state.pending.region_changed = False
        state.pending.refresh = False

        region = state.region
        state.log.info(t("console.switching_region", region=region))
        try:
            self._call("switch_region", region)
        except ConsoleError as e:
            # the backend keeps its previous client; the catalog stays as it was
            state.region = self.backend.region
            self._fail("console.region_switch_failed", e, region=region)
            return True
        self._load_tables()
        return True

    def _refresh(self) -> bool:
        if not self.state.pending.refresh:
            return False
        self.state.pending.refresh = False
        self._load_tables()
        return True

    def _load_tables(self) -> None:
        state = self.state
        state.log.info(t("console.loading_tables", region=state.region))
        try:
            names = self._call("list_table_names")
        except ConsoleError as e:
            state.catalog.clear()
            self._fail("console.list_failed", e)
            return
        state.catalog.load(names)
        state.log.info(t("console.found_tables", count=len(names)))

    def _describe_selected(self) -> bool:
        state = self.state
        index = state.catalog.pending_describe()
        if index is None:
            return False

        name = state.catalog.names[index]
        try:
            detail = self._call("describe_table", name)
        except ConsoleError as e:
            state.catalog.store_detail(index, None)
            state.log.warning(t("console.describe_failed", table=name, error=format_error_for_user(e)))
            return True
        state.catalog.store_detail(index, detail)
        return True

    # =========================================================================
    # Records
    # =========================================================================

    def _scan(self, start_key: Any = None) -> bool:
        """Scan one page of the open table into the browser"""
        state = self.state
        table = state.open_table
        if table is None:
            return False

        pagination = state.browser.pagination
        state.log.info(t("console.loading_records", table=table.name, page=pagination.page))
        try:
            records, next_key = self._call(
                "scan_page", table.name, pagination.page_size, start_key, table.key_names
            )
        except ConsoleError as e:
            # a failed next page keeps the page on screen
            if start_key is None:
                state.browser.reset()
            self._fail("console.scan_failed", e)
            return False
        state.browser.set_page(records, next_key)
        state.log.info(t("console.loaded_records", count=len(records)))
        return True

    def _load_records(self) -> bool:
        state = self.state
        if not state.pending.load_records:
            return False
        state.pending.load_records = False
        state.browser.reset()
        self._scan()
        return True

    def _next_page(self) -> bool:
        state = self.state
        if not state.pending.next_page:
            return False
        state.pending.next_page = False

        pagination = state.browser.pagination
        token = pagination.advance()
        if token is None:
            state.set_status(t("console.no_more_pages"))
            return True
        if not self._scan(token):
            pagination.page -= 1
        return True

    def _reload_record(self) -> bool:
        state = self.state
        if not state.pending.reload_record:
            return False
        state.pending.reload_record = False

        table = state.open_table
        record = state.browser.selected_record
        if table is None or record is None:
            return True

        try:
            fresh = self._call("get_item", table.name, record.key(*table.key_names), table.key_names)
        except ConsoleError as e:
            self._fail("console.reload_failed", e)
            return True
        state.browser.replace_selected(fresh)
        if fresh is None:
            self._success(t("console.record_gone"))
        return True

    def _delete_record(self) -> bool:
        state = self.state
        if not state.pending.delete_record:
            return False
        state.pending.delete_record = False

        table = state.open_table
        record = state.browser.selected_record
        if table is None or record is None:
            return True

        state.log.info(t("console.deleting_record", table=table.name))
        try:
            self._call("delete_item", table.name, record.key(*table.key_names))
        except ConsoleError as e:
            self._fail("console.delete_record_failed", e)
        else:
            self._success(t("console.record_deleted"))
            state.pending.load_records = True
        state.mode = AppMode.BROWSING_RECORDS
        return True

    def _save_record(self) -> bool:
        state = self.state
        if not state.pending.save_record:
            return False
        state.pending.save_record = False

        editor = state.editor
        if editor is None:
            return True

        state.log.info(t("console.saving_record", table=editor.table_name))
        try:
            self._call("put_item", editor.table_name, editor.to_item())
        except ConsoleError as e:
            # editor stays open with the unsaved rows
            self._fail("console.save_failed", e)
            return True
        self._success(t("console.record_saved"))
        state.close_editor()
        state.pending.load_records = True
        return True
