# tests/core/state/test_dispatch.py
"""
core/state/dispatch.py tests

Mode transitions and pending actions raised by key events. Nothing here
touches a backend.
"""

import pytest

from ddbconsole.core.models import AttributeValue, BillingMode
from ddbconsole.core.state.app import AppMode, ConsoleState, PendingActions, RecordTarget, TableTarget
from ddbconsole.core.state.dispatch import handle_key_event
from ddbconsole.core.state.editor import EditingField
from ddbconsole.core.state.keys import Command, Context, KeyEvent, Keymap
from ddbconsole.core.state.wizard import WizardStep


@pytest.fixture
def tables_state(make_state, orders_detail, events_detail):
    """Tables view with both tables described"""
    return make_state(tables=["orders", "events"], details={"orders": orders_detail, "events": events_detail})


@pytest.fixture
def records_state(tables_state, sample_records, press):
    """Records view of "orders" with the sample page loaded"""
    press(tables_state, "enter")
    tables_state.pending = PendingActions()
    tables_state.browser.set_page(sample_records, None)
    return tables_state


@pytest.fixture
def editor_state(records_state, press):
    """Editor on item id=1 (rows: id, active, blob, name)"""
    press(records_state, "e")
    return records_state


# =============================================================================
# Global
# =============================================================================


class TestGlobal:
    @pytest.mark.parametrize("setup", ["tables", "records", "region", "wizard", "editor", "confirm", "help"])
    def test_ctrl_c_quits_everywhere(self, tables_state, sample_records, press, setup):
        if setup != "tables":
            press(tables_state, "enter")
            tables_state.browser.set_page(sample_records, None)
        prefix = {
            "region": ["esc", "g"],
            "wizard": ["esc", "c"],
            "editor": ["e"],
            "confirm": ["d"],
            "help": ["?"],
        }.get(setup, [])
        press(tables_state, *prefix)

        assert press(tables_state, "ctrl+c") is True

    def test_q_quits_from_tables(self, tables_state, press):
        assert press(tables_state, "q") is True

    def test_q_does_not_quit_from_records(self, records_state, press):
        assert press(records_state, "q") is False

    def test_unbound_key_is_ignored(self, tables_state, press):
        assert press(tables_state, "z") is False
        assert tables_state.mode is AppMode.BROWSING_TABLES


# =============================================================================
# Tables view
# =============================================================================


class TestTablesView:
    def test_navigation_wraps(self, tables_state, press):
        press(tables_state, "down")
        assert tables_state.catalog.selected_name == "events"
        press(tables_state, "j")
        assert tables_state.catalog.selected_name == "orders"
        press(tables_state, "k")
        assert tables_state.catalog.selected_name == "events"

    def test_refresh(self, tables_state, press):
        press(tables_state, "r")
        assert tables_state.pending.refresh

    def test_enter_opens_records(self, tables_state, orders_detail, press):
        tables_state.browser.pagination.page = 4

        press(tables_state, "enter")

        assert tables_state.mode is AppMode.BROWSING_RECORDS
        assert tables_state.open_table is orders_detail
        assert tables_state.pending.load_records
        assert tables_state.browser.pagination.page == 1

    def test_enter_without_detail(self, make_state, press):
        state = make_state(tables=["orders"])

        press(state, "enter")

        assert state.mode is AppMode.BROWSING_TABLES
        assert not state.pending.load_records
        assert "orders" in state.status_message

    def test_enter_on_empty_catalog(self, make_state, press):
        state = make_state()
        press(state, "enter", "d", "up", "down")
        assert state.mode is AppMode.BROWSING_TABLES
        assert state.pending == PendingActions()

    def test_delete_asks_confirmation(self, tables_state, press):
        press(tables_state, "d")

        assert tables_state.mode is AppMode.CONFIRMING_DELETE
        assert tables_state.delete_target == TableTarget("orders")

    def test_create_resets_wizard(self, tables_state, press, type_text):
        press(tables_state, "c")
        type_text(tables_state, "draft")
        press(tables_state, "esc", "c")

        assert tables_state.mode is AppMode.CREATING_TABLE
        assert tables_state.wizard.table_name == ""

    def test_region_selector(self, tables_state, press):
        press(tables_state, "g")

        assert tables_state.mode is AppMode.SELECTING_REGION
        assert tables_state.region_selector.selected_item == "us-east-1"

    def test_help_returns_to_tables(self, tables_state, press):
        press(tables_state, "?")
        assert tables_state.mode is AppMode.SHOWING_HELP
        press(tables_state, "x")
        assert tables_state.mode is AppMode.BROWSING_TABLES


# =============================================================================
# Region selector
# =============================================================================


class TestRegionSelector:
    def test_filter_and_confirm(self, tables_state, press, type_text):
        press(tables_state, "g")
        type_text(tables_state, "eu-west-2")
        press(tables_state, "enter")

        assert tables_state.mode is AppMode.BROWSING_TABLES
        assert tables_state.region == "eu-west-2"
        assert tables_state.pending.region_changed

    def test_letters_are_filter_text(self, tables_state, press, type_text):
        """j / k / q type into the filter instead of navigating or quitting"""
        press(tables_state, "g")
        type_text(tables_state, "jkq")

        assert tables_state.region_selector.filter_text == "jkq"
        assert tables_state.mode is AppMode.SELECTING_REGION

    def test_backspace_pops_filter(self, tables_state, press, type_text):
        press(tables_state, "g")
        type_text(tables_state, "ap")
        press(tables_state, "backspace")
        assert tables_state.region_selector.filter_text == "a"

    def test_invalid_regex_does_not_raise(self, tables_state, press, type_text):
        press(tables_state, "g")
        type_text(tables_state, "][")

        assert tables_state.region_selector.selected is None
        press(tables_state, "enter", "up", "down")
        assert tables_state.mode is AppMode.SELECTING_REGION
        assert tables_state.region == "us-east-1"
        assert not tables_state.pending.region_changed

    def test_cancel(self, tables_state, press):
        press(tables_state, "g", "down", "esc")

        assert tables_state.mode is AppMode.BROWSING_TABLES
        assert tables_state.region == "us-east-1"
        assert not tables_state.pending.region_changed

    def test_reopen_clears_filter(self, tables_state, press, type_text):
        press(tables_state, "g")
        type_text(tables_state, "eu")
        press(tables_state, "esc", "g")
        assert tables_state.region_selector.filter_text == ""


# =============================================================================
# Create wizard
# =============================================================================


class TestWizard:
    def test_full_flow(self, tables_state, press, type_text):
        press(tables_state, "c")
        type_text(tables_state, "orders2")
        press(tables_state, "tab")
        type_text(tables_state, "pk")
        press(tables_state, "tab")
        type_text(tables_state, "n")
        press(tables_state, "enter")
        assert tables_state.wizard.step is WizardStep.BILLING_CONFIG

        type_text(tables_state, "p")
        press(tables_state, "tab", "backspace")
        type_text(tables_state, "8")
        press(tables_state, "enter")
        assert tables_state.wizard.step is WizardStep.REVIEW

        press(tables_state, "enter")

        config = tables_state.pending.create_table
        assert config is not None
        assert config.name == "orders2"
        assert config.hash_key.name == "pk"
        assert config.billing_mode is BillingMode.PROVISIONED
        assert (config.read_capacity, config.write_capacity) == (8, 5)

    def test_validation_error_sets_status(self, tables_state, press, type_text):
        press(tables_state, "c")
        type_text(tables_state, "ab")
        press(tables_state, "enter")

        assert tables_state.wizard.step is WizardStep.BASIC_CONFIG
        assert tables_state.status_message == "Table name must be 3-255 characters"
        assert tables_state.pending.create_table is None

    def test_status_cleared_after_valid_step(self, tables_state, press, type_text):
        press(tables_state, "c", "enter")
        assert tables_state.status_message
        type_text(tables_state, "orders2")
        press(tables_state, "tab")
        type_text(tables_state, "id")
        press(tables_state, "enter")
        assert tables_state.status_message == ""

    def test_backspace_on_selector_field_steps_back(self, tables_state, press):
        tables_state.wizard.table_name = "orders2"
        tables_state.wizard.hash_key_name = "id"
        tables_state.mode = AppMode.CREATING_TABLE
        press(tables_state, "enter")

        press(tables_state, "alt+backspace")
        assert tables_state.wizard.step is WizardStep.BILLING_CONFIG
        press(tables_state, "backspace")
        assert tables_state.wizard.step is WizardStep.BASIC_CONFIG

    def test_q_types_into_name(self, tables_state, press, type_text):
        press(tables_state, "c")
        type_text(tables_state, "q?")
        assert tables_state.wizard.table_name == "q?"
        assert tables_state.mode is AppMode.CREATING_TABLE

    def test_escape_cancels(self, tables_state, press):
        press(tables_state, "c", "esc")
        assert tables_state.mode is AppMode.BROWSING_TABLES
        assert tables_state.pending.create_table is None


# =============================================================================
# Records view
# =============================================================================


class TestRecordsView:
    def test_escape_back_to_tables(self, records_state, press):
        press(records_state, "esc")

        assert records_state.mode is AppMode.BROWSING_TABLES
        assert records_state.open_table is None
        assert records_state.browser.records == []

    def test_navigation_wraps(self, records_state, press):
        press(records_state, "k")
        assert records_state.browser.selected == 2

    def test_pending_flags(self, records_state, press):
        press(records_state, "n")
        assert records_state.pending.next_page
        press(records_state, "r")
        assert records_state.pending.reload_record

    def test_delete_record_confirmation(self, records_state, press):
        press(records_state, "d")
        assert records_state.mode is AppMode.CONFIRMING_DELETE
        assert records_state.delete_target == RecordTarget()

    def test_empty_page_ignores_record_commands(self, records_state, press):
        records_state.browser.set_page([], None)

        press(records_state, "d", "e", "enter", "r")

        assert records_state.mode is AppMode.BROWSING_RECORDS
        assert not records_state.pending.reload_record

    def test_create_record(self, records_state, press):
        press(records_state, "i")

        assert records_state.mode is AppMode.EDITING_RECORD
        assert records_state.editor.attributes == [("id", AttributeValue.string(""))]

    @pytest.mark.parametrize("binding", ["e", "enter"])
    def test_edit_record(self, records_state, press, binding):
        press(records_state, binding)

        assert records_state.mode is AppMode.EDITING_RECORD
        assert records_state.editor.attributes[0] == ("id", AttributeValue.string("1"))

    def test_help_returns_to_records(self, records_state, press):
        press(records_state, "?", "enter")
        assert records_state.mode is AppMode.BROWSING_RECORDS


# =============================================================================
# Record editor
# =============================================================================


class TestEditor:
    def test_value_edit_flow(self, editor_state, press, type_text):
        press(editor_state, "down", "down", "down", "enter")
        assert editor_state.editor.editing is EditingField.VALUE

        press(editor_state, "backspace")
        type_text(editor_state, "e!")
        press(editor_state, "enter")

        assert dict(editor_state.editor.attributes)["name"] == AttributeValue.string("alice!")
        assert editor_state.editor.editing is None

    def test_sub_edit_consumes_bound_letters(self, editor_state, press, type_text):
        """Keys bound elsewhere (q, j, ?) are text while a sub-edit is open"""
        press(editor_state, "down", "down", "down", "enter")
        type_text(editor_state, "qj?")
        assert editor_state.editor.buffer == "aliceqj?"
        assert editor_state.mode is AppMode.EDITING_RECORD

    def test_sub_edit_escape_discards(self, editor_state, press, type_text):
        press(editor_state, "down", "down", "down", "enter")
        type_text(editor_state, "xyz")
        press(editor_state, "esc")

        assert editor_state.editor.editing is None
        assert editor_state.mode is AppMode.EDITING_RECORD
        assert dict(editor_state.editor.attributes)["name"] == AttributeValue.string("alice")

    def test_key_protection_sets_status(self, editor_state, press):
        before = list(editor_state.editor.attributes)

        press(editor_state, "ctrl+t")
        press(editor_state, "ctrl+d")
        press(editor_state, "ctrl+k")

        assert editor_state.editor.attributes == before
        assert editor_state.editor.editing is None
        assert "id" in editor_state.status_message

    def test_rename(self, editor_state, press, type_text):
        press(editor_state, "down", "ctrl+k")
        for _ in range(len("active")):
            press(editor_state, "backspace")
        type_text(editor_state, "enabled")
        press(editor_state, "enter")

        assert editor_state.editor.attributes[1][0] == "enabled"

    def test_duplicate_rename_keeps_sub_edit(self, editor_state, press, type_text):
        press(editor_state, "down", "ctrl+k")
        for _ in range(len("active")):
            press(editor_state, "backspace")
        type_text(editor_state, "blob")
        press(editor_state, "enter")

        assert editor_state.editor.editing is EditingField.KEY
        assert editor_state.status_message == "Attribute 'blob' already exists"

    def test_enter_on_add_row_adds_attribute(self, editor_state, press):
        count = len(editor_state.editor.attributes)
        for _ in range(count):
            press(editor_state, "down")
        assert editor_state.editor.on_add_row

        press(editor_state, "enter")

        assert len(editor_state.editor.attributes) == count + 1
        assert editor_state.editor.editing is None

    def test_add_then_delete(self, editor_state, press):
        before = list(editor_state.editor.attributes)
        press(editor_state, "ctrl+n", "ctrl+d")
        assert editor_state.editor.attributes == before

    def test_save_raises_flag(self, editor_state, press):
        press(editor_state, "ctrl+s")
        assert editor_state.pending.save_record
        assert editor_state.mode is AppMode.EDITING_RECORD

    def test_escape_discards_editor(self, editor_state, press):
        press(editor_state, "ctrl+n", "esc")

        assert editor_state.mode is AppMode.BROWSING_RECORDS
        assert editor_state.editor is None
        assert not editor_state.pending.save_record

    def test_missing_editor_falls_back(self, editor_state, press):
        editor_state.editor = None
        press(editor_state, "enter")
        assert editor_state.mode is AppMode.BROWSING_RECORDS


# =============================================================================
# Delete confirmation
# =============================================================================


class TestConfirm:
    @pytest.mark.parametrize("binding", ["y", "Y"])
    def test_confirm_table(self, tables_state, press, binding):
        press(tables_state, "d", binding)

        assert tables_state.pending.delete_table == "orders"
        assert tables_state.mode is AppMode.BROWSING_TABLES
        assert tables_state.delete_target is None

    @pytest.mark.parametrize("binding", ["n", "N", "esc"])
    def test_deny_table(self, tables_state, press, binding):
        press(tables_state, "d", binding)

        assert tables_state.pending.delete_table is None
        assert tables_state.mode is AppMode.BROWSING_TABLES

    def test_confirm_record(self, records_state, press):
        press(records_state, "d", "y")

        assert records_state.pending.delete_record
        assert records_state.mode is AppMode.BROWSING_RECORDS

    def test_deny_record(self, records_state, press):
        press(records_state, "d", "n")

        assert not records_state.pending.delete_record
        assert records_state.mode is AppMode.BROWSING_RECORDS

    def test_other_keys_ignored(self, tables_state, press):
        press(tables_state, "d", "x", "enter", "q")
        assert tables_state.mode is AppMode.CONFIRMING_DELETE


# =============================================================================
# Keymap
# =============================================================================


class TestCustomKeymap:
    def test_rebound_command(self, orders_detail):
        state = ConsoleState("us-east-1", keymap=Keymap({Context.TABLES: {"x": Command.DELETE}}))
        state.catalog.load(["orders"])
        state.catalog.store_detail(0, orders_detail)

        handle_key_event(state, KeyEvent.of("x"))

        assert state.mode is AppMode.CONFIRMING_DELETE


class TestRobustness:
    @pytest.mark.parametrize(
        "sequence",
        [
            ["?", "?", "?", "?", "enter", "esc", "enter", "esc"],
            ["enter", "i", "ctrl+d", "ctrl+t", "ctrl+k", "enter", "enter", "ctrl+s", "esc", "esc"],
            ["g", "backspace", "backspace", "up", "enter", "c", "backspace", "tab", "tab", "tab", "space", "esc"],
            ["enter", "n", "n", "d", "y", "e", "down", "down", "down", "down", "down", "ctrl+d", "up", "esc"],
        ],
    )
    def test_key_sequences_never_raise(self, tables_state, sample_records, press, sequence):
        tables_state.browser.set_page(sample_records, None)
        for binding in sequence:
            press(tables_state, binding)
            if tables_state.mode is AppMode.BROWSING_RECORDS and not tables_state.browser.records:
                tables_state.browser.set_page(sample_records, None)
