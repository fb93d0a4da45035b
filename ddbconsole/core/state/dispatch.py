"""
core/state/dispatch.py - Key event dispatch

handle_key_event() routes one KeyEvent to the handler of the active mode.
Handlers only mutate ConsoleState: they switch modes, update a substate or
raise a pending action for the runner. They never call the backend and never
raise; validation failures end up in the status line.

Text entry (selector filter, wizard text fields, editor sub-edit) consumes
printable characters that are not bound to a command in that context.
"""

from __future__ import annotations

import logging
from typing import Callable

from ddbconsole.core.exceptions import ValidationError
from ddbconsole.core.state.app import AppMode, ConsoleState, RecordTarget, TableTarget
from ddbconsole.core.state.keys import Command, Context, Key, KeyEvent
from ddbconsole.i18n import t

logger = logging.getLogger(__name__)


def handle_key_event(state: ConsoleState, event: KeyEvent) -> bool:
    """Apply one key event

    Returns:
        True when the operator asked to quit
    """
    if state.keymap.lookup(Context.GLOBAL, event) is Command.QUIT:
        return True
    return _HANDLERS[state.mode](state, event)


# =============================================================================
# Views
# =============================================================================


def _handle_tables(state: ConsoleState, event: KeyEvent) -> bool:
    command = state.keymap.lookup(Context.TABLES, event)

    if command is Command.QUIT:
        return True
    if command is Command.HELP:
        state.toggle_help()
    elif command is Command.OPEN_REGIONS:
        state.open_region_selector()
    elif command is Command.REFRESH:
        state.pending.refresh = True
    elif command is Command.CREATE_TABLE:
        state.open_wizard()
    elif command is Command.DELETE:
        name = state.catalog.selected_name
        if name is not None:
            state.ask_delete(TableTarget(name))
    elif command is Command.OPEN:
        state.enter_records()
    elif command is Command.UP:
        state.catalog.move_up()
    elif command is Command.DOWN:
        state.catalog.move_down()
    return False


def _handle_records(state: ConsoleState, event: KeyEvent) -> bool:
    command = state.keymap.lookup(Context.RECORDS, event)
    browser = state.browser

    if command is Command.QUIT:
        return True
    if command is Command.BACK:
        state.exit_records()
    elif command is Command.HELP:
        state.toggle_help()
    elif command is Command.CREATE_RECORD:
        state.start_create_record()
    elif command is Command.EDIT_RECORD:
        state.start_edit_record()
    elif command is Command.DELETE:
        if browser.selected_record is not None:
            state.ask_delete(RecordTarget())
    elif command is Command.NEXT_PAGE:
        state.pending.next_page = True
    elif command is Command.RELOAD_RECORD:
        if browser.selected_record is not None:
            state.pending.reload_record = True
    elif command is Command.UP:
        browser.move_up()
    elif command is Command.DOWN:
        browser.move_down()
    return False


def _handle_region_selector(state: ConsoleState, event: KeyEvent) -> bool:
    command = state.keymap.lookup(Context.SELECTOR, event)
    selector = state.region_selector

    if command is Command.QUIT:
        return True
    if command is Command.CANCEL:
        state.close_region_selector()
    elif command is Command.SUBMIT:
        state.confirm_region()
    elif command is Command.UP:
        selector.move_up()
    elif command is Command.DOWN:
        selector.move_down()
    elif event.key is Key.BACKSPACE:
        selector.pop_char()
    elif event.is_text:
        selector.push_char(event.char)
    return False


# =============================================================================
# Create wizard
# =============================================================================


def _handle_wizard(state: ConsoleState, event: KeyEvent) -> bool:
    command = state.keymap.lookup(Context.WIZARD, event)
    wizard = state.wizard

    if command is Command.QUIT:
        return True
    if command is Command.CANCEL:
        state.close_wizard()
    elif command is Command.SUBMIT:
        try:
            config = wizard.advance()
        except ValidationError as e:
            logger.debug("wizard step rejected: %s", e.details)
            state.set_status(e.message)
            return False
        state.set_status("")
        if config is not None:
            state.pending.create_table = config
    elif command is Command.NEXT_FIELD:
        wizard.next_field()
    elif event.key is Key.BACKSPACE:
        wizard.backspace(has_modifiers=event.has_modifiers)
    elif event.is_text:
        wizard.input_char(event.char)
    return False


# =============================================================================
# Record editor
# =============================================================================


def _handle_editor(state: ConsoleState, event: KeyEvent) -> bool:
    editor = state.editor
    if editor is None:
        state.close_editor()
        return False

    if editor.editing is not None:
        command = state.keymap.lookup(Context.TEXT_INPUT, event)
        if command is Command.SUBMIT:
            try:
                editor.commit_edit()
            except ValidationError as e:
                state.set_status(e.message)
        elif command is Command.CANCEL:
            editor.cancel_edit()
        elif event.key is Key.BACKSPACE:
            editor.backspace()
        elif event.is_text:
            editor.input_char(event.char)
        return False

    command = state.keymap.lookup(Context.EDITOR, event)

    if command is Command.QUIT:
        return True
    if command is Command.BACK:
        state.close_editor()
    elif command is Command.UP:
        editor.move_up()
    elif command is Command.DOWN:
        editor.move_down()
    elif command is Command.EDIT_VALUE:
        if editor.on_add_row:
            editor.add_attribute()
        else:
            editor.start_value_edit()
    elif command is Command.ADD_ATTRIBUTE:
        editor.add_attribute()
    elif command is Command.SAVE:
        state.pending.save_record = True
    elif command in _PROTECTED_COMMANDS:
        applied = _PROTECTED_COMMANDS[command](editor)
        current = editor.selected_attribute
        if not applied and current is not None:
            state.set_status(t("editor.key_protected", name=current[0]))
    return False


_PROTECTED_COMMANDS: dict[Command, Callable] = {
    Command.EDIT_NAME: lambda editor: editor.start_key_edit(),
    Command.CYCLE_TYPE: lambda editor: editor.cycle_type(),
    Command.DELETE_ATTRIBUTE: lambda editor: editor.delete_attribute(),
}


# =============================================================================
# Confirmation / help
# =============================================================================


def _handle_confirm(state: ConsoleState, event: KeyEvent) -> bool:
    command = state.keymap.lookup(Context.CONFIRM, event)
    if command is Command.CONFIRM:
        state.resolve_delete(True)
    elif command is Command.DENY:
        state.resolve_delete(False)
    return False


def _handle_help(state: ConsoleState, event: KeyEvent) -> bool:
    state.toggle_help()
    return False


_HANDLERS: dict[AppMode, Callable[[ConsoleState, KeyEvent], bool]] = {
    AppMode.BROWSING_TABLES: _handle_tables,
    AppMode.BROWSING_RECORDS: _handle_records,
    AppMode.SELECTING_REGION: _handle_region_selector,
    AppMode.CREATING_TABLE: _handle_wizard,
    AppMode.EDITING_RECORD: _handle_editor,
    AppMode.CONFIRMING_DELETE: _handle_confirm,
    AppMode.SHOWING_HELP: _handle_help,
}
