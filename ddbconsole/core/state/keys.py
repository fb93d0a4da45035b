"""
core/state/keys.py - Key events and key bindings

Key events are terminal independent; ``cli/ui/terminal.py`` decodes raw
input into KeyEvent objects. Commands are looked up through a Keymap so the
bindings can be changed without touching the dispatcher.

Binding strings:
    "q", "Y", "?"            plain characters (case sensitive)
    "space"                  the space bar
    "ctrl+s", "alt+b"        modified characters (letters lowercase)
    "enter", "esc", "tab", "backspace", "up", "down", ...   named keys
    "alt+backspace"          modified named keys

Usage:
    keymap = Keymap({Context.TABLES: {"x": Command.DELETE}})
    keymap.lookup(Context.TABLES, KeyEvent.of("x"))   # Command.DELETE
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class Key(Enum):
    CHAR = "char"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    TAB = "tab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    DELETE = "delete"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """One key press"""

    key: Key
    char: str = ""
    ctrl: bool = False
    alt: bool = False

    @classmethod
    def of(cls, char: str) -> KeyEvent:
        """Plain character"""
        return cls(Key.CHAR, char)

    @classmethod
    def named(cls, key: Key, ctrl: bool = False, alt: bool = False) -> KeyEvent:
        return cls(key, "", ctrl=ctrl, alt=alt)

    @classmethod
    def with_ctrl(cls, char: str) -> KeyEvent:
        return cls(Key.CHAR, char.lower(), ctrl=True)

    @classmethod
    def parse(cls, binding: str) -> KeyEvent:
        """Inverse of ``binding``"""
        ctrl = alt = False
        rest = binding
        while True:
            if rest.startswith("ctrl+") and len(rest) > 5:
                ctrl, rest = True, rest[5:]
            elif rest.startswith("alt+") and len(rest) > 4:
                alt, rest = True, rest[4:]
            else:
                break
        if rest == "space":
            return cls(Key.CHAR, " ", ctrl=ctrl, alt=alt)
        if len(rest) == 1:
            return cls(Key.CHAR, rest.lower() if ctrl else rest, ctrl=ctrl, alt=alt)
        try:
            return cls(Key(rest), "", ctrl=ctrl, alt=alt)
        except ValueError:
            return cls(Key.UNKNOWN, "", ctrl=ctrl, alt=alt)

    @property
    def is_text(self) -> bool:
        """Printable character without modifiers"""
        return self.key is Key.CHAR and not self.ctrl and not self.alt and self.char.isprintable()

    @property
    def has_modifiers(self) -> bool:
        return self.ctrl or self.alt

    @property
    def binding(self) -> str:
        if self.key is Key.CHAR:
            name = "space" if self.char == " " else self.char
        else:
            name = self.key.value
        if self.alt:
            name = f"alt+{name}"
        if self.ctrl:
            name = f"ctrl+{name}"
        return name


class Command(Enum):
    # global / navigation
    QUIT = "quit"
    HELP = "help"
    UP = "up"
    DOWN = "down"
    # tables view
    OPEN = "open"
    REFRESH = "refresh"
    OPEN_REGIONS = "open_regions"
    CREATE_TABLE = "create_table"
    DELETE = "delete"
    # records view
    BACK = "back"
    CREATE_RECORD = "create_record"
    EDIT_RECORD = "edit_record"
    NEXT_PAGE = "next_page"
    RELOAD_RECORD = "reload_record"
    # attribute editor
    EDIT_VALUE = "edit_value"
    EDIT_NAME = "edit_name"
    CYCLE_TYPE = "cycle_type"
    ADD_ATTRIBUTE = "add_attribute"
    DELETE_ATTRIBUTE = "delete_attribute"
    SAVE = "save"
    # confirmation
    CONFIRM = "confirm"
    DENY = "deny"
    # forms / text input
    NEXT_FIELD = "next_field"
    SUBMIT = "submit"
    CANCEL = "cancel"


class Context(Enum):
    """Binding scope; GLOBAL applies everywhere after the active scope"""

    GLOBAL = "global"
    TABLES = "tables"
    RECORDS = "records"
    SELECTOR = "selector"
    WIZARD = "wizard"
    EDITOR = "editor"
    TEXT_INPUT = "text_input"
    CONFIRM = "confirm"


DEFAULT_BINDINGS: dict[Context, dict[str, Command]] = {
    Context.GLOBAL: {
        "ctrl+c": Command.QUIT,
    },
    Context.TABLES: {
        "q": Command.QUIT,
        "?": Command.HELP,
        "g": Command.OPEN_REGIONS,
        "r": Command.REFRESH,
        "c": Command.CREATE_TABLE,
        "d": Command.DELETE,
        "enter": Command.OPEN,
        "up": Command.UP,
        "k": Command.UP,
        "down": Command.DOWN,
        "j": Command.DOWN,
    },
    Context.RECORDS: {
        "esc": Command.BACK,
        "?": Command.HELP,
        "i": Command.CREATE_RECORD,
        "e": Command.EDIT_RECORD,
        "enter": Command.EDIT_RECORD,
        "d": Command.DELETE,
        "n": Command.NEXT_PAGE,
        "r": Command.RELOAD_RECORD,
        "up": Command.UP,
        "k": Command.UP,
        "down": Command.DOWN,
        "j": Command.DOWN,
    },
    Context.SELECTOR: {
        "esc": Command.CANCEL,
        "enter": Command.SUBMIT,
        "up": Command.UP,
        "down": Command.DOWN,
    },
    Context.WIZARD: {
        "esc": Command.CANCEL,
        "enter": Command.SUBMIT,
        "tab": Command.NEXT_FIELD,
    },
    Context.EDITOR: {
        "esc": Command.BACK,
        "enter": Command.EDIT_VALUE,
        "ctrl+k": Command.EDIT_NAME,
        "ctrl+t": Command.CYCLE_TYPE,
        "ctrl+d": Command.DELETE_ATTRIBUTE,
        "ctrl+n": Command.ADD_ATTRIBUTE,
        "ctrl+s": Command.SAVE,
        "up": Command.UP,
        "down": Command.DOWN,
    },
    Context.TEXT_INPUT: {
        "enter": Command.SUBMIT,
        "esc": Command.CANCEL,
    },
    Context.CONFIRM: {
        "y": Command.CONFIRM,
        "Y": Command.CONFIRM,
        "n": Command.DENY,
        "N": Command.DENY,
        "esc": Command.DENY,
    },
}


class Keymap:
    """Context -> binding -> Command table

    Args:
        overrides: Extra or replacement bindings per context. Contexts may be
            given as Context members or their string values, commands as
            Command members or their string values. A None command removes
            the default binding.
    """

    def __init__(self, overrides: Mapping[Context | str, Mapping[str, Command | str | None]] | None = None):
        self._bindings: dict[Context, dict[str, Command]] = {
            context: dict(bindings) for context, bindings in DEFAULT_BINDINGS.items()
        }
        for context, bindings in (overrides or {}).items():
            scope = self._bindings.setdefault(Context(context), {})
            for binding, command in bindings.items():
                normalized = KeyEvent.parse(binding).binding
                if command is None:
                    scope.pop(normalized, None)
                else:
                    scope[normalized] = Command(command)

    def lookup(self, context: Context, event: KeyEvent) -> Command | None:
        binding = event.binding
        command = self._bindings.get(context, {}).get(binding)
        if command is None:
            command = self._bindings[Context.GLOBAL].get(binding)
        return command

    def keys_for(self, context: Context, command: Command) -> list[str]:
        """Bindings of a command in a context, in binding order (footer key hints)"""
        return [binding for binding, bound in self._bindings.get(context, {}).items() if bound is command]
