# core/state - console state machine
"""
Console state machine

Modules:
    keys: KeyEvent, Command, Keymap
    selector: FilterSelector (region / instance type)
    wizard: create-table wizard
    editor: record attribute editor
    browser: table catalog, item page, pagination
    app: ConsoleState and its transitions
    dispatch: handle_key_event()
    runner: ConsoleRunner (poll, dispatch, one backend call per tick)

Note:
    This module uses the lazy import pattern.
"""

__all__ = [
    "AppMode",
    "ConsoleState",
    "ConsoleRunner",
    "KeyEvent",
    "Keymap",
    "handle_key_event",
]

_SOURCES = {
    "AppMode": "app",
    "ConsoleState": "app",
    "ConsoleRunner": "runner",
    "KeyEvent": "keys",
    "Keymap": "keys",
    "handle_key_event": "dispatch",
}


def __getattr__(name: str):
    """Lazy import - load the submodule on first use"""
    if name in _SOURCES:
        import importlib

        module = importlib.import_module(f"{__name__}.{_SOURCES[name]}")
        return getattr(module, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
