# cli/ui - terminal UI (rich, raw keyboard input)
"""
Terminal UI components

    console: rich Console and print helpers
    render: render_frame(state)
    terminal: RawTerminal, decode_keys()
"""

from .console import (
    console,
    get_console,
    print_error,
    print_info,
    print_warning,
)

__all__ = [
    "console",
    "get_console",
    "print_error",
    "print_info",
    "print_warning",
]
