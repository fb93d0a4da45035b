"""
cli/ui/console.py - Rich console utilities

Shared Console instance and the output helpers used outside the full-screen
view (startup errors, exit summary).
"""

import logging
import platform

from rich.console import Console

# botocore noise
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)


def get_console() -> Console:
    """Create the rich Console used by the CLI."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# Global console instance
console = get_console()


# =============================================================================
# Status lines (rich styles only, no emoji)
# =============================================================================

SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"
SYMBOL_INFO = "•"


def print_error(message: str) -> None:
    console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def print_warning(message: str) -> None:
    console.print(f"[yellow]{SYMBOL_WARNING} {message}[/yellow]")


def print_info(message: str) -> None:
    console.print(f"[blue]{SYMBOL_INFO} {message}[/blue]")
