"""
i18n/messages/__init__.py - Message Registry

Aggregates all message dictionaries from sub-modules.

Structure:
    MESSAGES = {
        "common.yes": {"ko": "...", "en": "..."},
        "console.loading_tables": {"ko": "...", "en": "..."},
        "wizard.name_required": {"ko": "...", "en": "..."},
        ...
    }
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """Message dictionary type."""

    ko: str
    en: str


# Master message registry
MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """Register messages for a namespace.

    Args:
        namespace: Namespace prefix (e.g., "common", "wizard")
        messages: Dictionary of message key -> translations
    """
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


# These imports must come after register_messages is defined
from ddbconsole.i18n.messages.cli_commands import CLI_MESSAGES  # noqa: E402
from ddbconsole.i18n.messages.common import COMMON_MESSAGES  # noqa: E402
from ddbconsole.i18n.messages.console import CONSOLE_MESSAGES  # noqa: E402
from ddbconsole.i18n.messages.editor import EDITOR_MESSAGES  # noqa: E402
from ddbconsole.i18n.messages.help import HELP_MESSAGES  # noqa: E402
from ddbconsole.i18n.messages.wizard import WIZARD_MESSAGES  # noqa: E402

register_messages("common", COMMON_MESSAGES)
register_messages("console", CONSOLE_MESSAGES)
register_messages("wizard", WIZARD_MESSAGES)
register_messages("editor", EDITOR_MESSAGES)
register_messages("help", HELP_MESSAGES)
register_messages("cli", CLI_MESSAGES)

__all__ = ["MESSAGES", "register_messages", "MessageDict"]
