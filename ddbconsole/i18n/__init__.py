"""
i18n/__init__.py - Internationalization (i18n) Module

Provides translation support for the console.
Korean (ko) is the default language, with English (en) as an option.

Architecture:
    - Messages are organized by namespace (common, console, wizard, editor, ...)
    - Translation function t() supports format string interpolation
    - Language lives in a ContextVar, set once by the CLI (--lang)

Usage:
    from ddbconsole.i18n import t, set_lang, get_lang

    # Basic translation
    print(t("console.loading_tables", region="us-east-1"))

    # With explicit language
    print(t("wizard.name_required", lang="en"))  # "Table name is required"
"""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Any

# Default language context
_current_lang: ContextVar[str] = ContextVar("lang", default="ko")

# Supported languages
SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"


def get_lang() -> str:
    """Get current language from context variable."""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Set current language in context variable.

    Args:
        lang: Language code ("ko" or "en")
    """
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key to the current language.

    Args:
        key: Message key in namespace.key format (e.g., "console.refreshing")
        lang: Optional language override. If not provided, uses context variable.
        **kwargs: Format string arguments for interpolation

    Returns:
        Translated string, or key if translation not found

    Examples:
        >>> t("console.found_tables", lang="en", count=3)
        "Found 3 tables"
    """
    from ddbconsole.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()

    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        # Key not found, return key as-is
        return key

    text = msg_dict.get(lang)
    if text is None:
        # Fallback to Korean if English not available
        text = msg_dict.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, ValueError, IndexError):
            text = text.format(**kwargs)

    return text


def get_text(ko: str, en: str, lang: str | None = None) -> str:
    """Get text based on language without using message registry.

    Example:
        >>> get_text("저장됨", "Saved", lang="en")
        "Saved"
    """
    if lang is None:
        lang = get_lang()
    return en if lang == "en" else ko


__all__ = [
    "t",
    "get_text",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
