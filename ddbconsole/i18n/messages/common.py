"""
i18n/messages/common.py - Common Messages

Shared words used across several screens.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "loading": {
        "ko": "불러오는 중...",
        "en": "Loading...",
    },
}
