"""
i18n/messages/editor.py - Item Editor Messages
"""

from __future__ import annotations

EDITOR_MESSAGES = {
    "mode_create": {
        "ko": "새 항목",
        "en": "New item",
    },
    "mode_edit": {
        "ko": "항목 편집",
        "en": "Edit item",
    },
    "column_name": {
        "ko": "속성",
        "en": "Attribute",
    },
    "column_type": {
        "ko": "타입",
        "en": "Type",
    },
    "column_value": {
        "ko": "값",
        "en": "Value",
    },
    "add_row": {
        "ko": "+ 속성 추가",
        "en": "+ add attribute",
    },
    "key_protected": {
        "ko": "키 속성 '{name}'은(는) 이름 변경, 타입 변경, 삭제할 수 없습니다",
        "en": "Key attribute '{name}' cannot be renamed, retyped or deleted",
    },
    "duplicate_name": {
        "ko": "속성 '{name}'이(가) 이미 있습니다",
        "en": "Attribute '{name}' already exists",
    },
}
