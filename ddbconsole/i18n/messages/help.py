"""
i18n/messages/help.py - Help Screen Messages
"""

from __future__ import annotations

HELP_MESSAGES = {
    "title": {
        "ko": "도움말",
        "en": "Help",
    },
    # =========================================================================
    # Tables
    # =========================================================================
    "tables_title": {
        "ko": "테이블 목록",
        "en": "Tables",
    },
    "tables_nav": {
        "ko": "↑/k, ↓/j    테이블 이동",
        "en": "↑/k, ↓/j    move between tables",
    },
    "tables_open": {
        "ko": "Enter       항목 보기",
        "en": "Enter       browse items",
    },
    "tables_actions": {
        "ko": "c / d / r   생성 / 삭제 / 새로고침",
        "en": "c / d / r   create / delete / refresh",
    },
    "tables_region": {
        "ko": "g           리전 선택 (정규식 필터)",
        "en": "g           select region (regex filter)",
    },
    # =========================================================================
    # Records
    # =========================================================================
    "records_title": {
        "ko": "항목 목록",
        "en": "Items",
    },
    "records_nav": {
        "ko": "↑/k, ↓/j    항목 이동, Esc 테이블 목록",
        "en": "↑/k, ↓/j    move between items, Esc back to tables",
    },
    "records_edit": {
        "ko": "i / e       새 항목 / 항목 편집",
        "en": "i / e       new item / edit item",
    },
    "records_delete": {
        "ko": "d           항목 삭제",
        "en": "d           delete item",
    },
    "records_page": {
        "ko": "n / r       다음 페이지 / 선택 항목 다시 읽기",
        "en": "n / r       next page / reload selected item",
    },
    # =========================================================================
    # Editor
    # =========================================================================
    "editor_title": {
        "ko": "항목 편집",
        "en": "Item editor",
    },
    "editor_edit": {
        "ko": "Enter       값 편집 (Enter 확정, Esc 취소)",
        "en": "Enter       edit value (Enter commit, Esc cancel)",
    },
    "editor_name": {
        "ko": "Ctrl+K      속성 이름 변경",
        "en": "Ctrl+K      rename attribute",
    },
    "editor_type": {
        "ko": "Ctrl+T      타입 변경 (S → N → B → S)",
        "en": "Ctrl+T      cycle type (S → N → B → S)",
    },
    "editor_add": {
        "ko": "Ctrl+N / Ctrl+D  속성 추가 / 삭제",
        "en": "Ctrl+N / Ctrl+D  add / delete attribute",
    },
    "editor_save": {
        "ko": "Ctrl+S      저장, Esc 변경 취소",
        "en": "Ctrl+S      save, Esc discard changes",
    },
    # =========================================================================
    # Wizard
    # =========================================================================
    "wizard_title": {
        "ko": "테이블 생성",
        "en": "Create table",
    },
    "wizard_fields": {
        "ko": "Tab         다음 필드, Enter 다음 단계",
        "en": "Tab         next field, Enter next step",
    },
    "wizard_types": {
        "ko": "s / n / b   키 타입, o / p 요금 모드, Space 정렬 키 사용",
        "en": "s / n / b   key type, o / p billing mode, Space toggle range key",
    },
    "wizard_back": {
        "ko": "Backspace   이전 단계 (선택 필드에서)",
        "en": "Backspace   previous step (on selector fields)",
    },
    # =========================================================================
    # Global
    # =========================================================================
    "global_title": {
        "ko": "공통",
        "en": "Global",
    },
    "global_quit": {
        "ko": "q / Ctrl+C  종료",
        "en": "q / Ctrl+C  quit",
    },
    "global_close": {
        "ko": "아무 키     도움말 닫기",
        "en": "any key     close help",
    },
}
