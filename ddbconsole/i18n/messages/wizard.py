"""
i18n/messages/wizard.py - Create Table Wizard Messages

Step titles, field labels and validation errors.
"""

from __future__ import annotations

WIZARD_MESSAGES = {
    # =========================================================================
    # Steps
    # =========================================================================
    "step_basic_config": {
        "ko": "1/3 기본 설정",
        "en": "1/3 Basic configuration",
    },
    "step_billing_config": {
        "ko": "2/3 요금 설정",
        "en": "2/3 Billing",
    },
    "step_review": {
        "ko": "3/3 확인",
        "en": "3/3 Review",
    },
    "review_confirm": {
        "ko": "Enter를 누르면 테이블을 생성합니다",
        "en": "Press Enter to create the table",
    },
    # =========================================================================
    # Fields
    # =========================================================================
    "field_table_name": {
        "ko": "테이블 이름",
        "en": "Table name",
    },
    "field_hash_key_name": {
        "ko": "파티션 키",
        "en": "Hash key",
    },
    "field_hash_key_type": {
        "ko": "파티션 키 타입",
        "en": "Hash key type",
    },
    "field_has_range_key": {
        "ko": "정렬 키 사용 (Space)",
        "en": "Use range key (Space)",
    },
    "field_range_key_name": {
        "ko": "정렬 키",
        "en": "Range key",
    },
    "field_range_key_type": {
        "ko": "정렬 키 타입",
        "en": "Range key type",
    },
    "field_billing_mode": {
        "ko": "요금 모드",
        "en": "Billing mode",
    },
    "field_read_capacity": {
        "ko": "읽기 용량 (RCU)",
        "en": "Read capacity (RCU)",
    },
    "field_write_capacity": {
        "ko": "쓰기 용량 (WCU)",
        "en": "Write capacity (WCU)",
    },
    # =========================================================================
    # Validation
    # =========================================================================
    "name_required": {
        "ko": "테이블 이름을 입력하세요",
        "en": "Table name is required",
    },
    "name_length": {
        "ko": "테이블 이름은 {min}-{max}자여야 합니다",
        "en": "Table name must be {min}-{max} characters",
    },
    "hash_key_required": {
        "ko": "파티션 키 이름을 입력하세요",
        "en": "Hash key name is required",
    },
    "range_key_required": {
        "ko": "정렬 키를 사용하려면 이름을 입력하세요",
        "en": "Range key name is required when enabled",
    },
    "read_capacity_invalid": {
        "ko": "읽기 용량은 1 이상의 정수여야 합니다",
        "en": "Read capacity must be a positive integer",
    },
    "write_capacity_invalid": {
        "ko": "쓰기 용량은 1 이상의 정수여야 합니다",
        "en": "Write capacity must be a positive integer",
    },
}
