"""
i18n/messages/console.py - Console Messages

Status line, activity log, and view labels of the tables / records /
region / confirmation screens.
"""

from __future__ import annotations

CONSOLE_MESSAGES = {
    # =========================================================================
    # Modes (header)
    # =========================================================================
    "mode_browsing_tables": {
        "ko": "테이블 목록",
        "en": "Tables",
    },
    "mode_browsing_records": {
        "ko": "항목 목록",
        "en": "Items",
    },
    "mode_selecting_region": {
        "ko": "리전 선택",
        "en": "Select Region",
    },
    "mode_creating_table": {
        "ko": "테이블 생성",
        "en": "Create Table",
    },
    "mode_editing_record": {
        "ko": "항목 편집",
        "en": "Edit Item",
    },
    "mode_confirming_delete": {
        "ko": "삭제 확인",
        "en": "Confirm Delete",
    },
    "mode_showing_help": {
        "ko": "도움말",
        "en": "Help",
    },
    # =========================================================================
    # Key hints (footer): "<keys> <label>"
    # =========================================================================
    "hint_move": {
        "ko": "이동",
        "en": "move",
    },
    "hint_open": {
        "ko": "항목",
        "en": "items",
    },
    "hint_create": {
        "ko": "생성",
        "en": "create",
    },
    "hint_delete": {
        "ko": "삭제",
        "en": "delete",
    },
    "hint_refresh": {
        "ko": "새로고침",
        "en": "refresh",
    },
    "hint_region": {
        "ko": "리전",
        "en": "region",
    },
    "hint_help": {
        "ko": "도움말",
        "en": "help",
    },
    "hint_quit": {
        "ko": "종료",
        "en": "quit",
    },
    "hint_insert": {
        "ko": "추가",
        "en": "insert",
    },
    "hint_edit": {
        "ko": "편집",
        "en": "edit",
    },
    "hint_next_page": {
        "ko": "다음 페이지",
        "en": "next page",
    },
    "hint_reload": {
        "ko": "다시 읽기",
        "en": "reload",
    },
    "hint_back": {
        "ko": "뒤로",
        "en": "back",
    },
    "hint_select": {
        "ko": "선택",
        "en": "select",
    },
    "hint_cancel": {
        "ko": "취소",
        "en": "cancel",
    },
    "hint_next_field": {
        "ko": "다음 필드",
        "en": "next field",
    },
    "hint_next_step": {
        "ko": "다음 단계",
        "en": "next step",
    },
    "hint_edit_value": {
        "ko": "값 편집",
        "en": "edit value",
    },
    "hint_rename": {
        "ko": "이름",
        "en": "name",
    },
    "hint_type": {
        "ko": "타입",
        "en": "type",
    },
    "hint_add": {
        "ko": "추가",
        "en": "add",
    },
    "hint_save": {
        "ko": "저장",
        "en": "save",
    },
    "hint_discard": {
        "ko": "취소",
        "en": "discard",
    },
    "hint_apply": {
        "ko": "적용",
        "en": "apply",
    },
    "note_selecting_region": {
        "ko": "입력하여 필터 (정규식)",
        "en": "Type to filter (regex)",
    },
    "note_creating_table": {
        "ko": "Backspace 이전 단계",
        "en": "Backspace previous step",
    },
    "note_showing_help": {
        "ko": "아무 키나 누르면 돌아갑니다",
        "en": "Press any key to return",
    },
    # =========================================================================
    # Tables view
    # =========================================================================
    "tables_title": {
        "ko": "테이블 ({count}개)",
        "en": "Tables ({count})",
    },
    "column_table": {
        "ko": "테이블 이름",
        "en": "Table name",
    },
    "no_tables": {
        "ko": "테이블이 없습니다",
        "en": "No tables",
    },
    "detail_title": {
        "ko": "상세 정보",
        "en": "Details",
    },
    "detail_unavailable": {
        "ko": "상세 정보를 가져오지 못했습니다 (r: 새로고침)",
        "en": "Details unavailable (r: refresh)",
    },
    "detail_not_loaded": {
        "ko": "{table} 상세 정보를 아직 불러오지 못했습니다",
        "en": "Details of {table} are not loaded yet",
    },
    "field_status": {
        "ko": "상태",
        "en": "Status",
    },
    "field_hash_key": {
        "ko": "파티션 키",
        "en": "Hash key",
    },
    "field_range_key": {
        "ko": "정렬 키",
        "en": "Range key",
    },
    "field_billing": {
        "ko": "요금 모드",
        "en": "Billing",
    },
    "field_capacity": {
        "ko": "용량 (RCU/WCU)",
        "en": "Capacity (RCU/WCU)",
    },
    "field_items": {
        "ko": "항목 수",
        "en": "Items",
    },
    "field_size": {
        "ko": "크기",
        "en": "Size",
    },
    "field_region": {
        "ko": "리전",
        "en": "Region",
    },
    # =========================================================================
    # Records view
    # =========================================================================
    "records_title": {
        "ko": "{table} - {page} 페이지, {count}개 ({more})",
        "en": "{table} - page {page}, {count} items ({more})",
    },
    "more_pages": {
        "ko": "n: 다음 페이지",
        "en": "n: next page",
    },
    "last_page": {
        "ko": "마지막 페이지",
        "en": "last page",
    },
    "column_attributes": {
        "ko": "속성",
        "en": "Attributes",
    },
    "no_records": {
        "ko": "항목이 없습니다",
        "en": "No items",
    },
    "no_table_open": {
        "ko": "열린 테이블이 없습니다",
        "en": "No table open",
    },
    # =========================================================================
    # Region selector
    # =========================================================================
    "region_title": {
        "ko": "리전 선택",
        "en": "Select Region",
    },
    "column_region": {
        "ko": "리전",
        "en": "Region",
    },
    "filter": {
        "ko": "필터",
        "en": "Filter",
    },
    "current": {
        "ko": "(현재)",
        "en": "(current)",
    },
    "no_match": {
        "ko": "일치하는 리전이 없습니다",
        "en": "No matching region",
    },
    # =========================================================================
    # Delete confirmation
    # =========================================================================
    "confirm_title": {
        "ko": "삭제 확인",
        "en": "Confirm Delete",
    },
    "confirm_delete_table": {
        "ko": "테이블 '{table}'을(를) 삭제하시겠습니까? 되돌릴 수 없습니다.",
        "en": "Delete table '{table}'? This cannot be undone.",
    },
    "confirm_delete_record": {
        "ko": "항목 {item}을(를) 삭제하시겠습니까?",
        "en": "Delete item {item}?",
    },
    "confirm_hint": {
        "ko": "y: 삭제 / n, Esc: 취소",
        "en": "y: delete / n, Esc: cancel",
    },
    # =========================================================================
    # Activity log / status
    # =========================================================================
    "log_title": {
        "ko": "로그",
        "en": "Log",
    },
    "loading_tables": {
        "ko": "{region} 테이블 목록을 불러오는 중...",
        "en": "Loading tables in {region}...",
    },
    "found_tables": {
        "ko": "테이블 {count}개 발견",
        "en": "Found {count} tables",
    },
    "list_failed": {
        "ko": "테이블 목록 조회 실패: {error}",
        "en": "Failed to list tables: {error}",
    },
    "describe_failed": {
        "ko": "{table} 상세 정보 조회 실패: {error}",
        "en": "Failed to load details for {table}: {error}",
    },
    "switching_region": {
        "ko": "리전을 {region}(으)로 전환합니다",
        "en": "Switching to region {region}",
    },
    "region_switch_failed": {
        "ko": "{region} 리전 전환 실패: {error}",
        "en": "Failed to switch to region {region}: {error}",
    },
    "creating_table": {
        "ko": "테이블 '{table}' 생성 중...",
        "en": "Creating table '{table}'...",
    },
    "table_created": {
        "ko": "테이블 '{table}' 생성 요청 완료",
        "en": "Table '{table}' created",
    },
    "create_failed": {
        "ko": "테이블 생성 실패: {error}",
        "en": "Failed to create table: {error}",
    },
    "deleting_table": {
        "ko": "테이블 '{table}' 삭제 중...",
        "en": "Deleting table '{table}'...",
    },
    "table_deleted": {
        "ko": "테이블 '{table}' 삭제 완료",
        "en": "Table '{table}' deleted",
    },
    "delete_table_failed": {
        "ko": "테이블 삭제 실패: {error}",
        "en": "Failed to delete table: {error}",
    },
    "loading_records": {
        "ko": "{table} 항목을 불러오는 중 ({page} 페이지)...",
        "en": "Loading items from {table} (page {page})...",
    },
    "loaded_records": {
        "ko": "항목 {count}개를 불러왔습니다",
        "en": "Loaded {count} items",
    },
    "scan_failed": {
        "ko": "항목 조회 실패: {error}",
        "en": "Failed to load items: {error}",
    },
    "no_more_pages": {
        "ko": "다음 페이지가 없습니다",
        "en": "No more pages",
    },
    "reload_failed": {
        "ko": "항목 다시 읽기 실패: {error}",
        "en": "Failed to reload item: {error}",
    },
    "record_gone": {
        "ko": "항목이 더 이상 존재하지 않습니다",
        "en": "Item no longer exists",
    },
    "saving_record": {
        "ko": "{table}에 항목 저장 중...",
        "en": "Saving item to {table}...",
    },
    "record_saved": {
        "ko": "항목 저장 완료",
        "en": "Item saved",
    },
    "save_failed": {
        "ko": "항목 저장 실패: {error}",
        "en": "Failed to save item: {error}",
    },
    "deleting_record": {
        "ko": "{table}에서 항목 삭제 중...",
        "en": "Deleting item from {table}...",
    },
    "record_deleted": {
        "ko": "항목 삭제 완료",
        "en": "Item deleted",
    },
    "delete_record_failed": {
        "ko": "항목 삭제 실패: {error}",
        "en": "Failed to delete item: {error}",
    },
}
