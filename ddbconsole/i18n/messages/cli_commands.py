"""
i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for startup errors and the exit summary.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Startup
    # =========================================================================
    "no_credentials": {
        "ko": "AWS 자격 증명을 찾을 수 없습니다. 프로파일 또는 환경 변수를 확인하세요.",
        "en": "No AWS credentials found. Check your profile or environment variables.",
    },
    "startup_failed": {
        "ko": "시작 실패: {error}",
        "en": "Startup failed: {error}",
    },
    "debug_without_log_file": {
        "ko": "--debug는 --log-file과 함께 사용해야 합니다 (화면에는 로그가 출력되지 않음)",
        "en": "--debug has no effect without --log-file (logs are not shown on screen)",
    },
    # =========================================================================
    # Exit
    # =========================================================================
    "goodbye": {
        "ko": "콘솔을 종료했습니다 (로그 {count}건)",
        "en": "Console closed ({count} log entries)",
    },
}
