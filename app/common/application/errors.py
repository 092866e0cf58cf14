from __future__ import annotations


class ErrorCode:
    """유스케이스 Err.code 값 목록."""

    # 클라이언트 입력 문제 (재시도 불필요)
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    MISSING_ATTACHMENT = "MISSING_ATTACHMENT"

    NOT_FOUND = "NOT_FOUND"

    # 서버 측 문제
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"
    SYNC_FAILED = "SYNC_FAILED"

    CLIENT_ERRORS = frozenset(
        {VALIDATION_FAILED, INVALID_FILE_TYPE, FILE_TOO_LARGE, MISSING_ATTACHMENT}
    )
