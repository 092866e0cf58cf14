"""
공통 응답 포맷

모든 career API는 다음 형태의 응답을 반환합니다.

    {"success": bool, "message": str, "data": ..., "errors": [...]}

서버 오류인 경우 "error" 필드에 (마스킹된) 상세 내용을 담습니다.
"""

from __future__ import annotations

from typing import Any

from common.application.errors import ErrorCode
from common.application.result import Err
from common.masking import mask_secrets
from rest_framework import status
from rest_framework.response import Response

_MISSING = object()

ERROR_STATUS = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FILE_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FILE_TOO_LARGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_ATTACHMENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.SYNC_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope(
    *,
    success: bool,
    message: str,
    data: Any = _MISSING,
    errors: list | None = None,
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    body: dict[str, Any] = {"success": success, "message": message}
    if data is not _MISSING:
        body["data"] = data
    if errors:
        body["errors"] = errors
    if error is not None:
        body["error"] = mask_secrets(error)
    return Response(body, status=status_code)


def err_response(err: Err) -> Response:
    """유스케이스 Err를 HTTP 응답으로 변환합니다."""
    status_code = ERROR_STATUS.get(err.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    details = err.details or {}

    if status_code >= 500:
        return envelope(
            success=False,
            message=err.message,
            error=str(details.get("error", err.message)),
            status_code=status_code,
        )

    errors = flatten_errors(details["errors"]) if "errors" in details else None
    if errors is None and err.code in ErrorCode.CLIENT_ERRORS:
        errors = [{"code": err.code, "message": err.message}]
    return envelope(
        success=False, message=err.message, errors=errors, status_code=status_code
    )


def server_error_response(message: str, exc: Exception) -> Response:
    return envelope(
        success=False,
        message=message,
        error=str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def flatten_errors(errors: Any, field: str = "") -> list[dict]:
    """
    DRF serializer.errors / Django ValidationError.message_dict 를
    [{"field": "skills.1", "message": "..."}] 형태로 평탄화합니다.
    """
    if isinstance(errors, dict):
        flat = []
        for key, value in errors.items():
            path = f"{field}.{key}" if field else str(key)
            flat.extend(flatten_errors(value, path))
        return flat
    if isinstance(errors, (list, tuple)):
        flat = []
        for value in errors:
            flat.extend(flatten_errors(value, field))
        return flat
    return [{"field": field or "non_field_errors", "message": str(errors)}]


def validation_failed_response(errors: Any) -> Response:
    return envelope(
        success=False,
        message="Validation failed",
        errors=flatten_errors(errors),
        status_code=status.HTTP_400_BAD_REQUEST,
    )
