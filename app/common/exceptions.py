from __future__ import annotations

from common.responses import envelope, flatten_errors
from rest_framework.views import exception_handler


def envelope_exception_handler(exc, context):
    """
    DRF 예외(인증/권한/파싱 오류 등)도 공통 응답 포맷으로 감쌉니다.

    settings.REST_FRAMEWORK["EXCEPTION_HANDLER"]에 등록합니다.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data
    if isinstance(detail, dict) and set(detail) == {"detail"}:
        message = str(detail["detail"])
        errors = None
    else:
        message = "Validation failed"
        errors = flatten_errors(detail)

    wrapped = envelope(
        success=False,
        message=message,
        errors=errors,
        status_code=response.status_code,
    )
    for header in ("WWW-Authenticate", "Retry-After"):
        if header in response:
            wrapped[header] = response[header]
    return wrapped
