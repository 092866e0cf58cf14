from __future__ import annotations

import re

_SECRET_PATTERNS: list[re.Pattern[str]] = [
    # bearer 토큰 / jwt 형태 문자열
    re.compile(r"Bearer\s+[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    re.compile(
        r"\b(access_token|refresh_token|x-api-key|api_secret_key|password)\b\s*[:=]\s*[^\s,]+",
        re.IGNORECASE,
    ),
]

# 업로드 저장 경로 등 서버 내부 절대 경로
_PATH_PATTERN = re.compile(r"(?:/[\w.\-]+){2,}")

_MAX_LENGTH = 500


def mask_secrets(text: str) -> str:
    """
    에러 응답/로그에 민감 정보(토큰, 서버 경로)가 섞이지 않도록 마스킹합니다.
    """
    if not text:
        return text
    masked = text
    for pat in _SECRET_PATTERNS:
        masked = pat.sub("[REDACTED]", masked)
    masked = _PATH_PATTERN.sub("[PATH]", masked)
    if len(masked) > _MAX_LENGTH:
        masked = masked[:_MAX_LENGTH] + "...[TRUNCATED]"
    return masked
