from __future__ import annotations

import logging

from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter의 %(request_id)s 가 요청 밖(Celery, 관리 명령)에서도 깨지지 않도록 보장
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True
