from __future__ import annotations

import logging

from intake.domain.job_application import JobApplication

logger = logging.getLogger("intake.applications")


class LoggingAcceptanceSink:
    """접수된 지원서를 로그로 남깁니다 (기본 싱크)."""

    def accept(self, application: JobApplication) -> None:
        logger.info(f"New job application received: {application.to_record()}")
