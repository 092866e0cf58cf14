"""
Celery 태스크: 접수된 지원서 전달
"""

import logging

from celery import shared_task

logger = logging.getLogger("intake.applications")


@shared_task
def deliver_job_application(record: dict):
    """
    큐로 전달된 지원서 레코드를 최종 처리합니다.

    지원서는 저장하지 않으므로 로그 기록이 종착점입니다.
    """
    logger.info(
        f"Delivered job application from {record.get('email')} "
        f"for {record.get('job_title')}"
    )
    return {"success": True, "resume_path": record.get("resume_path")}
