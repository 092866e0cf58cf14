from __future__ import annotations

from intake.domain.job_application import JobApplication


class CeleryAcceptanceSink:
    """접수된 지원서를 Celery 큐로 넘깁니다."""

    def accept(self, application: JobApplication) -> None:
        from intake.tasks import deliver_job_application

        deliver_job_application.delay(application.to_record())
