from __future__ import annotations

from django.conf import settings
from intake.adapters.celery_acceptance_sink import CeleryAcceptanceSink
from intake.adapters.logging_acceptance_sink import LoggingAcceptanceSink
from intake.application.usecases.submit_job_application import (
    SubmitJobApplicationUseCase,
)
from intake.ports.acceptance_sink import AcceptanceSinkPort
from intake.uploads import (
    DEFAULT_ALLOWED_CONTENT_TYPES,
    DEFAULT_MAX_BYTES,
    ResumeUploadIntake,
)

SINKS = {
    "log": LoggingAcceptanceSink,
    "celery": CeleryAcceptanceSink,
}


def build_resume_upload_intake() -> ResumeUploadIntake:
    return ResumeUploadIntake(
        directory=settings.RESUME_UPLOAD_DIR,
        max_bytes=getattr(settings, "RESUME_UPLOAD_MAX_BYTES", DEFAULT_MAX_BYTES),
        allowed_content_types=getattr(
            settings,
            "RESUME_UPLOAD_ALLOWED_CONTENT_TYPES",
            DEFAULT_ALLOWED_CONTENT_TYPES,
        ),
    )


def build_acceptance_sink() -> AcceptanceSinkPort:
    name = getattr(settings, "JOB_APPLICATION_SINK", "log")
    try:
        return SINKS[name]()
    except KeyError:
        raise ValueError(f"Unknown JOB_APPLICATION_SINK: {name}")


def build_submit_job_application_usecase() -> SubmitJobApplicationUseCase:
    """
    Intake 유스케이스 조립(Dependency Injection).
    """
    return SubmitJobApplicationUseCase(
        upload_intake=build_resume_upload_intake(),
        acceptance_sink=build_acceptance_sink(),
    )
