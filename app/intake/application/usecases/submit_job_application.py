from __future__ import annotations

import logging
from typing import Mapping, Optional

from common.application.errors import ErrorCode
from common.application.result import Err, Ok, Result
from django.core.files.uploadedfile import UploadedFile
from django.utils import timezone
from intake.domain.job_application import JobApplication
from intake.ports.acceptance_sink import AcceptanceSinkPort
from intake.serializers import JobApplicationSerializer
from intake.uploads import ResumeUploadIntake

logger = logging.getLogger(__name__)


class SubmitJobApplicationUseCase:
    """
    입사 지원 접수 유스케이스.

    1) 이력서 파일 접수 (타입/크기 검사 후 저장)
    2) 지원서 필드 검증
    3) 접수 싱크로 전달

    2) 또는 3)이 실패하면 1)에서 저장한 파일은 반드시 삭제됩니다.
    """

    def __init__(
        self,
        *,
        upload_intake: ResumeUploadIntake,
        acceptance_sink: AcceptanceSinkPort,
    ):
        self._upload_intake = upload_intake
        self._acceptance_sink = acceptance_sink

    def execute(
        self, *, fields: Mapping, upload: Optional[UploadedFile]
    ) -> Result[JobApplication]:
        if upload is None:
            invalid = _validate(fields)
            if isinstance(invalid, Err):
                return invalid
            return Err(
                code=ErrorCode.MISSING_ATTACHMENT,
                message="Resume file is required.",
            )

        received = self._upload_intake.receive(upload)
        if isinstance(received, Err):
            return received

        with self._upload_intake.hold(received.value) as handle:
            validated = _validate(fields)
            if isinstance(validated, Err):
                return validated

            application = JobApplication(
                **validated.value,
                resume=handle.upload,
                submitted_at=timezone.now(),
            )
            try:
                self._acceptance_sink.accept(application)
            except Exception as e:
                logger.error(f"Failed to hand off job application: {e}", exc_info=True)
                return Err(
                    code=ErrorCode.PERSISTENCE_FAILED,
                    message="Failed to submit application",
                    details={"error": str(e)},
                )
            handle.bind()

        logger.info(
            f"Accepted job application for {application.job_title} "
            f"with resume {application.resume.storage_name}"
        )
        return Ok(application)


def _validate(fields: Mapping) -> Result[dict]:
    serializer = JobApplicationSerializer(data=fields)
    if not serializer.is_valid():
        return Err(
            code=ErrorCode.VALIDATION_FAILED,
            message="Validation failed",
            details={"errors": serializer.errors},
        )
    return Ok(dict(serializer.validated_data))
