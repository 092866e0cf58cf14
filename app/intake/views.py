"""
Job Application Views

입사 지원 API 엔드포인트 (Thin Controller)
"""

import logging

from common.application.result import Err
from common.responses import envelope, err_response, server_error_response
from drf_spectacular.utils import OpenApiTypes, extend_schema
from intake.application.container import (
    build_resume_upload_intake,
    build_submit_job_application_usecase,
)
from intake.serializers import JobApplicationRequestSerializer
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.views import APIView

logger = logging.getLogger(__name__)

RESUME_FIELD = "resume"


class JobApplicationView(APIView):
    authentication_classes = []  # 공개 엔드포인트
    permission_classes = []
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        request={"multipart/form-data": JobApplicationRequestSerializer},
        responses={200: OpenApiTypes.OBJECT, 400: OpenApiTypes.OBJECT},
        summary="Apply to a job",
        description="Submit an application with a single resume file (PDF/DOC/DOCX, max 5MB).",
    )
    def post(self, request):
        """
        입사 지원

        POST /career/apply
        """
        try:
            # request.FILES에 처음 접근하기 전에 등록해야 파싱 중에 상한이 적용됨
            upload_intake = build_resume_upload_intake()
            size_limit = upload_intake.size_limit_handler(request, RESUME_FIELD)
            request.upload_handlers.insert(0, size_limit)

            upload = request.FILES.get(RESUME_FIELD)
            if size_limit.exceeded:
                return err_response(upload_intake.too_large())

            result = build_submit_job_application_usecase().execute(
                fields=request.data, upload=upload
            )
            if isinstance(result, Err):
                return err_response(result)

            return envelope(
                success=True,
                message="Your job application has been submitted successfully!",
                status_code=status.HTTP_200_OK,
            )
        except APIException:
            # 파싱 오류 등은 공통 예외 핸들러가 처리
            raise
        except Exception as e:
            logger.error(f"Failed to submit application: {str(e)}", exc_info=True)
            return server_error_response("Failed to submit application", e)
