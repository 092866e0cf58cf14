"""
Job Listing Views

채용 공고 API 엔드포인트 (Thin Controller)
"""

import logging

from common.application.result import Err, PersistedSyncFailed
from common.responses import (
    envelope,
    err_response,
    server_error_response,
    validation_failed_response,
)
from job.application.container import (
    build_create_job_listing_usecase,
    build_delete_job_listing_usecase,
    build_list_job_listings_usecase,
    build_update_job_listing_usecase,
)
from job.models import JobListing
from job.permissions import HasSimpleSecretKey, IsCareerAdmin
from job.serializers import JobListingSerializer
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)

SYNC_PENDING_NOTE = " Content index update is pending."


class JobListingViewSet(GenericViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    저장/동기화 순서와 실패 구분은 유스케이스에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    """

    queryset = JobListing.objects.all()
    serializer_class = JobListingSerializer
    lookup_value_regex = "[^/]+"

    def get_permissions(self):
        if self.action == "list":
            return [AllowAny()]
        return [(HasSimpleSecretKey | IsCareerAdmin)()]

    def list(self, request, *args, **kwargs):
        """
        채용 공고 목록 조회

        GET /career/jobs
        """
        try:
            result = build_list_job_listings_usecase().execute()
            if isinstance(result, Err):
                return err_response(result)

            serializer = self.get_serializer(result.value, many=True)
            return envelope(
                success=True,
                message="Job listings fetched successfully!",
                data=serializer.data,
            )
        except Exception as e:
            logger.error(f"Failed to list job listings: {str(e)}", exc_info=True)
            return server_error_response("Failed to fetch job listings", e)

    def create(self, request, *args, **kwargs):
        """
        채용 공고 생성

        POST /career/jobs
        """
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return validation_failed_response(serializer.errors)

        try:
            result = build_create_job_listing_usecase().execute(
                fields=serializer.validated_data
            )
            return self._mutation_response(
                result,
                message="Job listing added successfully!",
                status_code=status.HTTP_201_CREATED,
            )
        except Exception as e:
            logger.error(f"Failed to create job listing: {str(e)}", exc_info=True)
            return server_error_response("Failed to add job listing", e)

    def update(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 수정 (부분 수정 의미)

        PUT /career/jobs/<id>
        """
        return self._update(request, pk)

    def partial_update(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 수정 (부분)

        PATCH /career/jobs/<id>
        """
        return self._update(request, pk)

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 삭제

        DELETE /career/jobs/<id>
        """
        try:
            result = build_delete_job_listing_usecase().execute(listing_id=pk)
            return self._mutation_response(
                result,
                message="Job listing deleted successfully!",
                include_data=False,
            )
        except Exception as e:
            logger.error(f"Failed to delete job listing {pk}: {str(e)}", exc_info=True)
            return server_error_response("Failed to delete job listing", e)

    def _update(self, request, pk):
        serializer = self.get_serializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return validation_failed_response(serializer.errors)

        try:
            result = build_update_job_listing_usecase().execute(
                listing_id=pk, fields=serializer.validated_data
            )
            return self._mutation_response(
                result, message="Job listing updated successfully!"
            )
        except Exception as e:
            logger.error(f"Failed to update job listing {pk}: {str(e)}", exc_info=True)
            return server_error_response("Failed to update job listing", e)

    def _mutation_response(
        self, result, *, message, status_code=status.HTTP_200_OK, include_data=True
    ):
        if isinstance(result, Err):
            return err_response(result)

        data = self.get_serializer(result.value).data if include_data else None
        if isinstance(result, PersistedSyncFailed):
            # 원본 저장은 유효하므로 성공으로 응답하되 동기화 실패를 함께 알립니다.
            return envelope(
                success=True,
                message=message + SYNC_PENDING_NOTE,
                data=data,
                errors=[
                    {
                        "code": result.sync_error.code,
                        "message": result.sync_error.message,
                    }
                ],
                status_code=status_code,
            )
        return envelope(
            success=True, message=message, data=data, status_code=status_code
        )

