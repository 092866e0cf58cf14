"""
Tests for JobApplicationView

입사 지원 API 엔드포인트 테스트
"""

from unittest.mock import patch

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.core.files.uploadhandler import TemporaryFileUploadHandler
from django.test import override_settings
from intake.uploads import PDF
from rest_framework import status
from rest_framework.test import APIClient

APPLICATION_FIELDS = {
    "full_name": "Ada Lovelace",
    "email": "ada@example.com",
    "phone": "555-0100",
    "job_title": "Engineer",
    "job_department": "Eng",
    "job_location": "Remote",
    "cover_letter": "Hello!",
}


def _resume(size=1024, content_type=PDF, name="resume.pdf"):
    return SimpleUploadedFile(name, b"x" * size, content_type=content_type)


class TestJobApplicationView:
    """JobApplicationView API 테스트"""

    def setup_method(self):
        self.client = APIClient()

    def test_apply_success(self, upload_dir):
        # When
        response = self.client.post(
            "/career/apply",
            {**APPLICATION_FIELDS, "resume": _resume()},
            format="multipart",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            "success": True,
            "message": "Your job application has been submitted successfully!",
        }
        stored = list(upload_dir.iterdir())
        assert len(stored) == 1
        assert stored[0].name.startswith("resume-")

    def test_apply_validation_failure_removes_file(self, upload_dir):
        """필수 필드 누락 → 400, 업로드 파일 삭제"""
        fields = {**APPLICATION_FIELDS, "phone": ""}

        response = self.client.post(
            "/career/apply", {**fields, "resume": _resume()}, format="multipart"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Validation failed"
        assert {"field": "phone", "message": "Phone number is required."} in (
            response.data["errors"]
        )
        assert list(upload_dir.iterdir()) == []

    def test_apply_without_resume(self, upload_dir):
        response = self.client.post(
            "/career/apply", APPLICATION_FIELDS, format="multipart"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["message"] == "Resume file is required."

    def test_apply_invalid_file_type(self, upload_dir):
        response = self.client.post(
            "/career/apply",
            {
                **APPLICATION_FIELDS,
                "resume": _resume(content_type="image/png", name="me.png"),
            },
            format="multipart",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["errors"][0]["code"] == "INVALID_FILE_TYPE"
        assert list(upload_dir.iterdir()) == []

    def test_apply_with_6mb_pdf_is_too_large(self, upload_dir):
        """6MB PDF → FILE_TOO_LARGE, 새 파일 없음"""
        response = self.client.post(
            "/career/apply",
            {**APPLICATION_FIELDS, "resume": _resume(size=6 * 1024 * 1024)},
            format="multipart",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["errors"][0]["code"] == "FILE_TOO_LARGE"
        assert list(upload_dir.iterdir()) == []

    def test_oversized_resume_is_cut_off_while_parsing(self, upload_dir):
        """상한을 넘는 업로드는 임시 파일에 5MB 이상 버퍼링되지 않음"""
        # Given
        buffered = []
        original = TemporaryFileUploadHandler.receive_data_chunk

        def counting_receive(handler, raw_data, start):
            buffered.append(len(raw_data))
            return original(handler, raw_data, start)

        # When
        with patch.object(
            TemporaryFileUploadHandler, "receive_data_chunk", counting_receive
        ):
            response = self.client.post(
                "/career/apply",
                {**APPLICATION_FIELDS, "resume": _resume(size=6 * 1024 * 1024)},
                format="multipart",
            )

        # Then
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["errors"][0]["code"] == "FILE_TOO_LARGE"
        assert sum(buffered) <= 5 * 1024 * 1024
        assert list(upload_dir.iterdir()) == []

    def test_sink_failure_is_server_error(self, upload_dir):
        with patch(
            "intake.adapters.logging_acceptance_sink.LoggingAcceptanceSink.accept",
            side_effect=RuntimeError("sink down"),
        ):
            response = self.client.post(
                "/career/apply",
                {**APPLICATION_FIELDS, "resume": _resume()},
                format="multipart",
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data["success"] is False
        assert response.data["error"] == "sink down"
        assert list(upload_dir.iterdir()) == []

    @override_settings(JOB_APPLICATION_SINK="celery")
    def test_celery_sink_queues_application(self, upload_dir):
        with patch("intake.tasks.deliver_job_application.delay") as mock_delay:
            response = self.client.post(
                "/career/apply",
                {**APPLICATION_FIELDS, "resume": _resume()},
                format="multipart",
            )

        assert response.status_code == status.HTTP_200_OK
        record = mock_delay.call_args.args[0]
        assert record["email"] == "ada@example.com"
        assert record["resume_path"].startswith(str(upload_dir.resolve()))
