"""
Tests for JobListing Views

채용 공고 API 엔드포인트 테스트
"""

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.test import override_settings
from job.models import JobListing
from job.permissions import CAREER_ADMIN_GROUP
from rest_framework import status
from rest_framework.test import APIClient

User = get_user_model()

LISTING_DATA = {
    "title": "Engineer",
    "department": "Eng",
    "location": "Remote",
    "type": "FT",
    "salary": "100k",
    "description": "...",
    "skills": ["Go", "SQL"],
}


@pytest.mark.django_db
class TestJobListingViewSet:
    """JobListingViewSet API 테스트"""

    def setup_method(self):
        """각 테스트 전에 실행"""
        self.client = APIClient()
        # 관리자 계정으로 인증
        self.admin = User.objects.create_user(
            username="admin", email="admin@example.com", password="testpass123"
        )
        self.admin.is_staff = True
        self.admin.save()
        self.client.force_authenticate(user=self.admin)

    def test_list_job_listings_is_public(self):
        """채용 공고 목록 조회 (인증 불필요)"""
        # Given
        JobListing.objects.create(**LISTING_DATA)

        # When
        response = APIClient().get("/career/jobs")

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["success"] is True
        assert response.data["message"] == "Job listings fetched successfully!"
        assert len(response.data["data"]) == 1
        assert response.data["data"][0]["skills"] == ["Go", "SQL"]

    def test_create_job_listing(self, fake_content_index):
        """채용 공고 생성 → id 부여, 인덱스에 upsert 1회"""
        # When
        response = self.client.post("/career/jobs", LISTING_DATA, format="json")

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["success"] is True
        listing_id = response.data["data"]["id"]
        assert listing_id
        assert response.data["data"]["title"] == "Engineer"
        assert fake_content_index.calls == [("upsert", "job_listing", listing_id)]
        assert JobListing.objects.filter(pk=listing_id).exists()

    def test_create_with_empty_skill_is_rejected(self, fake_content_index):
        """빈 skill → 400, 생성/동기화 없음"""
        data = {**LISTING_DATA, "skills": ["Go", ""]}

        response = self.client.post("/career/jobs", data, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["success"] is False
        assert response.data["message"] == "Validation failed"
        assert {"field": "skills.1", "message": "Each skill cannot be empty."} in (
            response.data["errors"]
        )
        assert JobListing.objects.count() == 0
        assert fake_content_index.calls == []

    def test_create_missing_fields(self):
        response = self.client.post("/career/jobs", {"title": "X"}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {error["field"] for error in response.data["errors"]}
        assert {"department", "location", "type", "salary", "description"} <= fields

    def test_create_reports_sync_failure_as_partial_success(self, fake_content_index):
        """인덱스 동기화 실패 → 공고는 생성, 응답에 SYNC_FAILED 표시"""
        fake_content_index.fail = True

        response = self.client.post("/career/jobs", LISTING_DATA, format="json")

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["success"] is True
        assert response.data["errors"][0]["code"] == "SYNC_FAILED"
        assert JobListing.objects.filter(pk=response.data["data"]["id"]).exists()

        # 다음 조회에서도 공고는 보여야 함
        listed = APIClient().get("/career/jobs")
        assert len(listed.data["data"]) == 1

    def test_put_is_partial_update(self, fake_content_index):
        """PUT은 전달된 필드만 수정"""
        listing = JobListing.objects.create(**LISTING_DATA)

        response = self.client.put(
            f"/career/jobs/{listing.pk}", {"salary": "120k"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["message"] == "Job listing updated successfully!"
        listing.refresh_from_db()
        assert listing.salary == "120k"
        assert listing.title == "Engineer"
        assert fake_content_index.calls == [("upsert", "job_listing", listing.pk)]

    def test_patch_with_empty_skill_changes_nothing(self, fake_content_index):
        listing = JobListing.objects.create(**LISTING_DATA)

        response = self.client.patch(
            f"/career/jobs/{listing.pk}",
            {"title": "New", "skills": [""]},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        listing.refresh_from_db()
        assert listing.title == "Engineer"
        assert fake_content_index.calls == []

    def test_update_not_found(self):
        response = self.client.put(
            "/career/jobs/abc123", {"title": "New"}, format="json"
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {"success": False, "message": "Job not found"}

    def test_delete_job_listing(self, fake_content_index):
        """채용 공고 삭제"""
        listing = JobListing.objects.create(**LISTING_DATA)

        response = self.client.delete(f"/career/jobs/{listing.pk}")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            "success": True,
            "message": "Job listing deleted successfully!",
            "data": None,
        }
        assert not JobListing.objects.filter(pk=listing.pk).exists()
        assert fake_content_index.calls == [("delete", "job_listing", listing.pk)]

    def test_delete_nonexistent_listing(self, fake_content_index):
        """없는 id 삭제 → 404, 동기화 호출 없음"""
        response = self.client.delete("/career/jobs/abc123")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data["success"] is False
        assert fake_content_index.calls == []


@pytest.mark.django_db
class TestJobListingPermissions:
    def test_anonymous_cannot_create(self):
        response = APIClient().post("/career/jobs", LISTING_DATA, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["success"] is False
        assert JobListing.objects.count() == 0

    def test_regular_user_cannot_delete(self):
        listing = JobListing.objects.create(**LISTING_DATA)
        user = User.objects.create_user(username="user", password="testpass123")
        client = APIClient()
        client.force_authenticate(user=user)

        response = client.delete(f"/career/jobs/{listing.pk}")

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert JobListing.objects.filter(pk=listing.pk).exists()

    def test_career_admin_group_can_create(self):
        user = User.objects.create_user(username="recruiter", password="testpass123")
        user.groups.add(Group.objects.create(name=CAREER_ADMIN_GROUP))
        client = APIClient()
        client.force_authenticate(user=user)

        response = client.post("/career/jobs", LISTING_DATA, format="json")

        assert response.status_code == status.HTTP_201_CREATED

    @override_settings(API_SECRET_KEY="service-key")
    def test_api_key_can_create(self):
        client = APIClient()
        client.credentials(HTTP_X_API_KEY="service-key")

        response = client.post("/career/jobs", LISTING_DATA, format="json")

        assert response.status_code == status.HTTP_201_CREATED

    @override_settings(API_SECRET_KEY="service-key")
    def test_wrong_api_key_is_rejected(self):
        client = APIClient()
        client.credentials(HTTP_X_API_KEY="wrong")

        response = client.post("/career/jobs", LISTING_DATA, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
