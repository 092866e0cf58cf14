import uuid

from django.db import models
from job.validators import validate_skills


def generate_listing_id() -> str:
    return uuid.uuid4().hex


class JobListing(models.Model):
    id = models.CharField(
        primary_key=True,
        max_length=32,
        default=generate_listing_id,
        editable=False,
        help_text="저장소가 생성 시 부여하는 식별자 (변경 불가)",
    )
    title = models.CharField(max_length=255)
    department = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    type = models.CharField(max_length=100, help_text="고용 형태 (예: Full-time)")
    salary = models.CharField(max_length=100)
    description = models.TextField()
    skills = models.JSONField(
        default=list,
        validators=[validate_skills],
        help_text="요구 기술 스택 (JSON 배열, 빈 항목 불가)",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # 부분 수정 시 변경 가능한 필드
    UPDATABLE_FIELDS = (
        "title",
        "department",
        "location",
        "type",
        "salary",
        "description",
        "skills",
    )

    class Meta:
        db_table = "career_job_listing"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.title} - {self.department} ({self.location})"
