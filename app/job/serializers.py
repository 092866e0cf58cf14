from job.models import JobListing
from rest_framework import serializers


class JobListingSerializer(serializers.ModelSerializer):
    """
    채용 공고 입력/출력 serializer

    - 생성: 모든 필드 필수, skills는 빈 항목 없는 배열
    - 수정(partial=True): 전달된 필드만 검증
    """

    skills = serializers.ListField(
        child=serializers.CharField(
            allow_blank=False,
            error_messages={"blank": "Each skill cannot be empty."},
        ),
        allow_empty=False,
        error_messages={
            "not_a_list": "Skills must be an array.",
            "empty": "At least one skill is required.",
        },
    )

    class Meta:
        model = JobListing
        fields = [
            "id",
            "title",
            "department",
            "location",
            "type",
            "salary",
            "description",
            "skills",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]
        extra_kwargs = {
            "title": {"error_messages": {"blank": "Job title is required."}},
            "department": {"error_messages": {"blank": "Department is required."}},
            "location": {"error_messages": {"blank": "Location is required."}},
            "type": {"error_messages": {"blank": "Job type is required."}},
            "salary": {"error_messages": {"blank": "Salary is required."}},
            "description": {"error_messages": {"blank": "Description is required."}},
        }
