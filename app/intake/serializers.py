from rest_framework import serializers


class JobApplicationSerializer(serializers.Serializer):
    """입사 지원서 필드 검증 (파일 제외)"""

    full_name = serializers.CharField(
        max_length=200, error_messages={"blank": "Full name is required."}
    )
    email = serializers.EmailField(
        error_messages={
            "blank": "Valid email is required.",
            "invalid": "Valid email is required.",
        }
    )
    phone = serializers.CharField(
        max_length=50, error_messages={"blank": "Phone number is required."}
    )
    job_title = serializers.CharField(
        max_length=255, error_messages={"blank": "Job title is required."}
    )
    job_department = serializers.CharField(
        max_length=255, error_messages={"blank": "Job department is required."}
    )
    job_location = serializers.CharField(
        max_length=255, error_messages={"blank": "Job location is required."}
    )
    cover_letter = serializers.CharField(
        required=False, allow_blank=True, default=""
    )


class JobApplicationRequestSerializer(JobApplicationSerializer):
    """API 문서용: multipart 요청 전체 (resume 파일 포함)"""

    resume = serializers.FileField(
        required=False, help_text="PDF, DOC, DOCX (최대 5MB)"
    )
