from django.core.exceptions import ValidationError


def validate_skills(value):
    """
    기술 스택 목록 검증

    - 리스트여야 하고 비어 있으면 안 됩니다.
    - 각 항목은 빈 문자열이 아닌 문자열이어야 합니다.
    """
    if not isinstance(value, list):
        raise ValidationError("Skills must be an array.", code="invalid")
    if not value:
        raise ValidationError("At least one skill is required.", code="required")
    for skill in value:
        if not isinstance(skill, str) or not skill.strip():
            raise ValidationError("Each skill cannot be empty.", code="blank")
