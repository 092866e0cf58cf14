import hmac

from django.conf import settings
from rest_framework.permissions import BasePermission

CAREER_ADMIN_GROUP = "career_admin"


class HasSimpleSecretKey(BasePermission):
    """
    'X-API-KEY' 헤더에 유효한 API 키가 있는지 확인합니다.

    보안을 위해 Django SECRET_KEY와 별도의 API_SECRET_KEY를 사용합니다.
    키가 설정되지 않은 환경에서는 항상 거부합니다.
    """

    def has_permission(self, request, view):
        expected_key = getattr(settings, "API_SECRET_KEY", None)
        provided_key = request.headers.get("X-API-KEY")
        if not expected_key or not provided_key:
            return False

        return hmac.compare_digest(str(provided_key), str(expected_key))


class IsCareerAdmin(BasePermission):
    """
    채용 공고 관리 권한.

    인증된 staff 사용자이거나 'career_admin' 그룹 소속이면 허용합니다.
    """

    message = "Admin privileges are required to manage job listings."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        if user.is_staff:
            return True
        return user.groups.filter(name=CAREER_ADMIN_GROUP).exists()
