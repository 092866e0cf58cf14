from django.conf import settings
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from user.serializers import UserLoginSerializer


class UserLoginView(APIView):
    authentication_classes = []
    permission_classes = []  # No permission required for login

    @extend_schema(
        request=UserLoginSerializer,
        responses={
            200: OpenApiTypes.OBJECT,
        },
        summary="User Login",
        description="Login with username and password to get JWT tokens.",
    )
    def post(self, request):
        serializer = UserLoginSerializer(
            data=request.data, context={"request": request}
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        refresh = RefreshToken.for_user(user)
        access = str(refresh.access_token)

        response = Response(
            {
                "refresh": str(refresh),
                "access": access,
            },
            status=status.HTTP_200_OK,
        )
        # 브라우저 관리 화면은 HttpOnly 쿠키로도 인증할 수 있도록 설정
        response.set_cookie(
            getattr(settings, "JWT_AUTH_COOKIE", "access_token"),
            access,
            httponly=True,
            secure=not settings.DEBUG,
            samesite="Lax",
        )
        return response
