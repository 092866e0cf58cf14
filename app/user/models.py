from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    """
    채용 공고 관리자 계정.

    is_staff 이거나 'career_admin' 그룹 소속이면 공고를 관리할 수 있습니다.
    """

    class Meta:
        db_table = "career_user"
