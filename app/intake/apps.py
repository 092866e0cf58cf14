from django.apps import AppConfig


class IntakeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "intake"

    def ready(self):
        # 요청을 받기 전에 한 번만 업로드 접수 디렉터리를 준비합니다.
        from intake.application.container import build_resume_upload_intake

        build_resume_upload_intake().ensure_directory()
