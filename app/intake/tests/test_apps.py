"""
Tests for IntakeConfig

앱 로딩 시 준비하는 업로드 접수 디렉터리 테스트
"""

from pathlib import Path

from django.apps import apps


class TestIntakeConfig:
    def test_ready_creates_configured_directory(self, settings, tmp_path):
        # Given
        target = tmp_path / "nested" / "resumes"
        settings.RESUME_UPLOAD_DIR = str(target)

        # When
        apps.get_app_config("intake").ready()

        # Then
        assert target.is_dir()

    def test_default_directory_is_outside_source_tree(self, settings):
        """기본 접수 디렉터리는 소스 트리(BASE_DIR) 안에 만들어지지 않음"""
        base_dir = Path(settings.BASE_DIR).resolve()
        directory = Path(settings.RESUME_UPLOAD_DIR).resolve()

        assert base_dir != directory
        assert base_dir not in directory.parents
