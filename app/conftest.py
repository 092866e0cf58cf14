# app/conftest.py
"""
pytest fixtures

- Celery eager 모드
- 업로드 접수 디렉터리(tmp_path)
- 콘텐츠 인덱스(ChromaDB) 대체용 인메모리 구현
"""

import pytest


class FakeContentIndex:
    """
    ContentIndexPort 인메모리 구현.

    calls 에 호출 순서대로 (operation, entity_type, doc_id) 를 기록합니다.
    fail=True 이면 모든 호출이 ConnectionError를 던집니다.
    """

    def __init__(self):
        self.documents = {}
        self.calls = []
        self.fail = False

    def upsert_document(self, *, entity_type, doc_id, text, metadata):
        self.calls.append(("upsert", entity_type, doc_id))
        if self.fail:
            raise ConnectionError("content index unavailable")
        self.documents[(entity_type, doc_id)] = {"text": text, "metadata": metadata}

    def delete_document(self, *, entity_type, doc_id):
        self.calls.append(("delete", entity_type, doc_id))
        if self.fail:
            raise ConnectionError("content index unavailable")
        self.documents.pop((entity_type, doc_id), None)


@pytest.fixture(autouse=True)
def fake_content_index(monkeypatch):
    """
    모든 테스트에서 실제 ChromaDB 대신 인메모리 인덱스를 사용합니다.
    """
    index = FakeContentIndex()
    monkeypatch.setattr(
        "job.application.container.ChromaContentIndex", lambda: index
    )
    return index


@pytest.fixture
def upload_dir(tmp_path, settings):
    """업로드 접수 디렉터리를 테스트 전용 임시 경로로 바꿉니다."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    settings.RESUME_UPLOAD_DIR = str(directory)
    return directory


@pytest.fixture(scope="session")
def celery_config():
    """
    Celery 테스트용 설정을 제공합니다.
    """
    return {
        "broker_url": "memory://",
        "result_backend": "cache+memory://",
        "task_always_eager": False,
        "task_eager_propagates": True,
        "accept_content": ["json"],
        "task_serializer": "json",
        "result_serializer": "json",
    }


@pytest.fixture(scope="session")
def celery_app(celery_config):
    """
    테스트용 Celery 앱 인스턴스를 제공합니다.
    """
    from config.celery import app

    app.config_from_object(celery_config)
    return app


@pytest.fixture
def celery_eager_mode(celery_app):
    """
    Eager 모드로 Celery를 설정합니다 (동기 실행).
    """
    original_eager = celery_app.conf.task_always_eager
    celery_app.conf.task_always_eager = True
    yield celery_app
    celery_app.conf.task_always_eager = original_eager
