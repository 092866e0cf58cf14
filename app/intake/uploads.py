"""
Resume Upload Intake

이력서 파일 1개를 검증/저장하고, 지원 처리가 실패하면 반드시 삭제되도록 보장합니다.
"""

from __future__ import annotations

import logging
import os
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

from common.application.errors import ErrorCode
from common.application.result import Err, Ok, Result
from django.core.files.uploadedfile import UploadedFile
from django.core.files.uploadhandler import FileUploadHandler, SkipFile
from intake.domain.stored_upload import StoredUpload

logger = logging.getLogger(__name__)

PDF = "application/pdf"
DOC = "application/msword"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

DEFAULT_ALLOWED_CONTENT_TYPES = {
    PDF: ".pdf",
    DOC: ".doc",
    DOCX: ".docx",
}
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MiB

STORAGE_PREFIX = "resume"


class UploadHandle:
    """
    hold() 블록 안에서 사용하는 업로드 핸들.

    bind()를 호출하지 않은 채 블록을 벗어나면 파일은 삭제됩니다.
    """

    def __init__(self, upload: StoredUpload):
        self.upload = upload
        self.bound = False

    def bind(self) -> StoredUpload:
        self.bound = True
        return self.upload


class ResumeUploadIntake:
    """
    이력서 업로드 접수기.

    - 허용 타입: PDF, DOC, DOCX (선언된 content type 기준)
    - 최대 크기: 5MiB (선언 크기 + 실제 스트림 바이트 모두 검사)
    - 저장 이름: resume-<uuid4 hex><확장자> (호출자 파일명 미사용)
    """

    def __init__(
        self,
        *,
        directory: str | os.PathLike,
        max_bytes: int = DEFAULT_MAX_BYTES,
        allowed_content_types: dict[str, str] | None = None,
    ):
        self.directory = Path(directory)
        self.max_bytes = max_bytes
        self.allowed_content_types = dict(
            allowed_content_types or DEFAULT_ALLOWED_CONTENT_TYPES
        )

    def ensure_directory(self) -> Path:
        """접수 디렉터리를 생성합니다 (이미 있으면 그대로 둠)."""
        if not self.directory.is_dir():
            self.directory.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created upload intake directory {self.directory}")
        return self.directory

    def receive(self, upload: UploadedFile) -> Result[StoredUpload]:
        content_type = (upload.content_type or "").split(";")[0].strip().lower()
        if content_type not in self.allowed_content_types:
            return Err(
                code=ErrorCode.INVALID_FILE_TYPE,
                message="Invalid file type. Only PDF, DOC, and DOCX are allowed.",
                details={"content_type": content_type},
            )

        if upload.size is not None and upload.size > self.max_bytes:
            return _too_large(self.max_bytes)

        extension = self._extension_for(upload.name, content_type)
        storage_name = f"{STORAGE_PREFIX}-{uuid.uuid4().hex}{extension}"
        path = self.directory / storage_name

        try:
            written = self._write(path, upload.chunks())
        except OSError as e:
            logger.error(f"Failed to store upload {storage_name}: {e}", exc_info=True)
            return Err(
                code=ErrorCode.PERSISTENCE_FAILED,
                message="Failed to store uploaded file",
                details={"error": str(e)},
            )

        if written is None:
            return _too_large(self.max_bytes)

        logger.info(f"Stored upload {storage_name} ({written} bytes)")
        return Ok(
            StoredUpload(
                storage_name=storage_name,
                extension=extension,
                path=str(path.resolve()),
                content_type=content_type,
                size=written,
            )
        )

    def discard(self, upload: StoredUpload) -> None:
        """업로드 파일을 삭제합니다. 실패는 로그만 남기고 전파하지 않습니다."""
        try:
            os.remove(upload.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to delete upload {upload.storage_name}: {e}")
        else:
            logger.info(f"Deleted upload {upload.storage_name}")

    def size_limit_handler(self, request, field_name: str) -> "SizeLimitUploadHandler":
        """
        multipart 파싱 단계에서 상한을 적용하는 업로드 핸들러를 만듭니다.

        request.upload_handlers 맨 앞에 넣어야 다른 핸들러가 버퍼링하기 전에 중단됩니다.
        """
        return SizeLimitUploadHandler(
            request, max_bytes=self.max_bytes, limited_field=field_name
        )

    def too_large(self) -> Err:
        return _too_large(self.max_bytes)

    @contextmanager
    def hold(self, upload: StoredUpload) -> Iterator[UploadHandle]:
        handle = UploadHandle(upload)
        try:
            yield handle
        finally:
            if not handle.bound:
                self.discard(upload)

    def _write(self, path: Path, chunks: Iterable[bytes]) -> int | None:
        """
        청크 단위로 저장합니다. 상한을 넘는 순간 중단하고 부분 파일을 지운 뒤 None을 반환합니다.
        """
        written = 0
        # 이름 충돌(FileExistsError)이면 여기서 실패하며, 남의 파일은 건드리지 않음
        fh = open(path, "xb")
        try:
            with fh:
                for chunk in chunks:
                    written += len(chunk)
                    if written > self.max_bytes:
                        break
                    fh.write(chunk)
        except BaseException:
            _remove_quietly(path)
            raise
        if written > self.max_bytes:
            _remove_quietly(path)
            return None
        return written

    def _extension_for(self, original_name: str | None, content_type: str) -> str:
        known = set(self.allowed_content_types.values())
        extension = os.path.splitext(original_name or "")[1].lower()
        if extension in known:
            return extension
        return self.allowed_content_types[content_type]


class SizeLimitUploadHandler(FileUploadHandler):
    """
    지정한 파일 필드가 max_bytes를 넘는 순간 SkipFile로 해당 파일을 건너뜁니다.

    뒤따르는 핸들러(메모리/임시 파일)에는 상한까지의 바이트만 전달되고,
    건너뛴 파일은 request.FILES에 나타나지 않습니다. exceeded로 구분합니다.
    """

    def __init__(self, request=None, *, max_bytes: int, limited_field: str):
        super().__init__(request)
        self.max_bytes = max_bytes
        self.limited_field = limited_field
        self.exceeded = False

    def receive_data_chunk(self, raw_data, start):
        if self.field_name == self.limited_field and (
            start + len(raw_data) > self.max_bytes
        ):
            self.exceeded = True
            logger.info(
                f"Skipped upload field {self.limited_field}: "
                f"exceeds {self.max_bytes} bytes"
            )
            raise SkipFile()
        return raw_data

    def file_complete(self, file_size):
        # 파일 객체는 다음 핸들러가 만듭니다.
        return None


def _too_large(max_bytes: int) -> Err:
    return Err(
        code=ErrorCode.FILE_TOO_LARGE,
        message=f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.",
        details={"max_bytes": max_bytes},
    )


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Failed to remove partial upload {path.name}: {e}")
