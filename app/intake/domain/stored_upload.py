from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StoredUpload:
    """
    업로드 접수 디렉터리에 저장된 이력서 파일.

    storage_name은 항상 서버가 생성하며(uuid4), 호출자가 보낸 파일명에서 만들지 않습니다.
    """

    storage_name: str
    extension: str
    path: str
    content_type: str
    size: int
