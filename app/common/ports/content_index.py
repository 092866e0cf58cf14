from __future__ import annotations

from typing import Protocol


class ContentIndexPort(Protocol):
    """
    콘텐츠 탐색용 보조 인덱스.

    - upsert_document: 같은 doc_id로 반복 호출해도 결과가 같아야 합니다.
    - delete_document: 없는 문서를 삭제해도 에러가 아닙니다.
    """

    def upsert_document(
        self,
        *,
        entity_type: str,
        doc_id: str,
        text: str,
        metadata: dict,
    ) -> None: ...

    def delete_document(self, *, entity_type: str, doc_id: str) -> None: ...
