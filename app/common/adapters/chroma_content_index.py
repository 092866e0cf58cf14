from __future__ import annotations

from common.vector_db import VectorDB

# entity_type -> Chroma 컬렉션 이름
COLLECTION_NAMES = {
    "job_listing": "job_listings",
}


class ChromaContentIndex:
    """
    ChromaDB(Vector DB) 기반 콘텐츠 인덱스 어댑터.

    - 내부적으로는 `common.vector_db.VectorDB` 싱글톤을 사용합니다.
    - 동기화 유스케이스는 ChromaDB를 직접 알지 않고 이 어댑터(=ContentIndexPort 구현)만 의존합니다.
    """

    def __init__(self, vector_db: VectorDB | None = None):
        self._vector_db = vector_db

    @property
    def vector_db(self) -> VectorDB:
        if self._vector_db is None:
            self._vector_db = VectorDB.get_instance()
        return self._vector_db

    def upsert_document(
        self,
        *,
        entity_type: str,
        doc_id: str,
        text: str,
        metadata: dict,
    ) -> None:
        collection = self.vector_db.get_or_create_collection(
            _collection_name(entity_type)
        )
        self.vector_db.upsert_documents(
            collection=collection,
            documents=[text],
            metadatas=[metadata],
            ids=[doc_id],
        )

    def delete_document(self, *, entity_type: str, doc_id: str) -> None:
        collection = self.vector_db.get_or_create_collection(
            _collection_name(entity_type)
        )
        self.vector_db.delete_documents(collection=collection, ids=[doc_id])


def _collection_name(entity_type: str) -> str:
    try:
        return COLLECTION_NAMES[entity_type]
    except KeyError:
        raise ValueError(f"Unknown content index entity type: {entity_type}")
