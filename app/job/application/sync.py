from __future__ import annotations

import enum
import logging

from common.application.errors import ErrorCode
from common.application.result import Err, Ok, Result
from common.ports.content_index import ContentIndexPort
from job.application.index_document import (
    JOB_LISTING_ENTITY_TYPE,
    build_job_listing_index_document,
)
from job.models import JobListing

logger = logging.getLogger(__name__)


class SyncOperation(str, enum.Enum):
    UPSERT = "upsert"
    DELETE = "delete"


class ContentIndexSynchronizer:
    """
    채용 공고 변경을 콘텐츠 인덱스에 전파합니다.

    - 반드시 원본 저장이 커밋된 뒤에만 호출합니다.
    - 실패해도 예외를 던지지 않고 Err(SYNC_FAILED)를 반환합니다.
      원본 저장은 되돌리지 않습니다(인덱스는 일시적으로 어긋날 수 있음).
    """

    def __init__(self, *, content_index: ContentIndexPort):
        self._content_index = content_index

    def sync(self, listing: JobListing, operation: SyncOperation) -> Result[None]:
        doc_id = str(listing.pk)
        try:
            if operation == SyncOperation.UPSERT:
                text, metadata = build_job_listing_index_document(listing)
                self._content_index.upsert_document(
                    entity_type=JOB_LISTING_ENTITY_TYPE,
                    doc_id=doc_id,
                    text=text,
                    metadata=metadata,
                )
            else:
                self._content_index.delete_document(
                    entity_type=JOB_LISTING_ENTITY_TYPE, doc_id=doc_id
                )
        except Exception as e:
            logger.warning(
                f"Content index {operation.value} failed for JobListing {doc_id}: {e}",
                exc_info=True,
            )
            return Err(
                code=ErrorCode.SYNC_FAILED,
                message="Content index synchronization failed",
                details={
                    "listing_id": doc_id,
                    "operation": operation.value,
                    "error": str(e),
                },
            )

        logger.info(f"Content index {operation.value} done for JobListing {doc_id}")
        return Ok(None)
