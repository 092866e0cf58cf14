from __future__ import annotations

import logging

from common.application.result import (
    Err,
    MutationResult,
    Persisted,
    PersistedSyncFailed,
)
from common.ports.job_listing_repo import JobListingRepositoryPort
from job.application.sync import ContentIndexSynchronizer, SyncOperation
from job.models import JobListing

logger = logging.getLogger(__name__)


class UpdateJobListingUseCase:
    """
    채용 공고 부분 수정 유스케이스.

    전달된 필드만 변경하며, 저장이 커밋된 뒤 수정된 스냅샷을 인덱스에 upsert합니다.
    NOT_FOUND/VALIDATION_FAILED/PERSISTENCE_FAILED인 경우 동기화하지 않습니다.
    """

    def __init__(
        self,
        *,
        listing_repo: JobListingRepositoryPort,
        synchronizer: ContentIndexSynchronizer,
    ):
        self._listing_repo = listing_repo
        self._synchronizer = synchronizer

    def execute(self, *, listing_id: str, fields: dict) -> MutationResult[JobListing]:
        stored = self._listing_repo.update(listing_id, fields)
        if isinstance(stored, Err):
            return stored

        listing = stored.value
        synced = self._synchronizer.sync(listing, SyncOperation.UPSERT)
        if isinstance(synced, Err):
            logger.error(
                f"JobListing {listing_id} updated but content index is behind"
            )
            return PersistedSyncFailed(value=listing, sync_error=synced)
        return Persisted(value=listing)
