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


class DeleteJobListingUseCase:
    """채용 공고 삭제 후 콘텐츠 인덱스에서도 제거합니다."""

    def __init__(
        self,
        *,
        listing_repo: JobListingRepositoryPort,
        synchronizer: ContentIndexSynchronizer,
    ):
        self._listing_repo = listing_repo
        self._synchronizer = synchronizer

    def execute(self, *, listing_id: str) -> MutationResult[JobListing]:
        deleted = self._listing_repo.delete(listing_id)
        if isinstance(deleted, Err):
            return deleted

        listing = deleted.value
        synced = self._synchronizer.sync(listing, SyncOperation.DELETE)
        if isinstance(synced, Err):
            logger.error(
                f"JobListing {listing_id} deleted but still present in content index"
            )
            return PersistedSyncFailed(value=listing, sync_error=synced)
        return Persisted(value=listing)
