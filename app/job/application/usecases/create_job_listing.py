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


class CreateJobListingUseCase:
    """
    채용 공고 생성 유스케이스.

    1) Listing Store에 저장 (커밋 완료까지)
    2) 콘텐츠 인덱스 upsert
    """

    def __init__(
        self,
        *,
        listing_repo: JobListingRepositoryPort,
        synchronizer: ContentIndexSynchronizer,
    ):
        self._listing_repo = listing_repo
        self._synchronizer = synchronizer

    def execute(self, *, fields: dict) -> MutationResult[JobListing]:
        stored = self._listing_repo.create(fields)
        if isinstance(stored, Err):
            return stored

        listing = stored.value
        synced = self._synchronizer.sync(listing, SyncOperation.UPSERT)
        if isinstance(synced, Err):
            logger.error(
                f"JobListing {listing.pk} created but content index is behind"
            )
            return PersistedSyncFailed(value=listing, sync_error=synced)
        return Persisted(value=listing)
