from __future__ import annotations

import logging

from common.application.errors import ErrorCode
from common.application.result import Err, Ok, Result
from common.ports.job_listing_repo import JobListingRepositoryPort
from django.db import DatabaseError
from job.models import JobListing

logger = logging.getLogger(__name__)


class ListJobListingsUseCase:
    def __init__(self, *, listing_repo: JobListingRepositoryPort):
        self._listing_repo = listing_repo

    def execute(self) -> Result[list[JobListing]]:
        try:
            return Ok(self._listing_repo.list_all())
        except DatabaseError as e:
            logger.error(f"Failed to fetch job listings: {e}", exc_info=True)
            return Err(
                code=ErrorCode.PERSISTENCE_FAILED,
                message="Failed to fetch job listings",
                details={"error": str(e)},
            )
