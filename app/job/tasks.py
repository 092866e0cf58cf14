"""
Celery 태스크: 콘텐츠 인덱스 재동기화

요청 경로에서 동기화가 실패(SYNC_FAILED)한 경우 원본(Listing Store)을 기준으로
인덱스를 복구하는 용도입니다. 요청 처리 중에는 호출되지 않습니다.
"""

import logging

from celery import shared_task
from common.adapters.django_job_listing_repo import DjangoJobListingRepository
from common.application.result import Err
from job.application.container import build_content_index_synchronizer
from job.application.sync import SyncOperation
from job.dtos import ResyncJobListingResultDTO
from job.models import JobListing

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=3, default_retry_delay=30)
def resync_job_listing(self, listing_id: str):
    """
    채용 공고 하나를 콘텐츠 인덱스와 맞춥니다.

    1. listing_id로 JobListing 조회
    2. 존재하면 upsert, 없으면 인덱스에서 delete
    3. 동기화 실패 시 최대 3회 재시도

    Args:
        listing_id: JobListing의 ID

    Returns:
        dict: 처리 결과 (ResyncJobListingResultDTO)
    """
    listing = DjangoJobListingRepository().get_by_id(listing_id)
    if listing is None:
        # 삭제된 공고: 식별자만 있는 스냅샷으로 인덱스에서 제거
        listing = JobListing(pk=listing_id)
        operation = SyncOperation.DELETE
    else:
        operation = SyncOperation.UPSERT

    result = build_content_index_synchronizer().sync(listing, operation)
    if isinstance(result, Err):
        if self.request.retries < self.max_retries:
            raise self.retry(exc=RuntimeError(result.message))
        logger.error(
            f"Giving up content index resync for JobListing {listing_id}: "
            f"{result.details}"
        )
        return ResyncJobListingResultDTO(
            success=False,
            listing_id=listing_id,
            operation=operation.value,
            error=result.message,
        ).model_dump()

    return ResyncJobListingResultDTO(
        success=True, listing_id=listing_id, operation=operation.value
    ).model_dump()


@shared_task
def resync_all_job_listings():
    """저장된 모든 채용 공고에 대해 재동기화 태스크를 큐에 등록합니다."""
    queued = 0
    for listing_id in JobListing.objects.values_list("pk", flat=True).iterator():
        resync_job_listing.delay(listing_id)
        queued += 1
    logger.info(f"Queued content index resync for {queued} job listings")
    return {"queued": queued}
