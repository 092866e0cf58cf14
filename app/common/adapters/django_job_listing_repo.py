from __future__ import annotations

import logging
from typing import Optional

from common.application.errors import ErrorCode
from common.application.result import Err, Ok, Result
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from job.models import JobListing

logger = logging.getLogger(__name__)


class DjangoJobListingRepository:
    """
    Django ORM 기반 채용 공고 저장소 (Listing Store).

    - 모든 쓰기는 `transaction.atomic(durable=True)` 안에서 수행되므로
      메서드가 반환되면 커밋이 끝난 상태입니다.
    - 검증(full_clean)은 쓰기 전에 수행되며, 실패하면 아무것도 저장하지 않습니다.
    """

    def get_by_id(self, listing_id: str) -> Optional[JobListing]:
        try:
            return JobListing.objects.get(pk=listing_id)
        except JobListing.DoesNotExist:
            return None

    def list_all(self) -> list[JobListing]:
        return list(JobListing.objects.all().order_by("-created_at"))

    def create(self, fields: dict) -> Result[JobListing]:
        listing = JobListing(**_writable(fields))
        invalid = _validate(listing)
        if invalid:
            return invalid

        try:
            with transaction.atomic(durable=True):
                listing.save(force_insert=True)
        except DatabaseError as e:
            logger.error(f"Failed to create JobListing: {e}", exc_info=True)
            return _persistence_failed("create", e)

        logger.info(f"Created JobListing {listing.pk}")
        return Ok(listing)

    def update(self, listing_id: str, fields: dict) -> Result[JobListing]:
        changes = _writable(fields)
        try:
            with transaction.atomic(durable=True):
                listing = (
                    JobListing.objects.select_for_update()
                    .filter(pk=listing_id)
                    .first()
                )
                if listing is None:
                    return _not_found(listing_id)

                for key, value in changes.items():
                    setattr(listing, key, value)
                # 병합된 레코드 전체를 검증: 하나라도 틀리면 아무 필드도 바뀌지 않음
                invalid = _validate(listing)
                if invalid:
                    return invalid

                if changes:
                    listing.save(update_fields=[*changes, "updated_at"])
        except DatabaseError as e:
            logger.error(
                f"Failed to update JobListing {listing_id}: {e}", exc_info=True
            )
            return _persistence_failed("update", e)

        logger.info(f"Updated JobListing {listing_id} fields={sorted(changes)}")
        return Ok(listing)

    def delete(self, listing_id: str) -> Result[JobListing]:
        try:
            with transaction.atomic(durable=True):
                listing = JobListing.objects.filter(pk=listing_id).first()
                if listing is None:
                    return _not_found(listing_id)
                listing.delete()
        except DatabaseError as e:
            logger.error(
                f"Failed to delete JobListing {listing_id}: {e}", exc_info=True
            )
            return _persistence_failed("delete", e)

        # Model.delete()가 pk를 None으로 비우므로 스냅샷에 식별자를 되돌려 둡니다.
        listing.pk = listing_id
        logger.info(f"Deleted JobListing {listing_id}")
        return Ok(listing)


def _writable(fields: dict) -> dict:
    return {k: v for k, v in fields.items() if k in JobListing.UPDATABLE_FIELDS}


def _validate(listing: JobListing) -> Optional[Err]:
    try:
        listing.full_clean(validate_unique=False)
    except ValidationError as e:
        return Err(
            code=ErrorCode.VALIDATION_FAILED,
            message="Validation failed",
            details={"errors": e.message_dict},
        )
    return None


def _not_found(listing_id: str) -> Err:
    return Err(
        code=ErrorCode.NOT_FOUND,
        message="Job not found",
        details={"listing_id": listing_id},
    )


def _persistence_failed(operation: str, error: Exception) -> Err:
    return Err(
        code=ErrorCode.PERSISTENCE_FAILED,
        message=f"Failed to {operation} job listing",
        details={"error": str(error)},
    )
