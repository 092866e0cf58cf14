from __future__ import annotations

from typing import Optional, Protocol

from common.application.result import Result
from job.models import JobListing


class JobListingRepositoryPort(Protocol):
    def get_by_id(self, listing_id: str) -> Optional[JobListing]: ...

    def list_all(self) -> list[JobListing]: ...

    def create(self, fields: dict) -> Result[JobListing]: ...

    def update(self, listing_id: str, fields: dict) -> Result[JobListing]: ...

    def delete(self, listing_id: str) -> Result[JobListing]: ...
