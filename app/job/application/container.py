from __future__ import annotations

from common.adapters.chroma_content_index import ChromaContentIndex
from common.adapters.django_job_listing_repo import DjangoJobListingRepository
from job.application.sync import ContentIndexSynchronizer
from job.application.usecases.create_job_listing import CreateJobListingUseCase
from job.application.usecases.delete_job_listing import DeleteJobListingUseCase
from job.application.usecases.list_job_listings import ListJobListingsUseCase
from job.application.usecases.update_job_listing import UpdateJobListingUseCase


def build_content_index_synchronizer() -> ContentIndexSynchronizer:
    return ContentIndexSynchronizer(content_index=ChromaContentIndex())


def build_list_job_listings_usecase() -> ListJobListingsUseCase:
    return ListJobListingsUseCase(listing_repo=DjangoJobListingRepository())


def build_create_job_listing_usecase() -> CreateJobListingUseCase:
    """
    Job 유스케이스 조립(Dependency Injection).
    """
    return CreateJobListingUseCase(
        listing_repo=DjangoJobListingRepository(),
        synchronizer=build_content_index_synchronizer(),
    )


def build_update_job_listing_usecase() -> UpdateJobListingUseCase:
    return UpdateJobListingUseCase(
        listing_repo=DjangoJobListingRepository(),
        synchronizer=build_content_index_synchronizer(),
    )


def build_delete_job_listing_usecase() -> DeleteJobListingUseCase:
    return DeleteJobListingUseCase(
        listing_repo=DjangoJobListingRepository(),
        synchronizer=build_content_index_synchronizer(),
    )
