"""
Management command to re-synchronize the content index from the Listing Store.

원본(Listing Store)을 기준으로 콘텐츠 인덱스를 복구합니다.
"""

from django.core.management.base import BaseCommand
from job.models import JobListing
from job.tasks import resync_job_listing


class Command(BaseCommand):
    help = "Re-synchronizes job listings into the content index."

    def add_arguments(self, parser):
        parser.add_argument(
            "--ids",
            nargs="+",
            help="Listing IDs to resync (deleted IDs are removed from the index).",
        )
        parser.add_argument(
            "--sync",
            action="store_true",
            help="Run in-process instead of queueing Celery tasks.",
        )

    def handle(self, *args, **options):
        listing_ids = options["ids"] or list(
            JobListing.objects.values_list("pk", flat=True)
        )
        if not listing_ids:
            self.stdout.write(self.style.WARNING("No job listings to resync."))
            return

        if not options["sync"]:
            for listing_id in listing_ids:
                resync_job_listing.delay(listing_id)
            self.stdout.write(
                self.style.SUCCESS(f"Queued {len(listing_ids)} resync tasks.")
            )
            return

        failed = 0
        for listing_id in listing_ids:
            # 재시도 없이 한 번만 실행
            result = resync_job_listing.apply(args=[listing_id], retries=3).get(
                propagate=False
            )
            if not result or not result.get("success"):
                failed += 1
                self.stdout.write(self.style.ERROR(f"Failed: {listing_id}"))

        self.stdout.write(
            self.style.SUCCESS(
                f"Resynced {len(listing_ids) - failed}/{len(listing_ids)} job listings."
            )
        )
