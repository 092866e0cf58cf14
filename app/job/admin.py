from django.contrib import admin, messages
from django.db import transaction
from job.models import JobListing
from job.tasks import resync_all_job_listings, resync_job_listing


@admin.action(description="선택 공고 콘텐츠 인덱스 재동기화")
def action_resync_job_listings(modeladmin, request, queryset):
    queued = 0
    for listing_id in queryset.values_list("pk", flat=True).iterator():
        resync_job_listing.delay(listing_id)
        queued += 1

    modeladmin.message_user(
        request,
        f"{queued}개 채용 공고 재동기화 작업을 큐에 등록했습니다.",
        level=messages.SUCCESS,
    )


@admin.action(description="전체 공고 콘텐츠 인덱스 재동기화(주의: 전체 큐 등록)")
def action_resync_all_job_listings(modeladmin, request, queryset):
    # 실수 방지: superuser만 실행 가능
    if not request.user.is_superuser:
        modeladmin.message_user(
            request,
            "권한이 없습니다. (superuser만 전체 재동기화 실행 가능)",
            level=messages.ERROR,
        )
        return

    resync_all_job_listings.delay()
    modeladmin.message_user(
        request,
        "전체 채용 공고 재동기화 작업을 큐에 등록했습니다.",
        level=messages.SUCCESS,
    )


@admin.register(JobListing)
class JobListingAdmin(admin.ModelAdmin):
    """
    Admin에서의 변경은 API 유스케이스를 거치지 않으므로
    커밋 후 재동기화 태스크로 콘텐츠 인덱스를 맞춥니다.
    """

    list_display = ["id", "title", "department", "location", "type", "created_at"]
    search_fields = ["title", "department", "location"]
    list_filter = ["department", "type", "created_at"]
    ordering = ["-created_at"]
    list_per_page = 100
    actions = [action_resync_job_listings, action_resync_all_job_listings]

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        listing_id = obj.pk
        transaction.on_commit(lambda: resync_job_listing.delay(listing_id))

    def delete_model(self, request, obj):
        listing_id = obj.pk
        super().delete_model(request, obj)
        transaction.on_commit(lambda: resync_job_listing.delay(listing_id))

    def delete_queryset(self, request, queryset):
        listing_ids = list(queryset.values_list("pk", flat=True))
        super().delete_queryset(request, queryset)
        for listing_id in listing_ids:
            transaction.on_commit(
                lambda listing_id=listing_id: resync_job_listing.delay(listing_id)
            )
