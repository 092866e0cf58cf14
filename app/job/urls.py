from django.urls import include, path
from job.views import JobListingViewSet
from rest_framework.routers import DefaultRouter

router = DefaultRouter(trailing_slash=False)
router.register(r"jobs", JobListingViewSet, basename="joblisting")

urlpatterns = [
    path("", include(router.urls)),
]
