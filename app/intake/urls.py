from django.urls import path
from intake.views import JobApplicationView

urlpatterns = [
    path("apply", JobApplicationView.as_view(), name="job_application"),
]
