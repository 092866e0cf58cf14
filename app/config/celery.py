import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("career_service")

# Django settings의 CELERY_* 값을 사용
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
