from __future__ import annotations

import job.models
import job.validators
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="JobListing",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=job.models.generate_listing_id,
                        editable=False,
                        help_text="저장소가 생성 시 부여하는 식별자 (변경 불가)",
                        max_length=32,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("department", models.CharField(max_length=255)),
                ("location", models.CharField(max_length=255)),
                (
                    "type",
                    models.CharField(
                        help_text="고용 형태 (예: Full-time)", max_length=100
                    ),
                ),
                ("salary", models.CharField(max_length=100)),
                ("description", models.TextField()),
                (
                    "skills",
                    models.JSONField(
                        default=list,
                        help_text="요구 기술 스택 (JSON 배열, 빈 항목 불가)",
                        validators=[job.validators.validate_skills],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "career_job_listing",
                "ordering": ["-created_at"],
            },
        ),
    ]
