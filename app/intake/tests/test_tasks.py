from intake.tasks import deliver_job_application


def test_deliver_job_application_logs_record(caplog):
    record = {
        "email": "ada@example.com",
        "job_title": "Engineer",
        "resume_path": "/uploads/resume-abc.pdf",
    }

    with caplog.at_level("INFO", logger="intake.applications"):
        result = deliver_job_application(record)

    assert result == {"success": True, "resume_path": "/uploads/resume-abc.pdf"}
    assert "ada@example.com" in caplog.text
