from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime

from intake.domain.stored_upload import StoredUpload


@dataclass(frozen=True, slots=True)
class JobApplication:
    """
    접수 완료된 입사 지원서.

    저장하지 않으며, 접수 싱크(AcceptanceSinkPort)에 넘기는 것으로 종료됩니다.
    job_* 필드는 자유 입력이며 채용 공고와 대조하지 않습니다.
    """

    full_name: str
    email: str
    phone: str
    job_title: str
    job_department: str
    job_location: str
    resume: StoredUpload
    submitted_at: datetime
    cover_letter: str = ""

    def to_record(self) -> dict:
        record = asdict(self)
        record["resume_path"] = self.resume.path
        record["submitted_at"] = self.submitted_at.isoformat()
        return record
