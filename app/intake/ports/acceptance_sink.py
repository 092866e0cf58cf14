from __future__ import annotations

from typing import Protocol

from intake.domain.job_application import JobApplication


class AcceptanceSinkPort(Protocol):
    """접수된 지원서를 넘겨받는 외부 협력자(로그, 큐, 알림 등)."""

    def accept(self, application: JobApplication) -> None: ...
