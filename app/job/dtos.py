from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ResyncJobListingResultDTO(BaseModel):
    success: bool = Field(description="성공 여부")
    listing_id: str = Field(description="채용 공고 ID")
    operation: Optional[str] = Field(
        default=None, description="수행한 동기화 종류 (upsert/delete)"
    )
    error: Optional[str] = Field(default=None, description="에러 메시지")
