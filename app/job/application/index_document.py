from __future__ import annotations

from job.models import JobListing

JOB_LISTING_ENTITY_TYPE = "job_listing"


def build_job_listing_index_document(listing: JobListing) -> tuple[str, dict]:
    """
    콘텐츠 인덱스용 텍스트와 메타데이터를 생성합니다.

    같은 스냅샷이면 항상 같은 결과를 돌려주므로 upsert가 멱등입니다.
    Chroma 메타데이터는 스칼라 값만 허용하므로 skills는 문자열로 합칩니다.
    """
    skills = listing.skills or []
    skills_text = ", ".join(skills) if skills else "N/A"

    text = f"""
Title: {listing.title or 'N/A'}
Department: {listing.department or 'N/A'}
Location: {listing.location or 'N/A'}
Type: {listing.type or 'N/A'}
Salary: {listing.salary or 'N/A'}
Skills: {skills_text}
Description:
{listing.description or 'N/A'}
""".strip()

    metadata = {
        "listing_id": str(listing.pk),
        "title": listing.title or "",
        "department": listing.department or "",
        "location": listing.location or "",
        "type": listing.type or "",
        "salary": listing.salary or "",
        "skills": ", ".join(skills),
        "updated_at": listing.updated_at.isoformat() if listing.updated_at else "",
    }
    return text, metadata
