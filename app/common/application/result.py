from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스 실패 결과.

    - code: 프로그램적으로 구분 가능한 에러 코드 (common.application.errors.ErrorCode)
    - message: 사용자/로그용 메시지
    - details: 디버깅에 유용한 추가 정보(선택)
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """유스케이스 성공 결과."""

    value: T


Result = Ok[T] | Err


@dataclass(frozen=True, slots=True)
class Persisted(Generic[T]):
    """원본 저장과 콘텐츠 인덱스 동기화가 모두 성공한 결과."""

    value: T


@dataclass(frozen=True, slots=True)
class PersistedSyncFailed(Generic[T]):
    """
    원본 저장은 커밋되었으나 콘텐츠 인덱스 동기화가 실패한 결과.

    원본(Listing Store)이 기준이므로 롤백하지 않습니다.
    """

    value: T
    sync_error: Err


# 저장 자체가 실패한 경우(PersistFailed)는 Err(code=PERSISTENCE_FAILED)로 표현합니다.
MutationResult = Persisted[T] | PersistedSyncFailed[T] | Err
