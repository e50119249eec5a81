"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy queries.
List endpoints take ``skip`` (offset) and ``take`` (limit) query parameters;
both are optional non-negative integers and ``take`` has no upper bound.
"""

from typing import Annotated, Any

from fastapi import Query
from sqlalchemy import Select


class PageParams:
    """skip/take 쿼리 파라미터 의존성.

    FastAPI dependency collecting the ``skip``/``take`` query parameters.
    Non-numeric or negative values fail validation (HTTP 400).

    Attributes:
        skip: 건너뛸 레코드 수, None이면 0 (Records to skip; None means 0)
        take: 반환할 최대 레코드 수, None이면 무제한 (Max records; None means unbounded)
    """

    def __init__(
        self,
        skip: Annotated[int | None, Query(ge=0, description="오프셋 (Number of records to skip)")] = None,
        take: Annotated[int | None, Query(ge=0, description="개수 (Number of records to return)")] = None,
    ) -> None:
        self.skip: int | None = skip
        self.take: int | None = take


def apply_window(
    query: Select[Any],
    offset: int | None = None,
    limit: int | None = None,
) -> Select[Any]:
    """쿼리에 OFFSET/LIMIT 창을 적용합니다.

    Apply an OFFSET/LIMIT window to an ordered query.
    ``None`` leaves the corresponding clause off; ``limit=0`` yields no rows.

    Args:
        query: 정렬된 SELECT 쿼리 (Ordered SELECT query)
        offset: 건너뛸 행 수 (Rows to skip)
        limit: 최대 행 수 (Row cap)

    Returns:
        Select[Any]: 창이 적용된 쿼리 (Windowed query)
    """
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query
