"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all entity repositories.
Provides the storage contract used by the generic CRUD service:
ordered windowed listing, lookup by id, create, attribute merge and delete.

Usage:
    class BuildingRepository(BaseRepository[Building]):
        def __init__(self) -> None:
            super().__init__(Building)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.database import Base
from campus_api.utils.pagination import apply_window

# 제네릭 타입 변수 / SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository bound to one SQLAlchemy model.
    Write methods flush but never commit; the router owns the commit.
    Foreign-key violations surface as ``sqlalchemy.exc.IntegrityError``
    from the flush.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def _ordered_query(self) -> Select:
        """생성 순서로 정렬된 기본 쿼리 — Base query in creation order.

        ``id`` breaks ties between rows sharing a timestamp.
        """
        return select(self.model).order_by(self.model.created_at, self.model.id)

    async def find_many(
        self,
        db: AsyncSession,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Sequence[ModelType]:
        """생성 순서대로 레코드 창을 조회합니다.

        Retrieve a contiguous window of records in creation order.
        An offset past the end yields an empty sequence.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 건너뛸 레코드 수, None이면 0 (Records to skip; None means 0)
            limit: 최대 레코드 수, None이면 무제한 (Record cap; None means unbounded)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (Records in the window)
        """
        query: Select = apply_window(self._ordered_query(), offset, limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its UUID.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 UUID (UUID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record. The identifier and ``created_at`` come from
        Python-side column defaults, so the flush is the only statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        # 식별자는 항상 새로 발급 / The identifier is always freshly generated
        obj_data = {k: v for k, v in obj_data.items() if k != "id"}
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        db_obj: ModelType,
        update_data: dict[str, Any],
    ) -> ModelType:
        """조회된 레코드에 전달된 필드만 병합합니다.

        Merge the supplied attributes onto a record already loaded in this
        session. Attributes absent from ``update_data`` are left untouched;
        ``id`` is never reassigned. Issues a single UPDATE; the instance
        already holds every column value, so it is not re-read.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            db_obj: 업데이트할 레코드, get_by_id로 조회된 인스턴스
                    (Record to update, as returned by get_by_id)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)

        Returns:
            ModelType: 업데이트된 레코드 (The updated record)
        """
        for field, value in update_data.items():
            if field != "id" and hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        return db_obj

    async def delete(self, db: AsyncSession, db_obj: ModelType) -> None:
        """조회된 레코드를 삭제합니다 — Delete a record already loaded in this session."""
        await db.delete(db_obj)
        await db.flush()
