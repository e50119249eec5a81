"""제네릭 CRUD 서비스 — 모든 리소스가 공유하는 목록/조회/생성/수정/삭제 로직.

Generic CRUD Service — List, get, create, modify, replace and delete logic
shared by every resource type. One instance is created per entity, bound
to that entity's repository and response schema.

Write operations are one lookup followed by one write, with no lock
between them. A record deleted by a concurrent request after the lookup
makes the write match no row: an UPDATE then fails the flush, a DELETE
removes nothing. This race is accepted and not mitigated.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.repositories.base import BaseRepository, ModelType
from campus_api.schemas.base import ResponseSchema
from campus_api.utils.exceptions import IntegrityViolationError, NotFoundError

ResponseType = TypeVar("ResponseType", bound=ResponseSchema)


class CrudService(Generic[ModelType, ResponseType]):
    """엔티티 하나에 대한 CRUD 비즈니스 로직을 처리하는 서비스.

    Service implementing the uniform CRUD contract for one entity type.

    Attributes:
        repository: 엔티티 레포지토리 (Repository for the entity table)
        response_schema: 응답 스키마 클래스 (Response schema class)
        entity_name: 오류 메시지용 엔티티 이름 (Display name used in error details)
    """

    def __init__(
        self,
        repository: BaseRepository[ModelType],
        response_schema: type[ResponseType],
        entity_name: str,
    ) -> None:
        self.repository: BaseRepository[ModelType] = repository
        self.response_schema: type[ResponseType] = response_schema
        self.entity_name: str = entity_name

    def _to_response(self, record: ModelType) -> ResponseType:
        """ORM 모델을 응답 스키마로 변환합니다 — Convert a model to its response schema."""
        return self.response_schema.model_validate(record)

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity_name} not found")

    @asynccontextmanager
    async def _integrity_guard(self, db: AsyncSession) -> AsyncIterator[None]:
        """DB 제약 위반을 409 예외로 변환합니다.

        Translate a database integrity failure into IntegrityViolationError.
        The session is rolled back first so it stays usable.
        """
        try:
            yield
        except IntegrityError as exc:
            await db.rollback()
            raise IntegrityViolationError(
                f"{self.entity_name} write violates a foreign-key constraint"
            ) from exc

    async def list_records(
        self,
        db: AsyncSession,
        skip: int | None = None,
        take: int | None = None,
    ) -> list[ResponseType]:
        """레코드 목록을 생성 순서대로 조회합니다.

        List records in creation order, windowed by ``skip``/``take``.
        Always succeeds; an empty list is a valid result.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            skip: 건너뛸 레코드 수 (Records to skip)
            take: 반환할 최대 레코드 수 (Max records to return)

        Returns:
            list[ResponseType]: 레코드 목록 (Records in the window)
        """
        records = await self.repository.find_many(db, offset=skip, limit=take)
        return [self._to_response(r) for r in records]

    async def get_record(self, db: AsyncSession, record_id: UUID) -> ResponseType:
        """ID로 레코드를 조회합니다.

        Raises:
            NotFoundError: 레코드가 없을 때 (Record not found)
        """
        record: ModelType | None = await self.repository.get_by_id(db, record_id)
        if record is None:
            raise self._not_found()
        return self._to_response(record)

    async def create_record(self, db: AsyncSession, data: BaseModel) -> ResponseType:
        """새 레코드를 생성합니다.

        Create a record from a body already validated against the
        required-field schema. This is the only operation that allocates
        an identifier.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 검증된 생성 데이터 (Validated creation data)

        Returns:
            ResponseType: 생성된 레코드 응답 (Created record with its id)

        Raises:
            IntegrityViolationError: 부모 레코드가 없을 때 (Referenced parent missing)
        """
        async with self._integrity_guard(db):
            record: ModelType = await self.repository.create(db, data.model_dump())
        return self._to_response(record)

    async def modify_record(
        self,
        db: AsyncSession,
        record_id: UUID,
        data: BaseModel,
    ) -> ResponseType:
        """레코드를 부분 수정합니다 (PATCH).

        Merge the supplied fields onto an existing record; fields missing
        from ``data`` keep their stored values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 레코드 UUID (Record UUID)
            data: 검증된 수정 데이터, 일부 필드만 포함 가능 (Validated partial data)

        Returns:
            ResponseType: 병합된 레코드 응답 (Merged record)

        Raises:
            NotFoundError: 레코드가 없을 때, 쓰기 시도 없음 (Record not found, nothing written)
            IntegrityViolationError: 새 부모 레코드가 없을 때 (New parent missing)
        """
        existing: ModelType | None = await self.repository.get_by_id(db, record_id)
        if existing is None:
            raise self._not_found()

        update_data: dict = data.model_dump(exclude_unset=True)
        async with self._integrity_guard(db):
            record: ModelType = await self.repository.update(db, existing, update_data)
        return self._to_response(record)

    async def replace_record(
        self,
        db: AsyncSession,
        record_id: UUID,
        data: BaseModel,
    ) -> ResponseType:
        """레코드를 교체합니다 (PUT).

        The body has already passed the required-field schema, yet the write
        is the same attribute merge as ``modify_record``. Unsupplied attributes are
        not cleared. Kept this way for compatibility with existing clients.
        """
        return await self.modify_record(db, record_id, data)

    async def delete_record(self, db: AsyncSession, record_id: UUID) -> None:
        """레코드를 삭제합니다.

        Delete a record. Children referencing it are not touched; if any
        exist the database rejects the delete.

        Raises:
            NotFoundError: 레코드가 없을 때 (Record not found, incl. already deleted)
            IntegrityViolationError: 하위 레코드가 참조 중일 때 (Still referenced by children)
        """
        existing: ModelType | None = await self.repository.get_by_id(db, record_id)
        if existing is None:
            raise self._not_found()

        async with self._integrity_guard(db):
            await self.repository.delete(db, existing)
