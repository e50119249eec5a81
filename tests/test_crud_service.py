"""제네릭 CRUD 서비스/레포지토리 단위 테스트.

Generic CRUD service and repository tests, exercised directly against the
database session without HTTP.
"""

import uuid
from datetime import datetime, timezone

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from campus_api.repositories.facility_repository import building_repository, dormitory_repository
from campus_api.schemas.facility import BuildingCreate, BuildingUpdate, DormitoryCreate
from campus_api.services.facility_service import building_service, dormitory_service
from campus_api.utils.exceptions import IntegrityViolationError, NotFoundError
from campus_api.utils import timestamps


class TestBaseRepository:
    """BaseRepository 저장소 계약 테스트."""

    async def test_find_many_window(self, db: AsyncSession):
        for name in ("B1", "B2", "B3"):
            await building_repository.create(db, {"name": name, "address": "Rd"})

        everything = await building_repository.find_many(db)
        assert [b.name for b in everything] == ["B1", "B2", "B3"]

        window = await building_repository.find_many(db, offset=1, limit=1)
        assert [b.name for b in window] == ["B2"]

    async def test_create_ignores_supplied_id(self, db: AsyncSession):
        """create는 항상 새 식별자를 발급."""
        supplied = uuid.uuid4()
        record = await building_repository.create(db, {"id": supplied, "name": "B", "address": "Rd"})
        assert record.id != supplied

    async def test_update_merges_supplied_fields(self, db: AsyncSession):
        record = await building_repository.create(db, {"name": "B", "address": "Rd"})
        updated = await building_repository.update(db, record, {"name": "B2"})
        assert updated.name == "B2"
        assert updated.address == "Rd"

    async def test_update_never_changes_id(self, db: AsyncSession):
        record = await building_repository.create(db, {"name": "B", "address": "Rd"})
        original_id = record.id
        updated = await building_repository.update(db, record, {"id": uuid.uuid4()})
        assert updated.id == original_id

    async def test_delete_removes_record(self, db: AsyncSession):
        record = await building_repository.create(db, {"name": "B", "address": "Rd"})
        await building_repository.delete(db, record)
        assert await building_repository.get_by_id(db, record.id) is None

    async def test_find_many_keeps_creation_order_on_same_clock_tick(self, db: AsyncSession, monkeypatch):
        """시계가 멈춰도 생성 순서 유지 / Creation order survives a frozen clock."""
        frozen = datetime(2026, 1, 1, tzinfo=timezone.utc)

        class _FrozenClock(datetime):
            @classmethod
            def now(cls, tz=None):
                return frozen

        monkeypatch.setattr(timestamps, "datetime", _FrozenClock)
        monkeypatch.setattr(timestamps, "_last_issued", None)

        names = [f"B{i}" for i in range(10)]
        for name in names:
            await building_repository.create(db, {"name": name, "address": "Rd"})

        everything = await building_repository.find_many(db)
        assert [b.name for b in everything] == names
        assert len({b.created_at for b in everything}) == len(names)


class TestWriteStatementCount:
    """쓰기 연산은 조회 1회 + 쓰기 1회 / A write is one lookup plus one write."""

    @pytest.fixture
    def statements(self, engine: AsyncEngine):
        executed: list[str] = []

        def _record(conn, cursor, statement, parameters, context, executemany):
            verb = statement.lstrip().split(" ", 1)[0].upper()
            if verb in ("SELECT", "INSERT", "UPDATE", "DELETE"):
                executed.append(verb)

        event.listen(engine.sync_engine, "before_cursor_execute", _record)
        yield executed
        event.remove(engine.sync_engine, "before_cursor_execute", _record)

    async def test_create_is_single_insert(self, db: AsyncSession, statements: list[str]):
        await building_service.create_record(db, BuildingCreate(name="B", address="Rd"))
        assert statements == ["INSERT"]

    async def test_modify_is_lookup_then_update(self, db: AsyncSession, building, statements: list[str]):
        await building_service.modify_record(db, building.id, BuildingUpdate(name="Renamed"))
        assert statements == ["SELECT", "UPDATE"]

    async def test_replace_is_lookup_then_update(self, db: AsyncSession, building, statements: list[str]):
        await building_service.replace_record(db, building.id, BuildingCreate(name="C", address="Rd 2"))
        assert statements == ["SELECT", "UPDATE"]

    async def test_delete_is_lookup_then_delete(self, db: AsyncSession, building, statements: list[str]):
        await building_service.delete_record(db, building.id)
        assert statements == ["SELECT", "DELETE"]

    async def test_missing_record_is_lookup_only(self, db: AsyncSession, statements: list[str]):
        with pytest.raises(NotFoundError):
            await building_service.delete_record(db, uuid.uuid4())
        assert statements == ["SELECT"]


class TestCrudService:
    """CrudService 동작 테스트."""

    async def test_get_missing_raises_not_found(self, db: AsyncSession):
        with pytest.raises(NotFoundError) as exc_info:
            await building_service.get_record(db, uuid.uuid4())
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Building not found"

    async def test_modify_missing_writes_nothing(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await building_service.modify_record(db, uuid.uuid4(), BuildingUpdate(name="X"))
        assert await building_repository.find_many(db) == []

    async def test_modify_only_touches_set_fields(self, db: AsyncSession):
        created = await building_service.create_record(db, BuildingCreate(name="B", address="Rd"))
        modified = await building_service.modify_record(db, created.id, BuildingUpdate(address="New Rd"))
        assert modified.name == "B"
        assert modified.address == "New Rd"

    async def test_replace_uses_merge(self, db: AsyncSession):
        """replace는 modify와 같은 병합 경로로 저장."""
        created = await building_service.create_record(db, BuildingCreate(name="B", address="Rd"))
        replaced = await building_service.replace_record(db, created.id, BuildingCreate(name="C", address="Rd 2"))
        assert replaced.id == created.id
        assert (replaced.name, replaced.address) == ("C", "Rd 2")

    async def test_create_with_missing_parent(self, db: AsyncSession):
        with pytest.raises(IntegrityViolationError) as exc_info:
            await dormitory_service.create_record(
                db, DormitoryCreate.model_validate({"name": "D", "capacity": 10, "buildingId": str(uuid.uuid4())})
            )
        assert exc_info.value.status_code == 409
        # 롤백 후에도 세션 사용 가능 / Session is usable after the rollback
        assert await dormitory_repository.find_many(db) == []

    async def test_delete_parent_with_child(self, db: AsyncSession):
        building = await building_service.create_record(db, BuildingCreate(name="B", address="Rd"))
        await dormitory_service.create_record(
            db, DormitoryCreate.model_validate({"name": "D", "capacity": 10, "buildingId": str(building.id)})
        )
        await db.commit()

        with pytest.raises(IntegrityViolationError):
            await building_service.delete_record(db, building.id)
        assert await building_repository.get_by_id(db, building.id) is not None

    async def test_delete_missing_raises_not_found(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await dormitory_service.delete_record(db, uuid.uuid4())
