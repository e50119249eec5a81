"""테스트 인프라 — 임시 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary database, session, and httpx client fixtures.
Defaults to a throw-away SQLite file (aiosqlite, foreign keys on); set
TEST_DATABASE_URL to run against PostgreSQL instead.
Schema is applied once per session, data is deleted after each test.
"""

import os
import tempfile
from collections.abc import AsyncGenerator
from pathlib import Path

# 앱 임포트 전에 DB URL 지정 / Point the app at the test database before importing it
_TMP_DIR = tempfile.mkdtemp(prefix="campus_api_test_")
TEST_DATABASE_URL = os.environ.get(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(_TMP_DIR) / 'test_campus.db'}",
)
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from campus_api.database import Base, build_engine, get_db  # noqa: E402
from campus_api.main import app  # noqa: E402
from campus_api.models import *  # noqa: F401,F403,E402 / register all models with metadata

_schema_created = False


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 첫 호출 시 스키마를 생성합니다."""
    global _schema_created
    eng = build_engine(TEST_DATABASE_URL)

    if not _schema_created:
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        _schema_created = True

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()

    # 테스트 후 모든 데이터 정리 / 자식 테이블부터 삭제 (children first)
    async with factory() as cleanup:
        for table in reversed(Base.metadata.sorted_tables):
            await cleanup.execute(delete(table))
        await cleanup.commit()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성 (커밋까지 수행)
# ---------------------------------------------------------------------------
async def _persist(db: AsyncSession, obj):
    db.add(obj)
    await db.commit()
    await db.refresh(obj)
    db.expunge(obj)
    return obj


@pytest_asyncio.fixture
async def institute(db: AsyncSession):
    """테스트 교육기관을 생성합니다."""
    from campus_api.models.institution import Institute
    return await _persist(db, Institute(name="Tech", address="1 Main St"))


@pytest_asyncio.fixture
async def department(db: AsyncSession, institute):
    """테스트 학과를 생성합니다."""
    from campus_api.models.institution import Department
    return await _persist(db, Department(name="CS", institute_id=institute.id))


@pytest_asyncio.fixture
async def study_direction(db: AsyncSession, department):
    """테스트 전공 과정을 생성합니다."""
    from campus_api.models.institution import StudyDirection
    return await _persist(db, StudyDirection(name="Software Engineering", department_id=department.id))


@pytest_asyncio.fixture
async def applicant(db: AsyncSession, study_direction, institute):
    """테스트 지원자를 생성합니다."""
    from campus_api.models.institution import Applicant
    return await _persist(db, Applicant(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone="+1-555-0100",
        study_direction_id=study_direction.id,
        institute_id=institute.id,
    ))


@pytest_asyncio.fixture
async def building(db: AsyncSession):
    """테스트 건물을 생성합니다."""
    from campus_api.models.facility import Building
    return await _persist(db, Building(name="North Hall", address="2 Campus Rd"))


@pytest_asyncio.fixture
async def dormitory(db: AsyncSession, building):
    """테스트 기숙사를 생성합니다."""
    from campus_api.models.facility import Dormitory
    return await _persist(db, Dormitory(name="Dorm A", capacity=120, building_id=building.id))
