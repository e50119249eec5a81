"""캠퍼스 시설 레포지토리 — 건물, 기숙사.

Campus facility repositories.
"""

from campus_api.models.facility import Building, Dormitory
from campus_api.repositories.base import BaseRepository


class BuildingRepository(BaseRepository[Building]):
    """buildings 테이블 레포지토리 — Repository for the buildings table."""

    def __init__(self) -> None:
        super().__init__(Building)


class DormitoryRepository(BaseRepository[Dormitory]):
    """dormitories 테이블 레포지토리 — Repository for the dormitories table."""

    def __init__(self) -> None:
        super().__init__(Dormitory)


# 싱글턴 인스턴스 / Singleton instances
building_repository: BuildingRepository = BuildingRepository()
dormitory_repository: DormitoryRepository = DormitoryRepository()
