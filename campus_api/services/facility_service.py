"""캠퍼스 시설 서비스 — 건물, 기숙사 CRUD.

Campus facility services, one CrudService per entity.
"""

from campus_api.models.facility import Building, Dormitory
from campus_api.repositories.facility_repository import building_repository, dormitory_repository
from campus_api.schemas.facility import BuildingResponse, DormitoryResponse
from campus_api.services.crud_service import CrudService

# 싱글턴 인스턴스 / Singleton instances
building_service: CrudService[Building, BuildingResponse] = CrudService(
    building_repository, BuildingResponse, "Building"
)
dormitory_service: CrudService[Dormitory, DormitoryResponse] = CrudService(
    dormitory_repository, DormitoryResponse, "Dormitory"
)
