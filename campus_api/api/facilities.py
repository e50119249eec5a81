"""캠퍼스 시설 라우터 — 건물, 기숙사 CRUD 엔드포인트.

Campus facility routers, built from the generic CRUD factory.
"""

from fastapi import APIRouter

from campus_api.api.crud_router import build_crud_router
from campus_api.schemas.facility import (
    BuildingCreate,
    BuildingResponse,
    BuildingUpdate,
    DormitoryCreate,
    DormitoryResponse,
    DormitoryUpdate,
)
from campus_api.services.facility_service import building_service, dormitory_service

buildings_router: APIRouter = build_crud_router(
    building_service,
    BuildingCreate,
    BuildingUpdate,
    BuildingResponse,
    singular="Building",
    plural="Buildings",
)

# 복수형은 기존 클라이언트 경로(/dormitorys)와 맞춤 / Plural matches the published /dormitorys path
dormitories_router: APIRouter = build_crud_router(
    dormitory_service,
    DormitoryCreate,
    DormitoryUpdate,
    DormitoryResponse,
    singular="Dormitory",
    plural="Dormitorys",
)
