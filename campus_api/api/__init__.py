"""API 라우터 패키지 — 모든 리소스 엔드포인트 통합.

API Router package — Aggregates every resource router into ``api_router``,
mounted by the application under ``settings.API_PREFIX``.

Included routers:
    - institutes: 교육기관 (Institutes)
    - departments: 학과 (Departments)
    - study-directions: 전공 과정 (Study directions)
    - applicants: 지원자 (Applicants)
    - buildings: 건물 (Buildings)
    - dormitorys: 기숙사 (Dormitories)
"""

from fastapi import APIRouter

from campus_api.api.facilities import buildings_router, dormitories_router
from campus_api.api.institutions import (
    applicants_router,
    departments_router,
    institutes_router,
    study_directions_router,
)

api_router: APIRouter = APIRouter()


@api_router.get("/", operation_id="index")
async def index() -> str:
    """API 인덱스 — API index, answers with a plain greeting."""
    return "Hello world!"


# ---------------------------------------------------------------------------
# 리소스 라우터 등록 / Register resource routers
# ---------------------------------------------------------------------------
api_router.include_router(buildings_router, prefix="/buildings", tags=["Buildings"])
api_router.include_router(dormitories_router, prefix="/dormitorys", tags=["Dormitories"])
api_router.include_router(institutes_router, prefix="/institutes", tags=["Institutes"])
api_router.include_router(departments_router, prefix="/departments", tags=["Departments"])
api_router.include_router(study_directions_router, prefix="/study-directions", tags=["Study Directions"])
api_router.include_router(applicants_router, prefix="/applicants", tags=["Applicants"])
