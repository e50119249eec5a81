"""교육기관/입학 라우터 — 기관, 학과, 전공 과정, 지원자 CRUD 엔드포인트.

Institution and admissions routers, built from the generic CRUD factory.
"""

from fastapi import APIRouter

from campus_api.api.crud_router import build_crud_router
from campus_api.schemas.institution import (
    ApplicantCreate,
    ApplicantResponse,
    ApplicantUpdate,
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
    InstituteCreate,
    InstituteResponse,
    InstituteUpdate,
    StudyDirectionCreate,
    StudyDirectionResponse,
    StudyDirectionUpdate,
)
from campus_api.services.institution_service import (
    applicant_service,
    department_service,
    institute_service,
    study_direction_service,
)

institutes_router: APIRouter = build_crud_router(
    institute_service,
    InstituteCreate,
    InstituteUpdate,
    InstituteResponse,
    singular="Institute",
    plural="Institutes",
)

departments_router: APIRouter = build_crud_router(
    department_service,
    DepartmentCreate,
    DepartmentUpdate,
    DepartmentResponse,
    singular="Department",
    plural="Departments",
)

study_directions_router: APIRouter = build_crud_router(
    study_direction_service,
    StudyDirectionCreate,
    StudyDirectionUpdate,
    StudyDirectionResponse,
    singular="StudyDirection",
    plural="StudyDirections",
)

applicants_router: APIRouter = build_crud_router(
    applicant_service,
    ApplicantCreate,
    ApplicantUpdate,
    ApplicantResponse,
    singular="Applicant",
    plural="Applicants",
)
