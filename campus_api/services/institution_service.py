"""교육기관/입학 서비스 — 기관, 학과, 전공 과정, 지원자 CRUD.

Institution and admissions services, one CrudService per entity.
"""

from campus_api.models.institution import Applicant, Department, Institute, StudyDirection
from campus_api.repositories.institution_repository import (
    applicant_repository,
    department_repository,
    institute_repository,
    study_direction_repository,
)
from campus_api.schemas.institution import (
    ApplicantResponse,
    DepartmentResponse,
    InstituteResponse,
    StudyDirectionResponse,
)
from campus_api.services.crud_service import CrudService

# 싱글턴 인스턴스 / Singleton instances
institute_service: CrudService[Institute, InstituteResponse] = CrudService(
    institute_repository, InstituteResponse, "Institute"
)
department_service: CrudService[Department, DepartmentResponse] = CrudService(
    department_repository, DepartmentResponse, "Department"
)
study_direction_service: CrudService[StudyDirection, StudyDirectionResponse] = CrudService(
    study_direction_repository, StudyDirectionResponse, "Study direction"
)
applicant_service: CrudService[Applicant, ApplicantResponse] = CrudService(
    applicant_repository, ApplicantResponse, "Applicant"
)
