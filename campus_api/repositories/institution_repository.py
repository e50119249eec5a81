"""교육기관/입학 레포지토리 — 기관, 학과, 전공 과정, 지원자.

Institution and admissions repositories.
Each is a plain BaseRepository bound to its model.
"""

from campus_api.models.institution import Applicant, Department, Institute, StudyDirection
from campus_api.repositories.base import BaseRepository


class InstituteRepository(BaseRepository[Institute]):
    """institutes 테이블 레포지토리 — Repository for the institutes table."""

    def __init__(self) -> None:
        super().__init__(Institute)


class DepartmentRepository(BaseRepository[Department]):
    """departments 테이블 레포지토리 — Repository for the departments table."""

    def __init__(self) -> None:
        super().__init__(Department)


class StudyDirectionRepository(BaseRepository[StudyDirection]):
    """study_directions 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(StudyDirection)


class ApplicantRepository(BaseRepository[Applicant]):
    """applicants 테이블 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Applicant)


# 싱글턴 인스턴스 / Singleton instances
institute_repository: InstituteRepository = InstituteRepository()
department_repository: DepartmentRepository = DepartmentRepository()
study_direction_repository: StudyDirectionRepository = StudyDirectionRepository()
applicant_repository: ApplicantRepository = ApplicantRepository()
