"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every table with ``Base.metadata``,
which Alembic and the test fixtures rely on.

Modules:
    institution: 기관, 학과, 전공 과정, 지원자 (Institute, Department, StudyDirection, Applicant)
    facility: 건물, 기숙사 (Building, Dormitory)
"""

from campus_api.models.institution import Institute, Department, StudyDirection, Applicant
from campus_api.models.facility import Building, Dormitory

__all__ = [
    "Institute", "Department", "StudyDirection", "Applicant",
    "Building", "Dormitory",
]
