"""교육기관 및 입학 관련 SQLAlchemy ORM 모델 정의.

Institution and admissions SQLAlchemy ORM model definitions.
Parent keys are plain foreign-key columns; there are no ORM back-pointer
relationships, so deleting a parent never touches its children and the
database rejects the delete while children still reference it.

Tables:
    - institutes: 최상위 교육기관 (Top-level institute)
    - departments: 기관 하위 학과 (Department under an institute)
    - study_directions: 학과 하위 전공 과정 (Study direction under a department)
    - applicants: 지원자 (Applicant, references study direction and institute)
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_api.database import Base
from campus_api.utils.timestamps import creation_timestamp


class Institute(Base):
    """교육기관 모델 — 입학 트리의 루트 엔티티.

    Institute model — Root of the admissions tree.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 기관 이름 (Institute name)
        address: 주소 (Postal address)
        created_at: 생성 일시 UTC (Creation timestamp, list ordering only)
    """

    __tablename__ = "institutes"

    # 기관 고유 식별자 / Institute unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    # 생성 일시 / Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=creation_timestamp, nullable=False)


class Department(Base):
    """학과 모델 — 교육기관 하위 조직.

    Department model — Organisational unit under an Institute.
    """

    __tablename__ = "departments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # 소속 기관 FK / Parent institute (NO ACTION: 하위 학과가 있으면 기관 삭제 불가)
    institute_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("institutes.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=creation_timestamp, nullable=False)


class StudyDirection(Base):
    """전공 과정 모델 — 학과가 운영하는 모집 단위.

    Study direction model — Admission track offered by a Department.
    """

    __tablename__ = "study_directions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # 소속 학과 FK / Parent department
    department_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("departments.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=creation_timestamp, nullable=False)


class Applicant(Base):
    """지원자 모델 — 전공 과정과 교육기관을 동시에 참조.

    Applicant model — References both a StudyDirection and an Institute.
    The two keys are independent; nothing checks that the study direction
    actually belongs to the referenced institute.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        email: 이메일 (Contact e-mail)
        phone: 전화번호 (Contact phone)
        study_direction_id: 지원 전공 FK (Chosen study direction)
        institute_id: 지원 기관 FK (Target institute)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "applicants"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(Text, nullable=False)
    study_direction_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("study_directions.id"), nullable=False)
    institute_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("institutes.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=creation_timestamp, nullable=False)
