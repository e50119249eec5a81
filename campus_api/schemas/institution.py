"""교육기관/입학 Pydantic 요청/응답 스키마 정의.

Institution and admissions Pydantic request/response schema definitions.
``*Create`` schemas double as the body schema for PUT (replace);
``*Update`` schemas are the PATCH (modify) bodies with nothing required.
"""

from uuid import UUID

from pydantic import StrictStr

from campus_api.schemas.base import RequestSchema, ResponseSchema, make_partial


# === 교육기관 (Institute) 스키마 ===

class InstituteCreate(RequestSchema):
    """교육기관 생성/교체 요청 스키마.

    Institute create/replace request schema.
    """

    name: StrictStr  # 기관 이름 (Institute name)
    address: StrictStr  # 주소 (Postal address)


class InstituteResponse(ResponseSchema):
    """교육기관 응답 스키마."""

    id: UUID
    name: str
    address: str


# === 학과 (Department) 스키마 ===

class DepartmentCreate(RequestSchema):
    """학과 생성/교체 요청 스키마.

    Department create/replace request schema.

    Attributes:
        name: 학과 이름 (Department name)
        institute_id: 소속 기관 UUID, 와이어 키 ``instituteId`` (Parent institute)
    """

    name: StrictStr
    institute_id: UUID


class DepartmentResponse(ResponseSchema):
    """학과 응답 스키마."""

    id: UUID
    name: str
    institute_id: UUID


# === 전공 과정 (StudyDirection) 스키마 ===

class StudyDirectionCreate(RequestSchema):
    """전공 과정 생성/교체 요청 스키마."""

    name: StrictStr
    department_id: UUID  # 소속 학과 UUID (Parent department, wire key departmentId)


class StudyDirectionResponse(ResponseSchema):
    id: UUID
    name: str
    department_id: UUID


# === 지원자 (Applicant) 스키마 ===

class ApplicantCreate(RequestSchema):
    """지원자 생성/교체 요청 스키마.

    Applicant create/replace request schema.
    Only primitive types are checked; e-mail and phone formats are not.
    """

    first_name: StrictStr  # 이름 (Given name)
    last_name: StrictStr  # 성 (Family name)
    email: StrictStr  # 이메일 (Contact e-mail)
    phone: StrictStr  # 전화번호 (Contact phone)
    study_direction_id: UUID  # 지원 전공 UUID (Chosen study direction)
    institute_id: UUID  # 지원 기관 UUID (Target institute)


class ApplicantResponse(ResponseSchema):
    """지원자 응답 스키마."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: str
    study_direction_id: UUID
    institute_id: UUID


# 부분 업데이트 스키마 / PATCH bodies, any subset of declared fields
InstituteUpdate = make_partial(InstituteCreate, "InstituteUpdate")
DepartmentUpdate = make_partial(DepartmentCreate, "DepartmentUpdate")
StudyDirectionUpdate = make_partial(StudyDirectionCreate, "StudyDirectionUpdate")
ApplicantUpdate = make_partial(ApplicantCreate, "ApplicantUpdate")
