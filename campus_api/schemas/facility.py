"""캠퍼스 시설 Pydantic 요청/응답 스키마 정의.

Campus facility Pydantic request/response schema definitions.
"""

from typing import Annotated
from uuid import UUID

from pydantic import Field, StrictInt, StrictStr

from campus_api.schemas.base import RequestSchema, ResponseSchema, make_partial

# capacity 컬럼은 INTEGER (32비트 부호 있는 정수) / capacity is stored as a 32-bit signed INTEGER
CAPACITY_MIN: int = -(2**31)
CAPACITY_MAX: int = 2**31 - 1


class BuildingCreate(RequestSchema):
    """건물 생성/교체 요청 스키마.

    Building create/replace request schema.
    """

    name: StrictStr  # 건물 이름 (Building name)
    address: StrictStr  # 주소 (Postal address)


class BuildingResponse(ResponseSchema):
    id: UUID
    name: str
    address: str


class DormitoryCreate(RequestSchema):
    """기숙사 생성/교체 요청 스키마.

    Dormitory create/replace request schema.

    Attributes:
        name: 기숙사 이름 (Dormitory name)
        capacity: 수용 인원, 32비트 정수만 허용 (Capacity, 32-bit integers only)
        building_id: 소속 건물 UUID, 와이어 키 ``buildingId`` (Parent building)
    """

    name: StrictStr
    capacity: Annotated[StrictInt, Field(ge=CAPACITY_MIN, le=CAPACITY_MAX)]
    building_id: UUID


class DormitoryResponse(ResponseSchema):
    """기숙사 응답 스키마."""

    id: UUID
    name: str
    capacity: int
    building_id: UUID


BuildingUpdate = make_partial(BuildingCreate, "BuildingUpdate")
DormitoryUpdate = make_partial(DormitoryCreate, "DormitoryUpdate")
