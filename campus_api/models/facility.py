"""캠퍼스 시설 관련 SQLAlchemy ORM 모델 정의.

Campus facility SQLAlchemy ORM model definitions.

Tables:
    - buildings: 건물 (Campus building)
    - dormitories: 기숙사 (Dormitory housed in a building)
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_api.database import Base
from campus_api.utils.timestamps import creation_timestamp


class Building(Base):
    """건물 모델 — 시설 트리의 루트 엔티티.

    Building model — Root of the facilities tree.
    """

    __tablename__ = "buildings"

    # 건물 고유 식별자 / Building unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=creation_timestamp, nullable=False)


class Dormitory(Base):
    """기숙사 모델 — 건물에 속한 숙소.

    Dormitory model — Housing unit located in a Building.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 기숙사 이름 (Dormitory name)
        capacity: 수용 인원 (Number of residents it can hold)
        building_id: 소속 건물 FK (Parent building)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "dormitories"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    # 소속 건물 FK / Parent building (NO ACTION)
    building_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("buildings.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=creation_timestamp, nullable=False)
