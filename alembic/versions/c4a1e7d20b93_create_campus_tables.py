"""create campus tables

Revision ID: c4a1e7d20b93
Revises:
Create Date: 2026-10-17 00:00:00.000000

기관/학과/전공 과정/지원자 및 건물/기숙사 테이블 생성.
외래 키는 모두 ON DELETE NO ACTION — 하위 레코드가 있으면 부모 삭제 불가.
created_at은 애플리케이션이 발급 (목록 정렬 기준), 서버 기본값 없음.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "c4a1e7d20b93"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # institutes / 교육기관 (admissions tree root)
    op.create_table(
        "institutes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # departments / 학과
    op.create_table(
        "departments",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("institute_id", sa.Uuid(), sa.ForeignKey("institutes.id", ondelete="NO ACTION"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # study_directions / 전공 과정
    op.create_table(
        "study_directions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("department_id", sa.Uuid(), sa.ForeignKey("departments.id", ondelete="NO ACTION"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # applicants / 지원자 (전공 과정 + 기관 동시 참조)
    op.create_table(
        "applicants",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("study_direction_id", sa.Uuid(), sa.ForeignKey("study_directions.id", ondelete="NO ACTION"), nullable=False),
        sa.Column("institute_id", sa.Uuid(), sa.ForeignKey("institutes.id", ondelete="NO ACTION"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # buildings / 건물 (facilities tree root)
    op.create_table(
        "buildings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # dormitories / 기숙사
    op.create_table(
        "dormitories",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("capacity", sa.Integer(), nullable=False),
        sa.Column("building_id", sa.Uuid(), sa.ForeignKey("buildings.id", ondelete="NO ACTION"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("dormitories")
    op.drop_table("buildings")
    op.drop_table("applicants")
    op.drop_table("study_directions")
    op.drop_table("departments")
    op.drop_table("institutes")
