"""Initial schema — users and exercises.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("description", sa.String(1000), nullable=False),
        sa.Column("duration", sa.Integer, nullable=True),
        sa.Column("date", sa.Date, nullable=False),
    )
    op.create_index(
        "ix_exercises_user_id_date", "exercises", ["user_id", "date"],
    )


def downgrade() -> None:
    op.drop_index("ix_exercises_user_id_date", table_name="exercises")
    op.drop_table("exercises")
    op.drop_table("users")
