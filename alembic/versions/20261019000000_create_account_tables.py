"""Create students and faculty account tables.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _account_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("user_name", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "students",
        *_account_columns(),
        sa.Column("is_representative", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_students")),
    )
    op.create_index(op.f("ix_students_email"), "students", ["email"], unique=True)

    op.create_table(
        "faculty",
        *_account_columns(),
        sa.Column("position", sa.String(length=64), nullable=False, server_default="Faculty"),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_faculty")),
    )
    op.create_index(op.f("ix_faculty_email"), "faculty", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_faculty_email"), table_name="faculty")
    op.drop_table("faculty")
    op.drop_index(op.f("ix_students_email"), table_name="students")
    op.drop_table("students")
