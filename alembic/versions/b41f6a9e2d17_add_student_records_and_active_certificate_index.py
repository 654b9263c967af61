"""add student records and active certificate index

Revision ID: b41f6a9e2d17
Revises: 7c2e91d04b3a
Create Date: 2026-10-19 10:42:51.904118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'b41f6a9e2d17'
down_revision: Union[str, Sequence[str], None] = '7c2e91d04b3a'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "student_records",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
        sa.Column("attendance", sa.Integer(), nullable=False),
        sa.Column("discipline", sa.Text(), nullable=True),
        sa.Column("grades_pdf_url", sa.String(1024), nullable=True),
        sa.Column("transcript_pdf_url", sa.String(1024), nullable=True),
        sa.Column("diploma_pdf_url", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_student_records_id", "student_records", ["id"])
    op.create_index("ix_student_records_student_id", "student_records", ["student_id"], unique=True)

    op.create_index(
        "uq_certificates_active_student",
        "certificates",
        ["student_id"],
        unique=True,
        sqlite_where=sa.text("status = 'ACTIVE'"),
        postgresql_where=sa.text("status = 'ACTIVE'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("uq_certificates_active_student", table_name="certificates")
    op.drop_table("student_records")
