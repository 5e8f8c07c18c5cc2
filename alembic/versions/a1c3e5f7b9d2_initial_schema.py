"""initial schema

Revision ID: a1c3e5f7b9d2
Revises:
Create Date: 2026-10-18 09:00:00.000000

Creates:
1. admins and pending_admins (with the registration_status enum and a
   a unique index so one request exists per email, whatever its status)
2. schools and fields aggregates with non-negative count checks
3. mous, courses (completion_status enum, ordered date check) and candidates
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "a1c3e5f7b9d2"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _base_columns() -> list[sa.Column]:
    """id and audit timestamps shared by every table."""
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
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
    """Create all tables."""
    registration_status = postgresql.ENUM(
        "pending", "approved", "rejected", name="registration_status", create_type=False
    )
    registration_status.create(op.get_bind(), checkfirst=True)

    completion_status = postgresql.ENUM("yes", "no", name="completion_status", create_type=False)
    completion_status.create(op.get_bind(), checkfirst=True)

    # Admins
    op.create_table(
        "admins",
        *_base_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.UniqueConstraint("email", name="admins_email_key"),
    )

    op.create_table(
        "pending_admins",
        *_base_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("status", registration_status, nullable=False),
        sa.Column("processed_date", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("uq_pending_admins_email", "pending_admins", ["email"], unique=True)
    op.create_index("idx_pending_admins_status", "pending_admins", ["status"])

    # Aggregates
    op.create_table(
        "schools",
        *_base_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("count", sa.Integer(), server_default="0", nullable=False),
        sa.UniqueConstraint("name", name="schools_name_key"),
        sa.CheckConstraint("count >= 0", name="ck_schools_count_non_negative"),
    )

    op.create_table(
        "fields",
        *_base_columns(),
        sa.Column("name_of_the_field", sa.String(length=200), nullable=False),
        sa.Column("count", sa.Integer(), server_default="0", nullable=False),
        sa.UniqueConstraint("name_of_the_field", name="fields_name_of_the_field_key"),
        sa.CheckConstraint("count >= 0", name="ck_fields_count_non_negative"),
    )

    # Records
    op.create_table(
        "mous",
        *_base_columns(),
        sa.Column("mou_code", sa.String(length=100), nullable=False),
        sa.Column("name_of_partner_institution", sa.String(length=200), nullable=False),
        sa.Column("strategic_areas", sa.Text(), nullable=False),
        sa.UniqueConstraint("mou_code", name="mous_mou_code_key"),
    )
    op.create_index(
        "ix_mous_name_of_partner_institution", "mous", ["name_of_partner_institution"]
    )

    op.create_table(
        "courses",
        *_base_columns(),
        sa.Column("course_code", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("eligible_departments", sa.JSON(), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed", completion_status, nullable=False),
        sa.Column("field", sa.String(length=200), nullable=False),
        sa.UniqueConstraint("course_code", name="courses_course_code_key"),
        sa.CheckConstraint("start_date < end_date", name="ck_courses_dates_ordered"),
    )
    op.create_index("ix_courses_completed", "courses", ["completed"])
    op.create_index("ix_courses_field", "courses", ["field"])

    op.create_table(
        "candidates",
        *_base_columns(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone_number", sa.String(length=30), nullable=False),
        sa.Column("gender", sa.String(length=30), nullable=False),
        sa.Column("designation", sa.String(length=200), nullable=False),
        sa.Column("department", sa.String(length=200), nullable=False),
        sa.Column("organization", sa.String(length=200), nullable=False),
        sa.UniqueConstraint("email", name="candidates_email_key"),
    )


def downgrade() -> None:
    """Drop all tables and enum types."""
    op.drop_table("candidates")
    op.drop_index("ix_courses_field", table_name="courses")
    op.drop_index("ix_courses_completed", table_name="courses")
    op.drop_table("courses")
    op.drop_index("ix_mous_name_of_partner_institution", table_name="mous")
    op.drop_table("mous")
    op.drop_table("fields")
    op.drop_table("schools")
    op.drop_index("idx_pending_admins_status", table_name="pending_admins")
    op.drop_index("uq_pending_admins_email", table_name="pending_admins")
    op.drop_table("pending_admins")
    op.drop_table("admins")

    sa.Enum(name="completion_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="registration_status").drop(op.get_bind(), checkfirst=True)
