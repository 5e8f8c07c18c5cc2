"""
Course Models

Training courses offered to candidates, grouped by field of study.
"""

import enum
from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from mou_tracker.modules.shared import BaseModel


class CompletionStatus(str, enum.Enum):
    """Whether a course has finished."""

    YES = "yes"
    NO = "no"


class Course(BaseModel):
    """
    A training course.

    `course_code` is the business key supplied by the admin (JSON "ID").
    `field` references Field.name_of_the_field by value.
    """

    __tablename__ = "courses"

    course_code: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Ordered, non-empty list of department names
    eligible_departments: Mapped[list] = mapped_column(JSON, nullable=False)

    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    completed: Mapped[CompletionStatus] = mapped_column(
        Enum(
            CompletionStatus,
            name="completion_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=CompletionStatus.NO,
        index=True,
    )

    field: Mapped[str] = mapped_column(String(200), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("start_date < end_date", name="ck_courses_dates_ordered"),
    )

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, code={self.course_code}, field={self.field})>"
