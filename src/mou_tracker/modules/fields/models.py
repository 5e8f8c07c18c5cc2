"""
Field Models

Fields of study that training courses belong to. Created lazily on the
first course naming the field; `count` tracks how many courses reference it.
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mou_tracker.modules.shared import BaseModel


class Field(BaseModel):
    """Field-of-study aggregate. Courses reference it by name."""

    __tablename__ = "fields"

    name_of_the_field: Mapped[str] = mapped_column(
        String(200),
        unique=True,
        nullable=False,
    )

    count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
    )

    __table_args__ = (CheckConstraint("count >= 0", name="ck_fields_count_non_negative"),)

    def __repr__(self) -> str:
        return f"<Field(id={self.id}, name={self.name_of_the_field}, count={self.count})>"
