"""
School Models

Partner institutions named in MOUs. A School row is created lazily the first
time an MOU names it; `count` tracks how many MOUs reference it.
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from mou_tracker.modules.shared import BaseModel


class School(BaseModel):
    """
    Partner school aggregate.

    MOUs reference a school by its exact (trimmed) name, not by id.
    """

    __tablename__ = "schools"

    name: Mapped[str] = mapped_column(
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

    __table_args__ = (CheckConstraint("count >= 0", name="ck_schools_count_non_negative"),)

    def __repr__(self) -> str:
        return f"<School(id={self.id}, name={self.name}, count={self.count})>"
