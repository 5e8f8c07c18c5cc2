"""
MOU Models

Memoranda of understanding signed with partner institutions.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mou_tracker.modules.shared import BaseModel


class MOU(BaseModel):
    """
    A memorandum of understanding.

    `mou_code` is the business key supplied by the admin (JSON "ID").
    `name_of_partner_institution` references School.name by value.
    """

    __tablename__ = "mous"

    mou_code: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
    )
    name_of_partner_institution: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
    )
    strategic_areas: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<MOU(id={self.id}, code={self.mou_code}, partner={self.name_of_partner_institution})>"
