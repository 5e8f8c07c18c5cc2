"""
Candidate Models

Training participants.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from mou_tracker.modules.shared import BaseModel


class Candidate(BaseModel):
    """A training participant. Email is unique and stored lower-cased."""

    __tablename__ = "candidates"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(30), nullable=False)
    gender: Mapped[str] = mapped_column(String(30), nullable=False)
    designation: Mapped[str] = mapped_column(String(200), nullable=False)
    department: Mapped[str] = mapped_column(String(200), nullable=False)
    organization: Mapped[str] = mapped_column(String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<Candidate(id={self.id}, email={self.email})>"
