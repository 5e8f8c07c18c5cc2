"""
Admin Models

Admins are the only accounts in the system. A new admin starts life as a
PendingAdmin and becomes an Admin once the approver follows the confirm link.
"""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from mou_tracker.modules.shared import BaseModel


class RegistrationStatus(str, enum.Enum):
    """Status of an admin registration request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class Admin(BaseModel):
    """An approved administrator. Email is stored lower-cased."""

    __tablename__ = "admins"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(30), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, email={self.email})>"


class PendingAdmin(BaseModel):
    """
    An admin registration awaiting a decision.

    One request may exist per email. Processed rows are kept, so a
    rejected registrant cannot ask again with the same address.
    """

    __tablename__ = "pending_admins"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(30), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[RegistrationStatus] = mapped_column(
        Enum(
            RegistrationStatus,
            name="registration_status",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=False,
        default=RegistrationStatus.PENDING,
    )
    processed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("uq_pending_admins_email", "email", unique=True),
        Index("idx_pending_admins_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<PendingAdmin(id={self.id}, email={self.email}, status={self.status})>"
