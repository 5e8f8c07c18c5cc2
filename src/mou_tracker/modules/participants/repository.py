"""
Candidate Repository

Database operations for training participants.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Candidate
from .schemas import CandidateCreate


async def create(db: AsyncSession, data: CandidateCreate) -> Candidate:
    """Insert a candidate and commit."""
    candidate = Candidate(
        name=data.name,
        email=data.email.lower(),
        phone_number=data.phone_number,
        gender=data.gender,
        designation=data.designation,
        department=data.department,
        organization=data.organization,
    )
    db.add(candidate)
    await db.commit()
    await db.refresh(candidate)
    return candidate


async def get_by_email(db: AsyncSession, email: str) -> Candidate | None:
    result = await db.execute(select(Candidate).where(Candidate.email == email.lower()))
    return result.scalar_one_or_none()


async def list_all(db: AsyncSession) -> list[Candidate]:
    result = await db.execute(select(Candidate).order_by(Candidate.created_at))
    return list(result.scalars().all())
