"""
MOU Repository

Database operations for MOUs. Writes only flush; the service commits.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import MOU


async def add(
    db: AsyncSession,
    *,
    mou_code: str,
    name_of_partner_institution: str,
    strategic_areas: str,
) -> MOU:
    """Stage a new MOU and flush it so constraint violations surface here."""
    mou = MOU(
        mou_code=mou_code,
        name_of_partner_institution=name_of_partner_institution,
        strategic_areas=strategic_areas,
    )
    db.add(mou)
    await db.flush()
    return mou


async def get_by_code(db: AsyncSession, mou_code: str) -> MOU | None:
    """Get an MOU by its business key."""
    result = await db.execute(select(MOU).where(MOU.mou_code == mou_code))
    return result.scalar_one_or_none()


async def list_all(db: AsyncSession) -> list[MOU]:
    """All MOUs, oldest first."""
    result = await db.execute(select(MOU).order_by(MOU.created_at))
    return list(result.scalars().all())


async def list_by_partner(db: AsyncSession, partner_name: str) -> list[MOU]:
    """MOUs signed with the partner institution called `partner_name`."""
    result = await db.execute(
        select(MOU)
        .where(MOU.name_of_partner_institution == partner_name)
        .order_by(MOU.created_at)
    )
    return list(result.scalars().all())
