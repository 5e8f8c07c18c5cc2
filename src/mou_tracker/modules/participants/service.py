"""
Candidate Service Layer
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.errors import ConflictError
from mou_tracker.modules.participants import repository
from mou_tracker.modules.participants.models import Candidate
from mou_tracker.modules.participants.schemas import CandidateCreate

logger = logging.getLogger(__name__)


class DuplicateCandidateError(ConflictError):
    """Raised when a participant with the same email already exists."""

    def __init__(self):
        super().__init__(
            message="A participant with this email already exists",
            error_code="DUPLICATE_PARTICIPANT",
        )


async def list_candidates(db: AsyncSession) -> list[Candidate]:
    return await repository.list_all(db)


async def create_candidate(db: AsyncSession, data: CandidateCreate) -> Candidate:
    """
    Register a training participant.

    Raises:
        DuplicateCandidateError: If the email is already registered
    """
    if await repository.get_by_email(db, data.email):
        logger.warning("Duplicate participant email rejected")
        raise DuplicateCandidateError()

    try:
        candidate = await repository.create(db, data)
    except IntegrityError as e:
        await db.rollback()
        raise DuplicateCandidateError() from e

    logger.info(f"Created participant {candidate.id}")
    return candidate
