"""
Participants Router

Endpoints:
- GET /participants - List training participants
- POST /participants - Register a participant

All endpoints require a bearer token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.auth import get_current_admin
from mou_tracker.core.database import get_db
from mou_tracker.modules.participants import service
from mou_tracker.modules.participants.schemas import (
    CandidateCreate,
    CandidateCreateResponse,
    CandidateListResponse,
    CandidateResponse,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=CandidateListResponse, summary="List Participants")
async def list_participants(db: AsyncSession = Depends(get_db)) -> CandidateListResponse:
    candidates = await service.list_candidates(db)
    return CandidateListResponse(
        count=len(candidates),
        data=[CandidateResponse.model_validate(candidate) for candidate in candidates],
    )


@router.post(
    "",
    response_model=CandidateCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Participant",
)
async def create_participant(
    data: CandidateCreate,
    db: AsyncSession = Depends(get_db),
) -> CandidateCreateResponse:
    """
    Register a training participant.

    Raises:
        400: A required field is missing or blank, or the email is invalid
        409: The email is already registered
    """
    candidate = await service.create_candidate(db, data)
    return CandidateCreateResponse(data=CandidateResponse.model_validate(candidate))
