"""
MOU Router

Endpoints:
- GET /mous - List all MOUs
- POST /mous - Create an MOU (and update the partner school's counter)

All endpoints require a bearer token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.auth import get_current_admin
from mou_tracker.core.database import get_db
from mou_tracker.modules.mous import service
from mou_tracker.modules.mous.schemas import (
    MOUCreate,
    MOUCreateResponse,
    MOUListResponse,
    MOUResponse,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=MOUListResponse, summary="List MOUs")
async def list_mous(db: AsyncSession = Depends(get_db)) -> MOUListResponse:
    mous = await service.list_mous(db)
    return MOUListResponse(
        count=len(mous),
        data=[MOUResponse.model_validate(mou) for mou in mous],
    )


@router.post(
    "",
    response_model=MOUCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create MOU",
    description="""
Create a new MOU.

The partner institution is recorded by name. The first MOU naming an
institution creates its School entry with count 1; every later MOU naming
it increments that count.

**Errors:**
- 400: a field is missing or blank
- 409: an MOU with the same ID already exists
""",
)
async def create_mou(
    data: MOUCreate,
    db: AsyncSession = Depends(get_db),
) -> MOUCreateResponse:
    mou = await service.create_mou(db, data)
    return MOUCreateResponse(data=MOUResponse.model_validate(mou))
