"""
Schools Router

Endpoints:
- GET /schools/active - Schools with at least one MOU, as links
- GET /schools/{school_id} - MOUs signed with one school

All endpoints require a bearer token.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mou_tracker.core.auth import get_current_admin
from mou_tracker.core.database import get_db
from mou_tracker.modules.mous.schemas import MOUResponse
from mou_tracker.modules.schools import service
from mou_tracker.modules.schools.schemas import (
    ActiveSchoolsResponse,
    SchoolLink,
    SchoolMOUsResponse,
    SchoolResponse,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/active", response_model=ActiveSchoolsResponse, summary="List Active Schools")
async def list_active_schools(db: AsyncSession = Depends(get_db)) -> ActiveSchoolsResponse:
    """Schools with count > 0, each with a link to its MOU listing."""
    schools = await service.list_active_schools(db)
    links = [
        SchoolLink(id=school.id, name=school.name, count=school.count, link=f"/api/schools/{school.id}")
        for school in schools
    ]
    return ActiveSchoolsResponse(count=len(links), data=links)


@router.get("/{school_id}", response_model=SchoolMOUsResponse, summary="List a School's MOUs")
async def get_school_mous(
    school_id: UUID,
    db: AsyncSession = Depends(get_db),
) -> SchoolMOUsResponse:
    """
    MOUs whose partner institution is this school.

    A malformed id is rejected with 400 before any lookup; an unknown id is 404.
    """
    school, mous = await service.get_school_mous(db, school_id)
    return SchoolMOUsResponse(
        schoolId=school.id,
        school=SchoolResponse.model_validate(school),
        count=len(mous),
        data=[MOUResponse.model_validate(mou) for mou in mous],
    )
