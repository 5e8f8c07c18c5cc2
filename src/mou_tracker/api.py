from fastapi import APIRouter

from mou_tracker.modules.admins import router as admins_router
from mou_tracker.modules.auth import router as auth_router
from mou_tracker.modules.courses import router as courses_router
from mou_tracker.modules.fields.router import router as fields_router
from mou_tracker.modules.mous import router as mous_router
from mou_tracker.modules.participants import router as participants_router
from mou_tracker.modules.schools.router import router as schools_router

api_router = APIRouter()

api_router.include_router(auth_router, tags=["Authentication"])

api_router.include_router(admins_router, prefix="/admin", tags=["Admin Registration"])

api_router.include_router(mous_router, prefix="/mous", tags=["MOUs"])

api_router.include_router(schools_router, prefix="/schools", tags=["Schools"])

api_router.include_router(courses_router, prefix="/courses", tags=["Courses"])

api_router.include_router(fields_router, prefix="/fields", tags=["Fields"])

api_router.include_router(participants_router, prefix="/participants", tags=["Participants"])
