"""
Mobile API Backend — Profile Route Handlers
============================================

What:  POST /api/EditProfileScreen (save) and GET /api/ProfileScreen (latest).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.database import get_db_session
from mobile_api.schemas.common import ErrorResponse
from mobile_api.schemas.profile import ProfileRequest, ProfileSaveResponse, ProfileSummary
from mobile_api.services.profile_service import profile_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Profile"])


@router.post(
    "/EditProfileScreen",
    response_model=ProfileSaveResponse,
    responses={500: {"description": "Failed to save profile", "model": ErrorResponse}},
    summary="Save profile details",
)
async def edit_profile(
    body: ProfileRequest,
    db: AsyncSession = Depends(get_db_session),
) -> ProfileSaveResponse:
    return await profile_service.save_profile(db=db, data=body)


@router.get(
    "/ProfileScreen",
    response_model=ProfileSummary,
    responses={
        404: {"description": "No profile saved yet", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Name and email of the latest saved profile",
)
async def get_profile(db: AsyncSession = Depends(get_db_session)) -> ProfileSummary:
    return await profile_service.get_latest_profile(db=db)
