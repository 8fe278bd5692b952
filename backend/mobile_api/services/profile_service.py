"""
Mobile API Backend — Profile Service
=====================================

What:  Saves Edit Profile submissions and returns the latest profile.
How:   Stateless; receives the request's AsyncSession on every call.

Each submission is stored as a new row. The Profile screen shows the newest
row, whoever submitted it: profiles are not linked to accounts.
"""

import logging

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.exceptions import DatabaseError, NotFoundError
from mobile_api.models.profile import UserProfile
from mobile_api.schemas.profile import (
    ProfileRequest,
    ProfileResponse,
    ProfileSaveResponse,
    ProfileSummary,
)

logger = logging.getLogger(__name__)


class ProfileService:

    async def save_profile(self, db: AsyncSession, data: ProfileRequest) -> ProfileSaveResponse:
        """
        Store a new profile document and echo it back.

        Raises:
            DatabaseError: the insert failed (→ 500 "Failed to save profile")
        """
        profile = UserProfile(
            name=data.name,
            email=data.email,
            phone=data.phone,
            dob=data.dob,
            address=data.address,
        )
        try:
            db.add(profile)
            await db.flush()
        except Exception as e:
            logger.error("Database error saving profile: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to save profile",
                context={"error_type": type(e).__name__},
            )

        logger.info("Profile saved: %s", profile.id)
        return ProfileSaveResponse(
            message="Profile created successfully",
            user=ProfileResponse(
                id=profile.id,
                name=profile.name,
                email=profile.email,
                phone=profile.phone,
                dob=profile.dob,
                address=profile.address,
                created_at=profile.created_at,
            ),
        )

    async def get_latest_profile(self, db: AsyncSession) -> ProfileSummary:
        """
        Return name and email of the most recently saved profile.

        Raises:
            NotFoundError: no profile has been saved yet
            DatabaseError: query failed
        """
        try:
            result = await db.execute(
                select(UserProfile).order_by(desc(UserProfile.created_at)).limit(1)
            )
            profile = result.scalars().first()
        except Exception as e:
            logger.error("Database error fetching profile: %s", str(e))
            raise DatabaseError(
                message="Internal Server Error",
                context={"error_type": type(e).__name__},
            )

        if profile is None:
            raise NotFoundError(resource="profile", message="No users found")

        return ProfileSummary(name=profile.name, email=profile.email)


profile_service = ProfileService()
