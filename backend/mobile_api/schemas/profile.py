"""
Mobile API Backend — Profile Schemas
=====================================

What:  Request/response shapes for the Edit Profile and Profile screens.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from mobile_api.schemas.common import CamelModel


class ProfileRequest(CamelModel):
    """POST /api/EditProfileScreen body. Every field is optional; lengths match the columns."""
    name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    dob: Optional[str] = Field(default=None, max_length=32, description="Date of birth as entered")
    address: Optional[str] = Field(default=None, max_length=500)


class ProfileResponse(CamelModel):
    id: uuid.UUID
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime


class ProfileSaveResponse(CamelModel):
    message: str = Field(default="Profile created successfully")
    user: ProfileResponse


class ProfileSummary(CamelModel):
    """GET /api/ProfileScreen: the two fields the profile header shows."""
    name: Optional[str] = None
    email: Optional[str] = None
