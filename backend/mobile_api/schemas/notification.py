"""
Mobile API Backend — Notification Schemas
==========================================
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from mobile_api.schemas.common import CamelModel


class NotificationCreate(CamelModel):
    """POST /Notifications body."""
    title: Optional[str] = Field(default=None, max_length=255)
    message: Optional[str] = None


class NotificationResponse(CamelModel):
    id: uuid.UUID
    title: Optional[str] = None
    message: Optional[str] = None
    read: bool
    created_at: datetime
