"""
Mobile API Backend — User Profile Model
========================================

What:  ORM model for the `user_profiles` table written by the Edit Profile
       screen. Every submission creates a new row; the Profile screen shows
       the most recent one.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mobile_api.database import Base


class UserProfile(Base):
    """Free-form profile details. All fields are optional."""

    __tablename__ = "user_profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    dob: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # "Latest profile" lookups sort on this column
    __table_args__ = (
        Index("idx_user_profiles_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<UserProfile(id={self.id}, name='{self.name}')>"
