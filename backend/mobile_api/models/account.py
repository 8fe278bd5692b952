"""
Mobile API Backend — Account SQLAlchemy Model
==============================================

What:  ORM model representing the `accounts` table (the credential store).
Who:   Used by AccountRepository for lookups and writes, and by Alembic.

Table Design:
    - id: UUID assigned at creation, never reused
    - email: unique index; stored exactly as submitted (case-sensitive)
    - phone: optional legacy lookup key accepted by the login route
    - password_hash: bcrypt hash string (salt and cost embedded); the
      plaintext is never stored
    - created_at: UTC timestamp

Invariant:
    Exactly one row per email value. Enforced by uq_accounts_email, which
    is what arbitrates concurrent registrations.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from mobile_api.database import Base


class Account(Base):
    """
    A registered user's stored identity and credential record.

    Lifecycle:
        1. Created by registration
        2. password_hash replaced by password reset
        3. Never deleted (no delete operation exists)
    """

    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    email: Mapped[str] = mapped_column(String(255), nullable=False)

    phone: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        default=None,
    )

    # bcrypt output is 60 characters; headroom for a future scheme
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        UniqueConstraint("email", name="uq_accounts_email"),
        Index("idx_accounts_phone", "phone"),
    )

    def __repr__(self) -> str:
        # Never include password_hash in debugging output
        return f"<Account(id={self.id}, email='{self.email}')>"
