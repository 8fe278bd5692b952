"""
Mobile API Backend — Notification Service
==========================================

What:  The notification inbox: add, list, mark all as read.
How:   Stateless; receives the request's AsyncSession on every call.

Notifications are global: every client sees the same list and "mark read"
applies to all rows. Pushing new notifications to connected clients is not
done here; clients poll GET /Notifications.
"""

import logging
from typing import List

from sqlalchemy import asc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.exceptions import DatabaseError
from mobile_api.models.notification import Notification
from mobile_api.schemas.common import MessageResponse
from mobile_api.schemas.notification import NotificationCreate, NotificationResponse

logger = logging.getLogger(__name__)


def _to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        title=notification.title,
        message=notification.message,
        read=notification.read,
        created_at=notification.created_at,
    )


class NotificationService:

    async def add(self, db: AsyncSession, data: NotificationCreate) -> NotificationResponse:
        """Create an unread notification. Raises DatabaseError on failure."""
        notification = Notification(title=data.title, message=data.message, read=False)
        try:
            db.add(notification)
            await db.flush()
        except Exception as e:
            logger.error("Error adding notification: %s", str(e), exc_info=True)
            raise DatabaseError(message="Error adding notification")

        logger.info("Notification %s added", notification.id)
        return _to_response(notification)

    async def list_all(self, db: AsyncSession) -> List[NotificationResponse]:
        """All notifications, oldest first."""
        try:
            result = await db.execute(
                select(Notification).order_by(asc(Notification.created_at))
            )
            notifications = list(result.scalars().all())
        except Exception as e:
            logger.error("Error fetching notifications: %s", str(e))
            raise DatabaseError(message="Error fetching notifications")

        return [_to_response(n) for n in notifications]

    async def mark_all_read(self, db: AsyncSession) -> MessageResponse:
        """Set read=true on every notification."""
        try:
            result = await db.execute(
                update(Notification)
                .where(Notification.read.is_(False))
                .values(read=True)
            )
        except Exception as e:
            logger.error("Error updating notifications: %s", str(e))
            raise DatabaseError(message="Error updating notifications")

        logger.info("Marked %d notifications as read", result.rowcount or 0)
        return MessageResponse(message="All notifications marked as read")


notification_service = NotificationService()
