"""
Mobile API Backend — Notification Route Handlers
=================================================

What:  Inbox endpoints used by the Notifications screen.

    POST /Notifications            add one notification (admin/tooling use)
    GET  /Notifications            list every notification
    POST /Notifications/mark-read  mark every notification read
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.database import get_db_session
from mobile_api.schemas.common import ErrorResponse, MessageResponse
from mobile_api.schemas.notification import NotificationCreate, NotificationResponse
from mobile_api.services.notification_service import notification_service

router = APIRouter(prefix="/Notifications", tags=["Notifications"])


@router.post(
    "",
    status_code=201,
    response_model=NotificationResponse,
    responses={500: {"description": "Error adding notification", "model": ErrorResponse}},
    summary="Add a notification",
)
async def add_notification(
    body: NotificationCreate,
    db: AsyncSession = Depends(get_db_session),
) -> NotificationResponse:
    return await notification_service.add(db=db, data=body)


@router.get(
    "",
    response_model=List[NotificationResponse],
    responses={500: {"description": "Error fetching notifications", "model": ErrorResponse}},
    summary="List notifications",
)
async def list_notifications(
    db: AsyncSession = Depends(get_db_session),
) -> List[NotificationResponse]:
    return await notification_service.list_all(db=db)


@router.post(
    "/mark-read",
    response_model=MessageResponse,
    responses={500: {"description": "Error updating notifications", "model": ErrorResponse}},
    summary="Mark all notifications as read",
)
async def mark_notifications_read(
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await notification_service.mark_all_read(db=db)
