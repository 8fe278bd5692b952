"""
Mobile API Backend — Feedback Route Handler
============================================
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.database import get_db_session
from mobile_api.schemas.common import ErrorResponse, MessageResponse
from mobile_api.schemas.feedback import FeedbackRequest
from mobile_api.services.feedback_service import feedback_service

router = APIRouter(tags=["Feedback"])


@router.post(
    "/Feedback",
    status_code=201,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing required fields", "model": ErrorResponse},
        500: {"description": "Error submitting feedback", "model": ErrorResponse},
    },
    summary="Submit app feedback",
)
async def submit_feedback(
    body: FeedbackRequest,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await feedback_service.submit(db=db, data=body)
