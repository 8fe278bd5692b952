"""
Mobile API Backend — Feedback Service
======================================

What:  Validates and stores Feedback screen submissions.

Required: fullName, email, message, feedbackTypes (non-empty), rating.
Optional: phone.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.exceptions import DatabaseError, ValidationError
from mobile_api.models.feedback import Feedback
from mobile_api.schemas.common import MessageResponse
from mobile_api.schemas.feedback import FeedbackRequest

logger = logging.getLogger(__name__)


class FeedbackService:

    def _missing_fields(self, data: FeedbackRequest) -> List[str]:
        missing = []
        for alias, value in (
            ("fullName", data.full_name),
            ("email", data.email),
            ("message", data.message),
        ):
            if value is None or not value.strip():
                missing.append(alias)
        if not data.feedback_types:
            missing.append("feedbackTypes")
        if data.rating is None:
            missing.append("rating")
        return missing

    async def submit(self, db: AsyncSession, data: FeedbackRequest) -> MessageResponse:
        """
        Persist one feedback entry.

        Raises:
            ValidationError: a required field is missing (→ 400)
            DatabaseError: the insert failed (→ 500)
        """
        missing = self._missing_fields(data)
        if missing:
            raise ValidationError(
                message=f"Missing required feedback fields: {', '.join(missing)}",
                context={"fields": missing},
            )

        feedback = Feedback(
            full_name=data.full_name,
            email=data.email,
            phone=data.phone,
            message=data.message,
            feedback_types=list(data.feedback_types),
            rating=data.rating,
        )
        try:
            db.add(feedback)
            await db.flush()
        except Exception as e:
            logger.error("Error saving feedback: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error submitting feedback",
                context={"error_type": type(e).__name__},
            )

        logger.info("Feedback %s stored (rating=%s)", feedback.id, feedback.rating)
        return MessageResponse(message="Feedback submitted successfully!")


feedback_service = FeedbackService()
