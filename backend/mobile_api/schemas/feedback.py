"""
Mobile API Backend — Feedback Schemas
======================================

What:  Request shape for the Feedback screen.
How:   Fields are Optional so FeedbackService can report every missing
       required field in one 400 response.
"""

from typing import List, Optional

from pydantic import Field

from mobile_api.schemas.common import CamelModel


class FeedbackRequest(CamelModel):
    """POST /Feedback body. phone is the only optional field."""
    full_name: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    message: Optional[str] = None
    feedback_types: Optional[List[str]] = Field(
        default=None,
        description="Selected feedback categories (at least one)",
    )
    rating: Optional[float] = Field(default=None, description="Star rating")
