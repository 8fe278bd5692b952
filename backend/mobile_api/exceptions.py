"""
Mobile API Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services, repositories and middleware; caught by handlers.

Exception Hierarchy:
    MobileApiError (base)
    ├── ValidationError          → 400 Bad Request   (InvalidInput)
    ├── ConflictError            → 400 Bad Request   (duplicate email)
    ├── AuthenticationError      → 400 Bad Request   (BadCredentials)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error
    └── RateLimitExceededError   → 429 Too Many Requests

The 400 codes for Conflict and BadCredentials are the status codes the
mobile client already handles; they are kept as-is.
"""

from typing import Any, Dict, Optional


class MobileApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the
                  handler chooses to expose it)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(MobileApiError):
    """
    Raised when client input fails validation.

    When:    Missing or empty required fields, malformed values.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Email/Phone and Password are required.",
            "details": {"fields": ["emailOrPhone", "password"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(MobileApiError):
    """
    Raised when an insert would violate the email-uniqueness invariant.

    When:    Registration with an email that already has an account, either
             detected by the pre-insert lookup or by the unique index.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "User already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthenticationError(MobileApiError):
    """
    Raised when a password does not match the stored hash.

    Also raised when the stored hash itself is missing or corrupted, so a
    damaged record can never authenticate.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid credentials.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(MobileApiError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing records; services convert that into
    this exception so routes stay free of None checks.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource


class DatabaseError(MobileApiError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, deadlock, driver failure.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Detailed error info is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(MobileApiError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests (with Retry-After header)
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
