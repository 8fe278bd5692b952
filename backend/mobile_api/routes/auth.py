"""
Mobile API Backend — Authentication Route Handlers
===================================================

What:  Sign-up, login and forgot-password endpoints.
How:   Thin handlers: parse the JSON body, call AccountService, return its
       response model. Errors propagate as application exceptions and are
       rendered by the handlers registered in main.py.
Who:   Called by the app's SignUpScreen, LoginUpScreen and ForgotScreen.

Paths keep the screen names the mobile client already calls.
"""

import logging

from fastapi import APIRouter, Depends

from mobile_api.dependencies import get_account_service
from mobile_api.exceptions import NotFoundError, ValidationError
from mobile_api.schemas.account import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    ResetPasswordRequest,
)
from mobile_api.schemas.common import ErrorResponse, MessageResponse
from mobile_api.services.account_service import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/SignUpScreen",
    status_code=201,
    response_model=MessageResponse,
    responses={
        201: {"description": "Account created", "model": MessageResponse},
        400: {"description": "Missing fields or email already registered", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new account",
)
async def sign_up(
    body: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """
    Register with first name, last name, email and password.

    The response confirms creation only; no account fields are echoed.
    """
    return await service.register(
        email=body.email,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
    )


@router.post(
    "/LoginUpScreen",
    response_model=LoginResponse,
    responses={
        200: {"description": "Authenticated", "model": LoginResponse},
        400: {"description": "Missing fields or invalid credentials", "model": ErrorResponse},
        404: {"description": "No account for this email/phone", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Log in and receive a session token",
)
async def login(
    body: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    """
    Log in with email (or phone) and password.

    Returns a bearer token valid for one hour plus the profile fields shown
    on the home screen.
    """
    return await service.login(identifier=body.email_or_phone, password=body.password)


@router.post(
    "/ForgotScreen",
    response_model=MessageResponse,
    responses={
        200: {"description": "Password replaced", "model": MessageResponse},
        400: {"description": "Missing fields or unknown email", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Reset a password by email",
)
async def forgot_password(
    body: ResetPasswordRequest,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """
    Replace the password of the account registered under `email`.

    Unknown emails are reported as 400 on this route (the status the
    forgot-password screen handles), not 404.
    """
    try:
        return await service.reset_password(email=body.email, new_password=body.new_password)
    except NotFoundError as e:
        raise ValidationError(message=e.message, field="email") from e
