"""
Mobile API Backend — Account Request/Response Schemas
======================================================

What:  API contract for the sign-up, login and forgot-password screens.
How:   Request fields are all Optional: presence and emptiness are business
       rules checked by AccountService (→ 400 validation_error), not by
       FastAPI's 422 schema validation.

Security:
    No response model contains a password or a password hash. Login returns
    only the profile fields the app displays.
"""

from typing import Optional

from pydantic import Field

from mobile_api.schemas.common import CamelModel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class RegisterRequest(CamelModel):
    """POST /SignUpScreen body."""
    first_name: Optional[str] = Field(default=None, description="Given name")
    last_name: Optional[str] = Field(default=None, description="Family name")
    email: Optional[str] = Field(default=None, description="Account email (unique)")
    password: Optional[str] = Field(default=None, description="Plaintext password")


class LoginRequest(CamelModel):
    """POST /LoginUpScreen body. The identifier matches email or phone."""
    email_or_phone: Optional[str] = Field(default=None, description="Email or phone")
    password: Optional[str] = Field(default=None, description="Plaintext password")


class ResetPasswordRequest(CamelModel):
    """POST /ForgotScreen body."""
    email: Optional[str] = Field(default=None, description="Account email")
    new_password: Optional[str] = Field(default=None, description="Replacement password")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class AccountProfile(CamelModel):
    """Non-sensitive account fields returned after login."""
    first_name: str
    last_name: str
    email: str


class LoginResponse(CamelModel):
    """
    Successful login.

    token is an HS256 JWT carrying the account id (`userId`) and an
    expiry one hour after issuance.
    """
    message: str = Field(default="Login successful")
    token: str = Field(description="Signed bearer token")
    user: AccountProfile
