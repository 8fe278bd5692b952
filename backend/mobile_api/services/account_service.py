"""
Mobile API Backend — Account Service (Credential Lifecycle)
============================================================

What:  Registration, login and password reset.
How:   Composes the credential store (AccountRepository), the PasswordHasher
       and the TokenIssuer, all passed in at construction.
Who:   Called by the routes in routes/auth.py through get_account_service.

Flows:
    Register       validate → email taken? → hash → insert        → 201
    Login          validate → lookup → verify hash → issue token  → 200
    ResetPassword  validate → lookup → hash (fresh salt) → update → 200

Outcome → exception:
    InvalidInput    ValidationError       (400)
    Conflict        ConflictError         (400)
    NotFound        NotFoundError         (404; 400 on the reset route)
    BadCredentials  AuthenticationError   (400)
    Internal        DatabaseError         (500)

Known gap:
    ResetPassword changes the password of any account given only its email;
    no old password or reset token is checked. This is the behavior the
    mobile client depends on today.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from mobile_api.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from mobile_api.models.account import Account
from mobile_api.repositories.account_repository import AccountRepository
from mobile_api.schemas.account import AccountProfile, LoginResponse
from mobile_api.schemas.common import MessageResponse
from mobile_api.services.password_hasher import PasswordHasher
from mobile_api.services.token_service import TokenIssuer

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _column_length(column: str) -> int:
    return Account.__table__.c[column].type.length


class AccountService:
    """
    Orchestrates the credential lifecycle for one request.

    Holds no state of its own besides its collaborators; a new instance is
    built per request around that request's repository.
    """

    def __init__(
        self,
        accounts: AccountRepository,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
    ):
        self.accounts = accounts
        self.hasher = hasher
        self.tokens = tokens

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        first_name: Optional[str],
        last_name: Optional[str],
    ) -> MessageResponse:
        """
        Create an account.

        Raises:
            ValidationError: a required field is missing or empty,
                             or longer than its column
            ConflictError: the email already has an account
            DatabaseError: storage failure
        """
        missing = [
            name
            for name, value in (
                ("firstName", first_name),
                ("lastName", last_name),
                ("email", email),
            )
            if _is_blank(value)
        ]
        if not password:
            missing.append("password")
        if missing:
            raise ValidationError(
                message="First name, last name, email and password are required.",
                context={"fields": missing},
            )

        for field, column, value in (
            ("firstName", "first_name", first_name),
            ("lastName", "last_name", last_name),
            ("email", "email", email),
        ):
            limit = _column_length(column)
            if len(value) > limit:
                raise ValidationError(
                    message=f"{field} must be at most {limit} characters.",
                    field=field,
                )

        if await self.accounts.find_by_email(email) is not None:
            raise ConflictError()

        password_hash = await self._hash(password, field="password")

        account = Account(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
        )
        # The unique index still rejects a concurrent duplicate here
        await self.accounts.insert(account)

        return MessageResponse(message="User registered successfully")

    async def login(self, identifier: Optional[str], password: Optional[str]) -> LoginResponse:
        """
        Authenticate by email (or phone) and password, and issue a token.

        Raises:
            ValidationError: identifier or password missing
            NotFoundError: no account matches the identifier
            AuthenticationError: password does not match, or the stored hash
                                 is missing/corrupt
            DatabaseError: storage failure
        """
        if _is_blank(identifier) or not password:
            raise ValidationError(
                message="Email/Phone and Password are required.",
                context={"fields": ["emailOrPhone", "password"]},
            )

        account = await self.accounts.find_by_email_or_identifier(identifier)
        if account is None:
            raise NotFoundError(resource="account", message="User not found.")

        matches = await run_in_threadpool(self.hasher.verify, password, account.password_hash)
        if not matches:
            logger.info("Failed login for account %s", account.id)
            raise AuthenticationError()

        token = self.tokens.issue(account.id)
        logger.info("Login succeeded for account %s", account.id)

        return LoginResponse(
            message="Login successful",
            token=token,
            user=AccountProfile(
                first_name=account.first_name,
                last_name=account.last_name,
                email=account.email,
            ),
        )

    async def reset_password(self, email: Optional[str], new_password: Optional[str]) -> MessageResponse:
        """
        Replace an account's password, identified by email alone.

        Raises:
            ValidationError: email or new password missing
            NotFoundError: no account has this email
            DatabaseError: storage failure
        """
        if _is_blank(email) or not new_password:
            raise ValidationError(
                message="Email and new password are required.",
                context={"fields": ["email", "newPassword"]},
            )

        account = await self.accounts.find_by_email(email)
        if account is None:
            raise NotFoundError(resource="account", message="User not found")

        new_hash = await self._hash(new_password, field="newPassword")
        await self.accounts.update_password_hash(account.id, new_hash)

        return MessageResponse(message="Password updated successfully")

    async def _hash(self, password: str, field: str) -> str:
        try:
            return await run_in_threadpool(self.hasher.hash, password)
        except ValueError as e:
            raise ValidationError(message=f"{e}.", field=field) from e
