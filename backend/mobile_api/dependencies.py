"""
Mobile API Backend — Dependency Wiring
=======================================

What:  FastAPI dependencies that assemble AccountService per request.
How:   The PasswordHasher and TokenIssuer are built once by the lifespan
       handler (main.py) and stored on app.state; the AccountRepository
       wraps the request's database session.

    get_db_session ──▶ AccountRepository ─┐
    app.state.password_hasher ────────────┼──▶ AccountService
    app.state.token_issuer ───────────────┘

Tests replace app.state entries and override get_db_session instead of
patching module globals.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.database import get_db_session
from mobile_api.repositories.account_repository import AccountRepository
from mobile_api.services.account_service import AccountService
from mobile_api.services.password_hasher import PasswordHasher
from mobile_api.services.token_service import TokenIssuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_account_service(
    db: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
) -> AccountService:
    return AccountService(AccountRepository(db), hasher, tokens)
