"""
Mobile API Backend — Account Repository (Credential Store)
===========================================================

What:  All reads and writes of `accounts` rows.
How:   Wraps one AsyncSession (one request). Writes are flushed, not
       committed; get_db_session commits when the request succeeds.
Who:   Constructed per request by the get_account_service dependency and
       passed to AccountService.

Duplicate emails:
    insert() relies on the uq_accounts_email constraint. When two
    registrations race past the lookup, the database rejects the second
    INSERT with an IntegrityError, which is reported as ConflictError.

Errors:
    SQLAlchemy failures other than the uniqueness violation are wrapped in
    DatabaseError (→ 500) with the driver error kept in the log only.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mobile_api.exceptions import ConflictError, DatabaseError, NotFoundError
from mobile_api.models.account import Account

logger = logging.getLogger(__name__)


class AccountRepository:
    """Credential store backed by the `accounts` table."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Exact (case-sensitive) match on email."""
        return await self._first(select(Account).where(Account.email == email))

    async def find_by_email_or_identifier(self, value: str) -> Optional[Account]:
        """
        Exact match on email, or on the optional legacy phone column.

        Email matches take precedence when a value matches one account's
        email and another account's phone.
        """
        query = (
            select(Account)
            .where(or_(Account.email == value, Account.phone == value))
            .order_by((Account.email == value).desc())
            .limit(1)
        )
        return await self._first(query)

    async def insert(self, account: Account) -> Account:
        """
        Persist a new account.

        Raises:
            ConflictError: an account with the same email already exists
            DatabaseError: any other storage failure
        """
        self._session.add(account)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            logger.info("Insert rejected by uq_accounts_email")
            raise ConflictError()
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error("Database error inserting account: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "insert_account"})

        logger.info("Account created: %s", account.id)
        return account

    async def update_password_hash(self, account_id: uuid.UUID, new_hash: str) -> Account:
        """
        Replace the stored password hash of account_id.

        Raises:
            NotFoundError: no account has this id
            DatabaseError: storage failure
        """
        try:
            account = await self._session.get(Account, account_id)
            if account is None:
                raise NotFoundError(resource="account", resource_id=str(account_id))

            account.password_hash = new_hash
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating password hash: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "update_password_hash"})

        logger.info("Password hash replaced for account %s", account_id)
        return account

    async def _first(self, query) -> Optional[Account]:
        try:
            result = await self._session.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error looking up account: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "find_account"})
