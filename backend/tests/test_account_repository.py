"""
Mobile API Backend — Account Repository Tests
==============================================

What:  Credential store behavior against a real SQLite database (aiosqlite),
       plus fault injection with a mock session.

What we test:
    ✅ Insert + lookup by email / phone, email wins over phone
    ✅ Duplicate email rejected by the unique index → ConflictError
    ✅ Concurrent registrations of one email → exactly one stored row
    ✅ Password hash update, unknown id → NotFoundError
    ✅ Driver failures wrapped in DatabaseError
"""

import asyncio
import uuid

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from mobile_api.exceptions import ConflictError, DatabaseError, NotFoundError
from mobile_api.models.account import Account
from mobile_api.repositories.account_repository import AccountRepository
from mobile_api.services.account_service import AccountService


def make_account(email="ana@x.com", phone=None, password_hash="$2b$04$placeholder"):
    return Account(
        first_name="Ana",
        last_name="Lee",
        email=email,
        phone=phone,
        password_hash=password_hash,
    )


class TestLookup:

    @pytest.mark.asyncio
    async def test_insert_then_find_by_email(self, db_session):
        repo = AccountRepository(db_session)
        created = await repo.insert(make_account())

        found = await repo.find_by_email("ana@x.com")
        assert found is not None
        assert found.id == created.id
        assert isinstance(found.id, uuid.UUID)

    @pytest.mark.asyncio
    async def test_email_lookup_is_case_sensitive(self, db_session):
        repo = AccountRepository(db_session)
        await repo.insert(make_account())
        assert await repo.find_by_email("ANA@x.com") is None

    @pytest.mark.asyncio
    async def test_find_by_phone(self, db_session):
        repo = AccountRepository(db_session)
        await repo.insert(make_account(phone="5551234"))

        found = await repo.find_by_email_or_identifier("5551234")
        assert found is not None
        assert found.email == "ana@x.com"

    @pytest.mark.asyncio
    async def test_email_match_preferred_over_phone_match(self, db_session):
        repo = AccountRepository(db_session)
        # Second account's phone is literally the first account's email
        await repo.insert(make_account(email="other@x.com", phone="ana@x.com"))
        await repo.insert(make_account(email="ana@x.com"))

        found = await repo.find_by_email_or_identifier("ana@x.com")
        assert found.email == "ana@x.com"

    @pytest.mark.asyncio
    async def test_unknown_identifier(self, db_session):
        repo = AccountRepository(db_session)
        assert await repo.find_by_email_or_identifier("nobody@x.com") is None


class TestUniqueness:

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_conflict(self, session_factory):
        async with session_factory() as session:
            await AccountRepository(session).insert(make_account())
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(ConflictError):
                await AccountRepository(session).insert(make_account())

    @pytest.mark.asyncio
    async def test_concurrent_registrations_store_one_account(
        self, session_factory, hasher, token_issuer
    ):
        attempts = 5

        async def register():
            async with session_factory() as session:
                service = AccountService(AccountRepository(session), hasher, token_issuer)
                try:
                    await service.register("ana@x.com", "pw123", "Ana", "Lee")
                    await session.commit()
                    return "created"
                except ConflictError:
                    return "conflict"

        outcomes = await asyncio.gather(*(register() for _ in range(attempts)))

        assert outcomes.count("created") == 1
        assert outcomes.count("conflict") == attempts - 1

        async with session_factory() as session:
            count = await session.scalar(
                select(func.count()).select_from(Account).where(Account.email == "ana@x.com")
            )
        assert count == 1


class TestUpdatePasswordHash:

    @pytest.mark.asyncio
    async def test_replaces_hash(self, db_session):
        repo = AccountRepository(db_session)
        account = await repo.insert(make_account(password_hash="old"))

        await repo.update_password_hash(account.id, "new")

        found = await repo.find_by_email("ana@x.com")
        assert found.password_hash == "new"

    @pytest.mark.asyncio
    async def test_unknown_id_raises_not_found(self, db_session):
        repo = AccountRepository(db_session)
        with pytest.raises(NotFoundError):
            await repo.update_password_hash(uuid.uuid4(), "new")


class TestDatabaseFailures:

    @pytest.mark.asyncio
    async def test_lookup_failure_wrapped(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
        repo = AccountRepository(mock_db_session)

        with pytest.raises(DatabaseError):
            await repo.find_by_email("ana@x.com")

    @pytest.mark.asyncio
    async def test_insert_failure_wrapped_and_rolled_back(self, mock_db_session):
        mock_db_session.flush.side_effect = OperationalError("INSERT", {}, Exception("down"))
        repo = AccountRepository(mock_db_session)

        with pytest.raises(DatabaseError):
            await repo.insert(make_account())
        mock_db_session.rollback.assert_awaited_once()
