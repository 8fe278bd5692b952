"""
Mobile API Backend — Account Service Unit Tests
================================================

What:  Registration, login and password reset against a real SQLite store.

What we test:
    ✅ Register then Login with the same credentials → token for that account
    ✅ Register twice → ConflictError
    ✅ Wrong password → AuthenticationError; unknown email → NotFoundError
    ✅ ResetPassword: old password stops working, new one works
    ✅ Missing fields → ValidationError before touching the store
    ✅ Stored hashes are never the plaintext
"""

import pytest

from mobile_api.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from mobile_api.models.account import Account
from mobile_api.repositories.account_repository import AccountRepository
from mobile_api.services.account_service import AccountService


class TestRegister:

    @pytest.mark.asyncio
    async def test_register_creates_account(self, account_service, db_session):
        result = await account_service.register("ana@x.com", "pw123", "Ana", "Lee")
        assert result.message == "User registered successfully"

        stored = await AccountRepository(db_session).find_by_email("ana@x.com")
        assert stored.first_name == "Ana"
        assert stored.last_name == "Lee"
        assert stored.password_hash != "pw123"
        assert "pw123" not in stored.password_hash

    @pytest.mark.asyncio
    async def test_register_same_email_twice_conflicts(self, account_service):
        await account_service.register("ana@x.com", "pw123", "Ana", "Lee")
        with pytest.raises(ConflictError, match="User already exists"):
            await account_service.register("ana@x.com", "other", "Ann", "Lee")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password,first_name,last_name",
        [
            (None, "pw123", "Ana", "Lee"),
            ("ana@x.com", None, "Ana", "Lee"),
            ("ana@x.com", "pw123", "", "Lee"),
            ("ana@x.com", "pw123", "Ana", "   "),
            ("ana@x.com", "", "Ana", "Lee"),
        ],
    )
    async def test_register_missing_field(
        self, account_service, db_session, email, password, first_name, last_name
    ):
        with pytest.raises(ValidationError):
            await account_service.register(email, password, first_name, last_name)
        assert await AccountRepository(db_session).find_by_email("ana@x.com") is None

    @pytest.mark.asyncio
    async def test_register_oversized_password(self, account_service):
        with pytest.raises(ValidationError) as exc_info:
            await account_service.register("ana@x.com", "x" * 100, "Ana", "Lee")
        assert exc_info.value.field == "password"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,first_name,field",
        [
            ("ana@x.com", "A" * 101, "firstName"),
            ("a" * 250 + "@x.com", "Ana", "email"),
        ],
    )
    async def test_register_value_longer_than_column(
        self, account_service, db_session, email, first_name, field
    ):
        with pytest.raises(ValidationError, match="at most") as exc_info:
            await account_service.register(email, "pw123", first_name, "Lee")
        assert exc_info.value.field == field
        assert await AccountRepository(db_session).find_by_email(email) is None


class TestLogin:

    @pytest.mark.asyncio
    async def test_login_after_register(self, account_service, token_issuer, db_session):
        await account_service.register("ana@x.com", "pw123", "Ana", "Lee")

        result = await account_service.login("ana@x.com", "pw123")

        stored = await AccountRepository(db_session).find_by_email("ana@x.com")
        assert result.message == "Login successful"
        assert token_issuer.verify(result.token) == stored.id
        assert result.user.first_name == "Ana"
        assert result.user.last_name == "Lee"
        assert result.user.email == "ana@x.com"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, account_service):
        await account_service.register("ana@x.com", "pw123", "Ana", "Lee")
        with pytest.raises(AuthenticationError, match="Invalid credentials."):
            await account_service.login("ana@x.com", "wrong")

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, account_service):
        with pytest.raises(NotFoundError, match="User not found."):
            await account_service.login("nobody@x.com", "pw123")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier,password", [(None, "pw"), ("ana@x.com", None), ("", "")])
    async def test_login_missing_field(self, account_service, identifier, password):
        with pytest.raises(ValidationError, match="Email/Phone and Password are required."):
            await account_service.login(identifier, password)

    @pytest.mark.asyncio
    async def test_login_by_phone(self, db_session, hasher, token_issuer):
        db_session.add(Account(
            first_name="Ana",
            last_name="Lee",
            email="ana@x.com",
            phone="5551234",
            password_hash=hasher.hash("pw123"),
        ))
        await db_session.flush()
        service = AccountService(AccountRepository(db_session), hasher, token_issuer)

        result = await service.login("5551234", "pw123")
        assert result.user.email == "ana@x.com"

    @pytest.mark.asyncio
    async def test_corrupt_stored_hash_never_authenticates(self, db_session, hasher, token_issuer):
        db_session.add(Account(
            first_name="Ana",
            last_name="Lee",
            email="ana@x.com",
            password_hash="corrupted",
        ))
        await db_session.flush()
        service = AccountService(AccountRepository(db_session), hasher, token_issuer)

        with pytest.raises(AuthenticationError):
            await service.login("ana@x.com", "corrupted")


class TestResetPassword:

    @pytest.mark.asyncio
    async def test_reset_replaces_password(self, account_service):
        await account_service.register("ana@x.com", "pw123", "Ana", "Lee")

        result = await account_service.reset_password("ana@x.com", "newpw")
        assert result.message == "Password updated successfully"

        with pytest.raises(AuthenticationError):
            await account_service.login("ana@x.com", "pw123")
        assert (await account_service.login("ana@x.com", "newpw")).token

    @pytest.mark.asyncio
    async def test_reset_to_same_password_changes_hash(self, account_service, db_session):
        await account_service.register("ana@x.com", "pw123", "Ana", "Lee")
        before = (await AccountRepository(db_session).find_by_email("ana@x.com")).password_hash

        await account_service.reset_password("ana@x.com", "pw123")

        after = (await AccountRepository(db_session).find_by_email("ana@x.com")).password_hash
        assert before != after
        assert (await account_service.login("ana@x.com", "pw123")).token

    @pytest.mark.asyncio
    async def test_reset_unknown_email(self, account_service):
        with pytest.raises(NotFoundError, match="User not found"):
            await account_service.reset_password("nobody@x.com", "newpw")

    @pytest.mark.asyncio
    async def test_reset_missing_field(self, account_service):
        with pytest.raises(ValidationError, match="Email and new password are required."):
            await account_service.reset_password("ana@x.com", "")
