"""
Mobile API Backend — Password Hasher Unit Tests
================================================

What we test:
    ✅ verify(p, hash(p)) is true, wrong password is false
    ✅ Two hashes of the same password differ (fresh salt)
    ✅ Empty / oversized passwords are rejected by hash()
    ✅ Corrupt or missing stored hashes never verify
"""

import pytest

from mobile_api.services.password_hasher import MAX_PASSWORD_BYTES, PasswordHasher


class TestHash:

    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_verifies_against_same_password(self):
        hashed = self.hasher.hash("pw123")
        assert self.hasher.verify("pw123", hashed) is True

    def test_wrong_password_does_not_verify(self):
        hashed = self.hasher.hash("pw123")
        assert self.hasher.verify("pw124", hashed) is False

    def test_same_password_hashes_differently(self):
        first = self.hasher.hash("pw123")
        second = self.hasher.hash("pw123")
        assert first != second
        assert self.hasher.verify("pw123", first)
        assert self.hasher.verify("pw123", second)

    def test_hash_never_contains_plaintext(self):
        hashed = self.hasher.hash("correct horse battery staple")
        assert "correct horse" not in hashed
        assert hashed.startswith("$2")

    def test_hash_embeds_cost_factor(self):
        assert self.hasher.hash("pw123").split("$")[2] == "04"

    def test_non_ascii_password_round_trips(self):
        hashed = self.hasher.hash("pässwörd-密码")
        assert self.hasher.verify("pässwörd-密码", hashed)

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            self.hasher.hash("")

    def test_password_over_limit_rejected(self):
        with pytest.raises(ValueError, match="at most"):
            self.hasher.hash("a" * (MAX_PASSWORD_BYTES + 1))

    def test_password_at_limit_accepted(self):
        password = "a" * MAX_PASSWORD_BYTES
        assert self.hasher.verify(password, self.hasher.hash(password))


class TestVerifyFailsClosed:

    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    @pytest.mark.parametrize("stored", ["", "not-a-bcrypt-hash", "$2b$04$short"])
    def test_corrupt_stored_hash_is_false(self, stored):
        assert self.hasher.verify("pw123", stored) is False

    def test_missing_stored_hash_is_false(self):
        assert self.hasher.verify("pw123", None) is False

    def test_empty_plaintext_is_false(self):
        hashed = self.hasher.hash("pw123")
        assert self.hasher.verify("", hashed) is False

    def test_hash_from_other_cost_still_verifies(self):
        stored = PasswordHasher(rounds=5).hash("pw123")
        assert self.hasher.verify("pw123", stored) is True
