"""Unit tests for PasswordHashingService."""

from notedesk_identity import PasswordHashingService


class TestPasswordHashingService:
    def setup_method(self):
        self.service = PasswordHashingService(rounds=4)

    def test_default_work_factor_is_ten(self):
        service = PasswordHashingService()

        assert service.rounds == 10
        assert service.hash("secret").startswith("$2b$10$")

    def test_hash_is_not_plaintext(self):
        hashed = self.service.hash("hunter2")

        assert hashed != "hunter2"
        assert hashed.startswith("$2b$04$")

    def test_hashes_are_salted(self):
        assert self.service.hash("hunter2") != self.service.hash("hunter2")

    def test_verify_matching_password(self):
        hashed = self.service.hash("hunter2")

        assert self.service.verify("hunter2", hashed) is True

    def test_verify_wrong_password(self):
        hashed = self.service.hash("hunter2")

        assert self.service.verify("hunter3", hashed) is False

    def test_verify_malformed_hash_returns_false(self):
        assert self.service.verify("hunter2", "not-a-bcrypt-hash") is False

    def test_unicode_password_roundtrip(self):
        hashed = self.service.hash("pässwörd")

        assert self.service.verify("pässwörd", hashed) is True
