"""Password hashing tests."""

import pytest

from roster_api.security.password import PasswordService, get_password_service


@pytest.fixture
def service() -> PasswordService:
    return PasswordService(rounds=4)


class TestPasswordService:
    """Tests for bcrypt hashing and verification."""

    def test_hash_is_not_plaintext(self, service: PasswordService) -> None:
        hashed = service.hash_password("secret1")
        assert hashed != "secret1"
        assert hashed.startswith("$2")

    def test_hash_is_salted(self, service: PasswordService) -> None:
        """Hashing the same password twice gives different outputs."""
        assert service.hash_password("secret1") != service.hash_password("secret1")

    def test_verify_matching_password(self, service: PasswordService) -> None:
        hashed = service.hash_password("secret1")
        assert service.verify_password("secret1", hashed) is True

    def test_verify_wrong_password(self, service: PasswordService) -> None:
        hashed = service.hash_password("secret1")
        assert service.verify_password("secret2", hashed) is False

    def test_verify_malformed_hash_returns_false(self, service: PasswordService) -> None:
        assert service.verify_password("secret1", "not-a-bcrypt-hash") is False

    def test_cost_factor_is_embedded(self) -> None:
        hashed = PasswordService(rounds=5).hash_password("secret1")
        assert hashed.split("$")[2] == "05"

    def test_default_cost_factor(self) -> None:
        assert PasswordService().rounds == 10

    def test_dummy_hash_is_stable_and_unguessable(self, service: PasswordService) -> None:
        assert service.dummy_hash == service.dummy_hash
        assert service.verify_password("", service.dummy_hash) is False

    async def test_async_variants(self, service: PasswordService) -> None:
        hashed = await service.hash_password_async("secret1")
        assert await service.verify_password_async("secret1", hashed) is True
        assert await service.verify_password_async("nope", hashed) is False


def test_singleton_uses_configured_rounds() -> None:
    service = get_password_service()
    assert service is get_password_service()
    assert service.rounds == 4
