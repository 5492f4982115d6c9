"""Settings tests."""

from typing import Any

import pytest
from pydantic import ValidationError

from roster_api.config import Settings

DB_URL = "postgresql://roster:roster@db:5432/roster"
SECRET = "config-test-secret-abcdefghijklmnopqrstuvwxyz"


def _settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {"database_url": DB_URL, "jwt_secret": SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestSettings:
    """Tests for settings validation."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("BCRYPT_ROUNDS", "RATE_LIMIT_ENABLED", "AUTO_CREATE_TABLES", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
        settings = _settings()
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expiration_hours == 3
        assert settings.bcrypt_rounds == 10
        assert settings.enforce_employee_ownership is False
        assert settings.auto_create_tables is True

    def test_missing_jwt_secret_refused(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None, database_url=DB_URL)

    def test_short_jwt_secret_refused(self) -> None:
        with pytest.raises(ValidationError):
            _settings(jwt_secret="too-short")

    def test_low_entropy_secret_refused_in_production(self) -> None:
        with pytest.raises(ValidationError):
            _settings(environment="production", jwt_secret="a" * 40)

    def test_low_entropy_secret_allowed_in_development(self) -> None:
        assert _settings(environment="development", jwt_secret="a" * 40).jwt_secret == "a" * 40

    def test_debug_refused_in_production(self) -> None:
        with pytest.raises(ValidationError):
            _settings(environment="production", debug=True)

    def test_non_postgres_url_refused(self) -> None:
        with pytest.raises(ValidationError):
            _settings(database_url="mysql://u:p@localhost/db")

    def test_wildcard_cors_refused(self) -> None:
        with pytest.raises(ValidationError):
            _settings(cors_origins="*")

    def test_async_database_url(self) -> None:
        settings = _settings(database_url="postgresql://u:p@db:5432/roster?sslmode=require")
        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5432/roster?ssl=require"

    def test_list_properties(self) -> None:
        settings = _settings(
            cors_origins="http://a.test, http://b.test,",
            trusted_proxies="10.0.0.0/8, 127.0.0.1",
        )
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
        assert settings.trusted_proxies_list == ["10.0.0.0/8", "127.0.0.1"]

    def test_bcrypt_rounds_bounds(self) -> None:
        with pytest.raises(ValidationError):
            _settings(bcrypt_rounds=3)
