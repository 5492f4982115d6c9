"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, PostgresDsn, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Character diversity required of the JWT secret in production
MIN_SECRET_UNIQUE_CHARS = 16

SECRET_HINT = 'generate one with: python -c "import secrets;print(secrets.token_urlsafe(48))"'


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Settings read from environment variables and an optional ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Roster API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Record store; no default so a deployment cannot silently use a local database
    database_url: PostgresDsn
    database_pool_size: int = 5
    database_max_overflow: int = 10
    auto_create_tables: bool = True

    # Token signing; startup fails without a secret
    jwt_secret: str = Field(min_length=32)
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = Field(default=3, gt=0)

    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Restrict get/update/delete by id to the owning admin
    enforce_employee_ownership: bool = False

    cors_origins: str = "http://localhost:3000"
    trusted_proxies: str = ""

    # Requests per minute per client IP
    rate_limit_enabled: bool = True
    rate_limit_auth_login: int = 5
    rate_limit_auth_register: int = 10

    @field_validator("database_url")
    @classmethod
    def require_postgres(cls, value: PostgresDsn) -> PostgresDsn:
        """Only plain PostgreSQL URLs; the asyncpg driver is added internally."""
        if not str(value).startswith(("postgresql://", "postgres://")):
            raise ValueError("DATABASE_URL must start with 'postgresql://' or 'postgres://'")
        return value

    @field_validator("cors_origins")
    @classmethod
    def reject_wildcard_origin(cls, value: str) -> str:
        """Credentials are allowed cross-origin, so origins must be explicit."""
        if "*" in _split_csv(value):
            raise ValueError("CORS_ORIGINS must list explicit origins, not '*'")
        return value

    @model_validator(mode="after")
    def check_production(self) -> "Settings":
        """Refuse debug mode and weak signing secrets in production."""
        if self.environment != "production":
            return self
        if self.debug:
            raise ValueError("DEBUG must be off in production")
        if len(set(self.jwt_secret)) < MIN_SECRET_UNIQUE_CHARS:
            raise ValueError(
                f"JWT_SECRET needs at least {MIN_SECRET_UNIQUE_CHARS} distinct characters; "
                f"{SECRET_HINT}"
            )
        return self

    @property
    def async_database_url(self) -> str:
        """Database URL for SQLAlchemy's asyncpg dialect.

        asyncpg takes ``ssl`` where libpq URLs use ``sslmode``.
        """
        _, rest = str(self.database_url).split("://", 1)
        return f"postgresql+asyncpg://{rest}".replace("sslmode=", "ssl=")

    @property
    def cors_origins_list(self) -> list[str]:
        return _split_csv(self.cors_origins)

    @property
    def trusted_proxies_list(self) -> list[str]:
        return _split_csv(self.trusted_proxies)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
