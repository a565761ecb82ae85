"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "sqlite+pysqlite://",
)

# HMAC algorithms only: one shared secret signs and verifies.
VALID_JWT_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})

DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # Routes are served at the root by default (/register, /categories, ...)
    API_PREFIX: str = ""

    # SQLite only: the products -> categories foreign key relies on SQLite not enforcing it.
    # "sqlite://" is a process-local in-memory database, rebuilt and reseeded on every start.
    DATABASE_URL: str = "sqlite://"

    # JWT authentication. Tokens carry username + role and do not expire unless
    # JWT_EXPIRE_MINUTES is set.
    JWT_SECRET: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int | None = None

    # Bcrypt cost (rounds)
    BCRYPT_ROUNDS: int = 10

    # Bootstrap admin account (username "admin"). Known default credential: change it.
    SEED_ADMIN: bool = True
    ADMIN_DEFAULT_PASSWORD: SecretStr = SecretStr("admin")

    # When True, missing ids on get/update/delete answer 404 instead of a 200 message payload.
    STRICT_NOT_FOUND: bool = False

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("API_PREFIX must be empty or start with '/' (e.g. /api)")
        return v

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite URL (e.g. sqlite:// or sqlite:///./catalog.db)"
            )
        return v.strip()

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        v = v.strip().upper()
        if v not in VALID_JWT_ALGORITHMS:
            raise ValueError(
                f"JWT_ALGORITHM must be one of {sorted(VALID_JWT_ALGORITHMS)}, got {v!r}"
            )
        return v

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int | None) -> int | None:
        if v is None:
            return None
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("ADMIN_DEFAULT_PASSWORD")
    @classmethod
    def validate_admin_password(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("ADMIN_DEFAULT_PASSWORD must be non-empty")
        return v

    @property
    def uses_default_jwt_secret(self) -> bool:
        return self.JWT_SECRET.get_secret_value() == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
