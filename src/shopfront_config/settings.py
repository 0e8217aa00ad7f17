"""Shopfront settings.

Values come from, highest priority first:

1. process environment variables
2. the file named by ``SHOPFRONT_ENV_FILE`` (relative paths resolve
   against the project root)
3. ``config/.env.dev`` for local development
4. ``config/.env`` for deployments

Only ``JWT_SECRET_KEY`` and ``POSTGRES_PASSWORD`` are required.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "SHOPFRONT_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "config").is_dir() or (parent / "pyproject.toml").is_file():
            return parent
    return here.parents[2]


def _env_file() -> Path | None:
    root = _project_root()

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = root / path
        if path.exists():
            return path

    for name in ENV_FILE_CANDIDATES:
        candidate = root / "config" / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Typed view of the environment.

    Field names map to upper-case variables (``bcrypt_rounds`` is read from
    ``BCRYPT_ROUNDS``). ``DATABASE_URL`` replaces the PostgreSQL URL built
    from the ``POSTGRES_*`` fields.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Secrets
    jwt_secret_key: SecretStr
    jwt_refresh_secret_key: SecretStr | None = None
    postgres_password: SecretStr

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "shopfront"
    database_url_override: str | None = Field(
        default=None,
        validation_alias=AliasChoices("database_url_override", "DATABASE_URL"),
    )

    # HTTP server
    app_name: str = "Shopfront"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False  # exposes /docs and /openapi.json
    api_cors_origins: str = ""
    api_cookie_secure: bool = True
    api_cookie_samesite: Literal["lax", "strict", "none"] = "strict"
    api_cookie_domain: str | None = None

    # Tokens and passwords
    jwt_access_token_expire_hours: int = 96
    jwt_refresh_token_expire_days: int = 7
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def refresh_secret_key(self) -> str:
        """Secret for refresh tokens; the access secret when none is set."""
        secret = self.jwt_refresh_secret_key or self.jwt_secret_key
        return secret.get_secret_value()


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process.

    Raises a pydantic ``ValidationError`` when a required secret is missing.
    """
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
