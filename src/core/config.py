"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="CV Studio Accounts API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/cvstudio",
        description="PostgreSQL connection URL (asyncpg driver is enforced)",
    )
    db_pool_size: int = Field(
        default=5,
        ge=1,
        description="Upper bound on pooled connections; keep below the host's connection ceiling",
    )
    db_pool_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for a pooled connection before failing",
    )
    db_statement_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait for a statement to complete before failing",
    )
    db_idle_recycle: int = Field(
        default=300,
        description="Seconds after which idle pooled connections are recycled",
    )

    # Authentication
    auth_backend: Literal["session", "jwt"] = Field(
        default="session",
        description="'session' resolves opaque tokens against the session table, "
        "'jwt' validates self-contained HS256 tokens",
    )
    session_cookie_name: str = Field(default="better-auth.session_token")
    jwt_secret_key: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Secret key for JWT signing",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_minutes: int = Field(default=30)

    # Password hashing
    password_hash_rounds: int = Field(
        default=12,
        ge=12,
        le=16,
        description="bcrypt cost factor for new password hashes",
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure the database URL uses the asyncpg driver scheme.

        Heroku and similar providers hand out ``postgres://`` or
        ``postgresql://`` URLs; SQLAlchemy's async engine needs
        ``postgresql+asyncpg://``.
        """
        url = self.database_url
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return url.replace(prefix, "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
