"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. DATABASE_URL is validated at load time when the
postgres backend is selected.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. With database_backend "none"
    the order/work endpoints answer 503; requirement and flag endpoints
    still work.
    """

    # App
    app_name: str = "goldworks"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: "postgres" (SQLAlchemy + Alembic) or "none"
    database_backend: str = "none"
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:5173"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    actor_header_name: str = "X-Actor-ID"

    # Work sessions
    autosave_interval_seconds: float = Field(default=120.0, gt=0)

    # Department flags: department key (or legacy id) -> enabled.
    # Departments not listed are enabled, except PRINT which defaults to disabled.
    department_flag_defaults: dict[str, bool] = Field(default_factory=dict)
    feature_flag_key: str = "goldworks:department-flags"

    # Redis (feature flag store)
    redis_enabled: bool = True
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database(self) -> "Settings":
        """Validate database backend.

        - Postgres: DATABASE_URL required.
        - None: order persistence disabled.
        """
        if self.database_backend == "postgres":
            if not self.database_url:
                raise ValueError(
                    "DATABASE_URL is required when database_backend is 'postgres'. "
                    "Set in environment or .env file."
                )
        elif self.database_backend != "none":
            raise ValueError(
                f"database_backend must be 'postgres' or 'none', got: {self.database_backend!r}"
            )
        return self

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
