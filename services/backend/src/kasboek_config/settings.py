"""Kasboek settings, read from the environment and optional .env files.

Sources, highest priority first:

1. process environment
2. the file named by ``KASBOEK_ENV_FILE``
3. ``config/.env.dev``
4. ``config/.env``
5. field defaults
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kasboek.domain.recurring.value_objects import DetectionConfig

_SRC_DIR = Path(__file__).resolve().parent


def _project_root() -> Path:
    for candidate in _SRC_DIR.parents:
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
    # services/backend/src/kasboek_config -> repository root
    return _SRC_DIR.parents[3]


def get_config_dir() -> Path:
    """Directory holding the .env files."""
    return _project_root() / "config"


def _env_files() -> tuple[Path, ...]:
    """Existing .env files, lowest priority first."""
    config_dir = get_config_dir()
    candidates = [config_dir / ".env", config_dir / ".env.dev"]

    override = os.environ.get("KASBOEK_ENV_FILE")
    if override:
        path = Path(override)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    return tuple(path for path in candidates if path.is_file())


class Settings(BaseSettings):
    """Flat settings object; field names double as environment variable names."""

    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Kasboek"
    debug: bool = False
    log_level: str = "INFO"

    # POSTGRES_*, ignored when DATABASE_URL_OVERRIDE is set
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "kasboek"
    database_url_override: str | None = None

    # API_*
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""

    # RECURRING_*, see DetectionConfig
    recurring_min_confidence: float = 0.70
    recurring_min_consistency: float = 0.6
    recurring_lookback_months: int = 36
    recurring_recent_months: int = 12
    recurring_gap_threshold_multiplier: int = 3
    recurring_gap_penalty: float = 0.5
    recurring_max_missed_intervals: int = 2
    recurring_min_transactions: int = 3
    recurring_max_group_size: int = 500
    recurring_similarity_threshold: float = 0.85
    recurring_weight_occurrence: float = 0.30
    recurring_weight_interval: float = 0.40
    recurring_weight_amount: float = 0.30

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL."""
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
        return [origin.strip() for origin in self.api_cors_origins.split(",") if origin.strip()]

    @property
    def database_type(self) -> str:
        return "sqlite" if self.database_url.startswith("sqlite") else "postgresql"

    def detection_config(self) -> DetectionConfig:
        """Build the detection thresholds from the RECURRING_ settings.

        Raises InvalidDetectionConfigError when the values are inconsistent.
        """
        prefix = "recurring_"
        values = {
            name[len(prefix):]: value
            for name, value in self.model_dump().items()
            if name.startswith(prefix)
        }
        return DetectionConfig(**values)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
