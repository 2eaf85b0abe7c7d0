"""Root pytest configuration.

Layout:
    unit/          domain, application and presentation tests with mocked repositories
    integration/   repositories and HTTP endpoints against in-memory SQLite
    shared/        factories and database helpers

Values from ``config/.env.dev`` (or ``config/.env``) are loaded before the
settings are first read.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from kasboek_config import clear_settings_cache

CONFIG_DIR = Path(__file__).resolve().parents[3] / "config"

for env_file in (CONFIG_DIR / ".env.dev", CONFIG_DIR / ".env"):
    if env_file.exists():
        load_dotenv(env_file)
        break


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with freshly read settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
