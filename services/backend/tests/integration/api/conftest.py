"""Pytest fixtures for API integration tests."""

from datetime import date

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from kasboek.domain.recurring.value_objects import DetectionConfig, TransactionType
from kasboek.presentation.api.app import API_V1_PREFIX, create_app
from kasboek.presentation.api.config import get_detection_config
from kasboek.presentation.api.dependencies import get_db_session, get_today
from kasboek_config.settings import Settings
from tests.shared.fixtures.database import transaction_models
from tests.shared.fixtures.factories import (
    TestAccountFactory,
    TestTransactionFactory,
    fixed_today,
)


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def patterns_url(api_v1_prefix) -> str:
    """Recurring patterns collection of the checking account."""
    return f"{api_v1_prefix}/accounts/{TestAccountFactory.CHECKING_ID}/recurring-patterns"


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        postgres_password=SecretStr("test-password"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
    )


@pytest.fixture
async def seeded_history(test_session_maker):
    """Twelve months of Netflix, eight weekly cleaner payments and six salaries."""
    history = [
        *TestTransactionFactory.monthly(count=12),
        *TestTransactionFactory.weekly_cleaner(count=8),
        *TestTransactionFactory.monthly(
            count=6,
            last=date(2024, 5, 25),
            description="Salaris Acme BV",
            amount=320000,
            transaction_type=TransactionType.CREDIT,
        ),
        TestTransactionFactory.transaction(description="Bakker de Vries"),
    ]
    async with test_session_maker() as session:
        session.add_all(transaction_models(history))
        await session.commit()
    return history


@pytest.fixture
def test_client(api_settings, test_session_maker) -> TestClient:
    """Create a test client with an in-memory database and a fixed clock."""
    app = create_app(settings=api_settings)

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_today] = lambda: fixed_today
    app.dependency_overrides[get_detection_config] = lambda: DetectionConfig()

    return TestClient(app, raise_server_exceptions=False)
