"""Integration test configuration and fixtures.

Every test gets a fresh in-memory SQLite database with the two standard
test accounts already present.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from kasboek.infrastructure.persistence.sqlalchemy.engine import build_engine
from kasboek.infrastructure.persistence.sqlalchemy.init_db import create_tables
from tests.shared.fixtures.database import TEST_DATABASE_URL, account_model
from tests.shared.fixtures.factories import TestAccountFactory


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database with the test accounts."""
    engine = build_engine(TEST_DATABASE_URL)
    await create_tables(engine)

    session_maker = async_sessionmaker(engine, expire_on_commit=False)
    async with session_maker() as session:
        session.add_all(
            [
                account_model(TestAccountFactory.CHECKING_ID),
                account_model(TestAccountFactory.SAVINGS_ID, name="Spaarrekening"),
            ],
        )
        await session.commit()

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def test_db_session(test_session_maker):
    """Create a test database session."""
    async with test_session_maker() as session:
        yield session
