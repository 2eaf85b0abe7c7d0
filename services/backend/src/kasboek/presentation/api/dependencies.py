"""FastAPI dependencies.

A request gets one AsyncSession from the shared engine. Routers build
their commands and queries from a repository factory bound to that
session and commit or roll back themselves.
"""

import logging
from datetime import date
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from kasboek.domain.recurring.value_objects import DetectionConfig
from kasboek.domain.shared.time import today_utc
from kasboek.infrastructure.persistence.sqlalchemy.engine import build_engine
from kasboek.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from kasboek.presentation.api.config import get_detection_config
from kasboek_config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Engine shared by all requests."""
    settings = get_settings()
    logger.debug("Creating %s engine", settings.database_type)
    return build_engine(settings.database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session)


def get_today() -> Callable[[], date]:
    """Clock used for detection windows and due dates."""
    return today_utc


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
Detection = Annotated[DetectionConfig, Depends(get_detection_config)]
Today = Annotated[Callable[[], date], Depends(get_today)]
