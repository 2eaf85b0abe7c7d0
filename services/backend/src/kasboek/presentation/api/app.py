"""FastAPI application factory for the Kasboek API.

Routes:
    /api/v1/accounts/{account_id}/recurring-patterns/...   recurring patterns
    /health                                                liveness, unversioned
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kasboek.infrastructure.persistence.sqlalchemy.init_db import create_tables
from kasboek.presentation.api.dependencies import get_engine
from kasboek.presentation.api.exception_handlers import setup_exception_handlers
from kasboek.presentation.api.routers import recurring_router
from kasboek_config import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Recurring",
        "description": """Recurring payment detection.

**Frequencies:** `weekly`, `biweekly`, `monthly`, `quarterly`, `yearly`

Patterns are created by `POST .../recurring-patterns/detect`. Users can
rename, recategorize and deactivate them. `DELETE` only deactivates;
a pattern disappears only through a forced re-detection.
""",
    },
    {"name": "Health", "description": "Liveness check."},
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and close the pool on shutdown."""
    logger.info("Starting Kasboek API v%s", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Database at %s refused the connection", engine.url.host)
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("Kasboek API stopped, database pool closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(
        recurring_router,
        prefix="/accounts/{account_id}/recurring-patterns",
        tags=["Recurring"],
    )
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    settings
        Settings to use instead of the cached environment settings.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # Interactive docs only in debug mode
    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Ledger backend with **recurring payment detection**.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "version": API_VERSION,
            "database": settings.database_type,
        }

    return app


app = create_app()
