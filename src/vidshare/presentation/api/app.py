"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from vidshare.presentation.api.dependencies import create_tables, get_engine
from vidshare.presentation.api.exception_handlers import setup_exception_handlers
from vidshare.presentation.api.routers import users_router
from vidshare.presentation.api.schemas.common import HealthResponse
from vidshare_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Console output with timestamps and module names, the configured level
    for vidshare modules and WARNING for noisy third-party libraries.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("vidshare").setLevel(log_level)
    logging.getLogger("vidshare_auth").setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User accounts and token issuance.

**Accounts:**
- `GET /users/me` - the authenticated user
- `GET /users` - paginated listing (`start`, `count`, `sort`)
- `POST /users` - admin creates an account
- `POST /users/register` - self-registration (when `SIGNUP_ENABLED`)
- `PUT /users/{id}` - update own password / NSFW preference
- `DELETE /users/{id}` - admin deletes an account

**Tokens:**
- `POST /users/token` - OAuth2 password and refresh-token grants
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting VidShare API v%s...", API_VERSION)
    try:
        await create_tables()
    except (ConnectionRefusedError, OperationalError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down VidShare API...")
    await get_engine().dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User accounts for a **video sharing** platform.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for load balancers."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


# Application instance for uvicorn
app = create_app()
