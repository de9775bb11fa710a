"""FastAPI dependency injection for the VidShare API.

Provides dependencies for:
- Database sessions
- Authentication services
- Request gates (ordered admission checks run before a handler)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from vidshare.infrastructure.persistence.sqlalchemy.models.base import Base
from vidshare.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    VideoRepositorySQLAlchemy,
)
from vidshare.presentation.api.config import get_api_settings
from vidshare.presentation.api.gates.pipeline import (
    Check,
    GatePipeline,
    GateRejectedError,
    RequestContext,
)
from vidshare_auth import JWTService, PasswordHashingService, TokenGrantService
from vidshare_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite"):
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request; every repository used while serving the
    request shares it, so the handler's commit covers all of their writes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables() -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    """
    engine = get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_token_grant_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordService,
) -> TokenGrantService:
    """Get the token endpoint service backed by the credential store."""
    return TokenGrantService(
        credential_repository=UserCredentialRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


GrantService = Annotated[TokenGrantService, Depends(get_token_grant_service)]


# -----------------------------------------------------------------------------
# Request Gates
# -----------------------------------------------------------------------------


def gate(*checks: Check):
    """
    Build a dependency that runs ``checks`` in order before the handler.

    The first check to reject ends the request: the rejection is raised as
    ``GateRejectedError`` and rendered by the exception handlers. When every
    check passes, the handler receives the populated ``RequestContext``.

    Examples
    --------
    >>> @router.get("/me")
    ... async def me(ctx: Annotated[RequestContext, gate(authenticate)]): ...
    """
    pipeline = GatePipeline(*checks)

    async def run_gate(
        request: Request,
        session: DBSession,
        settings: SettingsDep,
        jwt_service: JWTServiceDep,
    ) -> RequestContext:
        ctx = RequestContext(
            request=request,
            settings=settings,
            jwt_service=jwt_service,
            users=UserRepositorySQLAlchemy(session),
            videos=VideoRepositorySQLAlchemy(session),
        )
        rejection = await pipeline.run(ctx)
        if rejection is not None:
            raise GateRejectedError(rejection)
        return ctx

    run_gate.__name__ = "gate_" + "_".join(pipeline.names)
    return Depends(run_gate)
