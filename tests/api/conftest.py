"""Pytest fixtures for API tests.

Each test gets a fresh SQLite database seeded with an admin, a regular
user and two videos (one of them liked by the regular user). FastAPI's
session, settings and password-service dependencies are overridden so
the app never touches the configured database.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from vidshare.presentation.api.app import API_V1_PREFIX, create_app
from vidshare.presentation.api.config import get_api_settings
from vidshare.presentation.api.dependencies import (
    get_db_session,
    get_password_service,
)
from vidshare_auth import PasswordHashingService
from vidshare_config.settings import Settings
from tests.shared.fixtures.database import (
    TEST_BCRYPT_ROUNDS,
    TEST_UNRATED_VIDEO_ID,
    TEST_VIDEO_ID,
    drop_schema,
    make_rate_model,
    make_user_model,
    make_video_model,
    reset_schema,
    run_sync,
    sqlite_engine,
)
from tests.shared.fixtures.users import (
    ADMIN_EMAIL,
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    USER_EMAIL,
    USER_PASSWORD,
    USER_USERNAME,
    bearer,
    obtain_tokens,
)

__all__ = ["sqlite_engine"]


@dataclass
class SeededData:
    """IDs assigned to the seeded rows."""

    admin_id: int = 0
    user_id: int = 0
    user_count: int = 2


def _seed_database(engine) -> SeededData:
    seeded = SeededData()
    password_service = PasswordHashingService(rounds=TEST_BCRYPT_ROUNDS)
    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)

    async def _setup():
        await reset_schema(engine)

        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            admin = make_user_model(
                ADMIN_USERNAME,
                ADMIN_EMAIL,
                password_service.hash(ADMIN_PASSWORD),
                role="admin",
                created_at=base_time,
            )
            user = make_user_model(
                USER_USERNAME,
                USER_EMAIL,
                password_service.hash(USER_PASSWORD),
                created_at=base_time + timedelta(days=1),
            )
            session.add_all([admin, user])
            session.add_all(
                [
                    make_video_model(TEST_VIDEO_ID, "Rated video"),
                    make_video_model(TEST_UNRATED_VIDEO_ID, "Unrated video"),
                ],
            )
            await session.flush()
            session.add(make_rate_model(user.id, TEST_VIDEO_ID, "like"))
            await session.commit()

            seeded.admin_id = admin.id
            seeded.user_id = user.id

    run_sync(_setup())
    return seeded


def _build_client(settings: Settings, engine) -> TestClient:
    app = create_app(settings=settings)

    test_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: settings
    app.dependency_overrides[get_password_service] = lambda: PasswordHashingService(
        rounds=TEST_BCRYPT_ROUNDS,
    )

    return TestClient(app)


def _make_settings(signup_enabled: bool) -> Settings:
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        database_dsn="sqlite+aiosqlite:///:memory:",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        signup_enabled=signup_enabled,
    )


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def users_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/users"


@pytest.fixture
def api_settings() -> Settings:
    """Test settings with self-registration enabled."""
    return _make_settings(signup_enabled=True)


@pytest.fixture
def seeded(sqlite_engine) -> SeededData:
    data = _seed_database(sqlite_engine)
    yield data
    run_sync(drop_schema(sqlite_engine))


@pytest.fixture
def test_client(api_settings, sqlite_engine, seeded) -> TestClient:
    return _build_client(api_settings, sqlite_engine)


@pytest.fixture
def signup_disabled_client(sqlite_engine, seeded) -> TestClient:
    return _build_client(_make_settings(signup_enabled=False), sqlite_engine)


@pytest.fixture
def admin_headers(test_client, users_url) -> dict:
    tokens = obtain_tokens(test_client, users_url, ADMIN_USERNAME, ADMIN_PASSWORD)
    return bearer(tokens["access_token"])


@pytest.fixture
def user_headers(test_client, users_url) -> dict:
    tokens = obtain_tokens(test_client, users_url, USER_USERNAME, USER_PASSWORD)
    return bearer(tokens["access_token"])
