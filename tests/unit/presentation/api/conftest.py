"""Fixtures for gate unit tests."""

from unittest.mock import AsyncMock

import pytest
from pydantic import SecretStr
from starlette.requests import Request

from vidshare.presentation.api.gates import RequestContext
from vidshare_auth import JWTService
from vidshare_config.settings import Settings
from tests.shared.fixtures.requests import make_request

TEST_SECRET = "gate-test-secret"


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET)


@pytest.fixture
def make_context(jwt_service):
    """Factory for a RequestContext with mocked repositories."""

    def _make(request: Request | None = None, signup_enabled: bool = False):
        settings = Settings(
            jwt_secret_key=SecretStr(TEST_SECRET),
            signup_enabled=signup_enabled,
        )
        return RequestContext(
            request=request or make_request(),
            settings=settings,
            jwt_service=jwt_service,
            users=AsyncMock(),
            videos=AsyncMock(),
        )

    return _make
