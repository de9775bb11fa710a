"""Request admission pipeline.

A gate is an ordered sequence of async checks run before a route handler.
Every check receives the shared ``RequestContext`` and either returns
``None`` (continue, possibly after enriching the context) or a
``Rejection`` that terminates the request. The runner stops at the first
rejection, so later checks never see a request an earlier one refused.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from fastapi import Request, status
from pydantic import BaseModel

from vidshare.domain.shared.exceptions import ErrorCode
from vidshare.domain.user import UserRepository, UserRole
from vidshare_auth import JWTService
from vidshare_config.settings import Settings

if TYPE_CHECKING:
    from vidshare.domain.video import VideoRepository
    from vidshare.presentation.api.gates.listing import ListQuery

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """Identity attached to a request once authentication succeeded."""

    id: int
    username: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class Rejection:
    """Terminal response produced by a failing check."""

    status_code: int
    detail: str
    code: ErrorCode
    errors: list[dict[str, str]] = field(default_factory=list)
    media_type: str = JSON_MEDIA_TYPE
    headers: dict[str, str] | None = None

    @classmethod
    def bad_request(
        cls,
        detail: str,
        errors: list[dict[str, str]] | None = None,
    ) -> Rejection:
        return cls(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            code=ErrorCode.VALIDATION_ERROR,
            errors=errors or [],
        )


class GateRejectedError(Exception):
    """Raised by the FastAPI gate dependency to hand a rejection to the
    exception handlers."""

    def __init__(self, rejection: Rejection) -> None:
        self.rejection = rejection
        super().__init__(rejection.detail)


@dataclass
class RequestContext:
    """Per-request state shared by the checks of a gate and its handler."""

    request: Request
    settings: Settings
    jwt_service: JWTService
    users: UserRepository
    videos: VideoRepository
    principal: AuthenticatedPrincipal | None = None
    body: BaseModel | None = None
    path: dict[str, Any] = field(default_factory=dict)
    list_query: ListQuery | None = None


Check = Callable[[RequestContext], Awaitable[Rejection | None]]


class GatePipeline:
    """Run checks in order, stopping at the first rejection."""

    def __init__(self, *checks: Check) -> None:
        self._checks = checks

    @property
    def names(self) -> list[str]:
        return [check.__name__ for check in self._checks]

    async def run(self, ctx: RequestContext) -> Rejection | None:
        for check in self._checks:
            rejection = await check(ctx)
            if rejection is not None:
                logger.debug(
                    "Gate check %s rejected %s %s with %s",
                    check.__name__,
                    ctx.request.method,
                    ctx.request.url.path,
                    rejection.status_code,
                )
                return rejection
        return None
