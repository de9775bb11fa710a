"""Authentication and authorization checks."""

import logging

from fastapi import status
from fastapi.security.utils import get_authorization_scheme_param

from vidshare.domain.shared.exceptions import ErrorCode
from vidshare.presentation.api.gates.pipeline import (
    AuthenticatedPrincipal,
    Rejection,
    RequestContext,
)
from vidshare_auth import InvalidTokenError

logger = logging.getLogger(__name__)


def _unauthenticated(detail: str) -> Rejection:
    return Rejection(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        code=ErrorCode.AUTHENTICATION_REQUIRED,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def authenticate(ctx: RequestContext) -> Rejection | None:
    """Resolve the principal from the bearer access token.

    Rejects with 401 when the header is missing, the token does not verify,
    a refresh token is presented, or the token's user no longer exists.
    """
    authorization = ctx.request.headers.get("Authorization")
    scheme, token = get_authorization_scheme_param(authorization)
    if not authorization or scheme.lower() != "bearer" or not token:
        return _unauthenticated("Authentication required")

    try:
        payload = ctx.jwt_service.verify_token(token)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        return _unauthenticated("Invalid or expired token")

    # Refresh tokens are only accepted at the token endpoint
    if not payload.is_access_token():
        logger.warning(
            "Refresh token used as access token for user: %s",
            payload.user_id,
        )
        return _unauthenticated("Invalid token type")

    user = await ctx.users.find_by_id(payload.user_id)
    if user is None or user.id is None:
        logger.warning("User not found for token: %s", payload.user_id)
        return _unauthenticated("User not found")

    ctx.principal = AuthenticatedPrincipal(
        id=user.id,
        username=user.username,
        role=user.role,
    )
    return None


async def ensure_is_admin(ctx: RequestContext) -> Rejection | None:
    """Require an authenticated principal with the admin role."""
    if ctx.principal is None or not ctx.principal.is_admin:
        return Rejection(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
            code=ErrorCode.ADMIN_REQUIRED,
        )
    return None
