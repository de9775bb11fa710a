"""Users router: account lifecycle, listing, ratings and token issuance."""

import logging
from typing import Annotated

from fastapi import APIRouter, Form, status

from vidshare.application.commands.users import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from vidshare.application.queries.users import (
    GetUserInformationQuery,
    GetUserVideoRatingQuery,
    ListUsersQuery,
)
from vidshare.domain.user import UserRole
from vidshare.infrastructure.persistence.sqlalchemy.repositories import (
    UserVideoRateRepositorySQLAlchemy,
)
from vidshare.presentation.api.dependencies import (
    DBSession,
    GrantService,
    PasswordService,
    gate,
)
from vidshare.presentation.api.gates import (
    ListQuery,
    RequestContext,
    authenticate,
    ensure_is_admin,
    ensure_registration_enabled,
    pagination_validator,
    set_pagination,
    set_users_sort,
    users_add_validator,
    users_remove_validator,
    users_sort_validator,
    users_update_validator,
    users_video_rating_validator,
)
from vidshare.presentation.api.schemas.auth import TokenResponse
from vidshare.presentation.api.schemas.common import (
    ErrorResponse,
    OAuthErrorResponse,
)
from vidshare.presentation.api.schemas.users import (
    ListEnvelope,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
    VideoRatingResponse,
    format_objects,
)

logger = logging.getLogger(__name__)

router = APIRouter()

UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Not authenticated"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request"}}
FORBIDDEN = {403: {"model": ErrorResponse, "description": "Admin access required"}}


@router.get(
    "/me",
    summary="Get the authenticated user",
    responses={**UNAUTHORIZED},
)
async def get_user_information(
    ctx: Annotated[RequestContext, gate(authenticate)],
) -> UserResponse:
    """Return the full record of the calling user."""
    query = GetUserInformationQuery(ctx.users)
    user = await query.execute(ctx.principal.username)
    return UserResponse.from_domain(user)


@router.get(
    "/me/videos/{videoId}/rating",
    summary="Get the caller's rating of a video",
    responses={
        **UNAUTHORIZED,
        **BAD_REQUEST,
        404: {"model": ErrorResponse, "description": "Video not found"},
    },
)
async def get_user_video_rating(
    ctx: Annotated[
        RequestContext,
        gate(authenticate, users_video_rating_validator),
    ],
    session: DBSession,
) -> VideoRatingResponse:
    """Return ``like``, ``dislike`` or ``none`` when the caller never rated it."""
    query = GetUserVideoRatingQuery(UserVideoRateRepositorySQLAlchemy(session))
    result = await query.execute(ctx.principal.id, ctx.path["video_id"])
    return VideoRatingResponse(video_id=result.video_id, rating=result.rating)


@router.get(
    "",
    summary="List users",
    responses={**BAD_REQUEST},
)
async def list_users(
    ctx: Annotated[
        RequestContext,
        gate(
            pagination_validator,
            users_sort_validator,
            set_users_sort,
            set_pagination,
        ),
    ],
) -> ListEnvelope[UserResponse]:
    """List one page of users with the total number of users.

    Query parameters: ``start`` (default 0), ``count`` (default 15, at most
    100) and ``sort`` (``id``, ``username`` or ``createdAt``, prefix ``-``
    for descending; default ``-createdAt``).
    """
    list_query = ctx.list_query or ListQuery()
    page = await ListUsersQuery(ctx.users).execute(
        start=list_query.start,
        count=list_query.count,
        sort=list_query.sort,
    )
    return format_objects(
        [UserResponse.from_domain(user) for user in page.users],
        page.total,
    )


@router.post(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Create a user (admin)",
    responses={
        **UNAUTHORIZED,
        **BAD_REQUEST,
        **FORBIDDEN,
        409: {"model": ErrorResponse, "description": "User already exists"},
    },
)
async def create_user(
    ctx: Annotated[
        RequestContext,
        gate(authenticate, ensure_is_admin, users_add_validator),
    ],
    session: DBSession,
    password_service: PasswordService,
) -> None:
    """Create a regular account on behalf of an admin."""
    request: UserCreateRequest = ctx.body
    command = CreateUserCommand(ctx.users, password_service)

    try:
        await command.execute(
            username=request.username,
            email=request.email,
            password=request.password,
            role=UserRole.USER,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("Admin %s created user: %s", ctx.principal.username, request.username)


@router.post(
    "/register",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Self-register an account",
    responses={
        400: {
            "description": "Registration disabled (plain text) or invalid request",
        },
        409: {"model": ErrorResponse, "description": "User already exists"},
    },
)
async def register_user(
    ctx: Annotated[
        RequestContext,
        gate(ensure_registration_enabled, users_add_validator),
    ],
    session: DBSession,
    password_service: PasswordService,
) -> None:
    """Register a regular account when self-registration is enabled."""
    request: UserCreateRequest = ctx.body
    command = CreateUserCommand(ctx.users, password_service)

    try:
        await command.execute(
            username=request.username,
            email=request.email,
            password=request.password,
            role=UserRole.USER,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise


@router.put(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update the authenticated user",
    responses={**UNAUTHORIZED, **BAD_REQUEST},
)
async def update_user(
    ctx: Annotated[
        RequestContext,
        gate(authenticate, users_update_validator),
    ],
    session: DBSession,
    password_service: PasswordService,
) -> None:
    """Update the caller's password and/or NSFW preference.

    The path id is format-checked only; the update always applies to the
    authenticated user.
    """
    request: UserUpdateRequest = ctx.body
    command = UpdateUserCommand(ctx.users, password_service)

    try:
        await command.execute(
            username=ctx.principal.username,
            password=request.password,
            display_nsfw=request.display_nsfw,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise


@router.delete(
    "/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user (admin)",
    responses={
        **UNAUTHORIZED,
        **BAD_REQUEST,
        **FORBIDDEN,
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def remove_user(
    ctx: Annotated[
        RequestContext,
        gate(authenticate, ensure_is_admin, users_remove_validator),
    ],
    session: DBSession,
) -> None:
    """Delete the user named by the path id."""
    user_id: int = ctx.path["id"]
    command = DeleteUserCommand(ctx.users)

    try:
        await command.execute(user_id)
        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.error(
            "Errors when removing the user. (id=%s): %s",
            user_id,
            e,
            extra={"error": e},
        )
        raise

    logger.info("Admin %s deleted user: %s", ctx.principal.username, user_id)


@router.post(
    "/token",
    summary="Issue an OAuth2 bearer token",
    responses={
        400: {"model": OAuthErrorResponse, "description": "Invalid grant"},
    },
)
async def get_user_token(
    grant_service: GrantService,
    grant_type: Annotated[str | None, Form()] = None,
    username: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
    refresh_token: Annotated[str | None, Form()] = None,
) -> TokenResponse:
    """Exchange credentials or a refresh token for a new token pair.

    Accepts ``application/x-www-form-urlencoded`` with
    ``grant_type=password`` (``username``, ``password``) or
    ``grant_type=refresh_token`` (``refresh_token``).
    """
    grant = await grant_service.grant(
        grant_type=grant_type,
        username=username,
        password=password,
        refresh_token=refresh_token,
    )
    return TokenResponse.from_grant(grant)
