"""Request validators.

Each validator checks the shape of one part of the request (path, query
or body) and stores the parsed value on the context for the handler. A
malformed request is rejected with 400 and one entry per offending field.
"""

import json
import logging
from uuid import UUID

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from vidshare.domain.shared.exceptions import ErrorCode
from vidshare.presentation.api.gates.listing import (
    DB_INTEGER_MAX,
    PAGINATION_COUNT_MAX,
    PAGINATION_START_MAX,
    USERS_SORTABLE_COLUMNS,
)
from vidshare.presentation.api.gates.pipeline import Rejection, RequestContext
from vidshare.presentation.api.schemas.users import (
    UserCreateRequest,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request parameters"
USER_ID_MESSAGE = f"User id must be an integer between 1 and {DB_INTEGER_MAX}"


def _is_whole_number(raw: str) -> bool:
    return raw.isascii() and raw.isdigit()


class PaginationParams(BaseModel):
    start: int | None = Field(default=None, ge=0, le=PAGINATION_START_MAX)
    count: int | None = Field(default=None, ge=1, le=PAGINATION_COUNT_MAX)

    model_config = ConfigDict(extra="ignore")

    @field_validator("start", "count", mode="before")
    @classmethod
    def validate_whole_number(cls, v: object) -> object:
        # Lax int parsing accepts "1.0", which the resolver cannot read back
        if isinstance(v, str) and not _is_whole_number(v):
            msg = "Input should be a whole number"
            raise ValueError(msg)
        return v


class UsersSortParams(BaseModel):
    sort: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("sort")
    @classmethod
    def validate_sort(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if v.removeprefix("-") not in USERS_SORTABLE_COLUMNS:
            allowed = ", ".join(USERS_SORTABLE_COLUMNS)
            msg = f"Sort must be one of {allowed}, optionally prefixed with '-'"
            raise ValueError(msg)
        return v


def _field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "body",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _rejection_from(exc: PydanticValidationError) -> Rejection:
    errors = _field_errors(exc)
    logger.debug("Request validation failed: %s", errors)
    return Rejection.bad_request(INVALID_REQUEST, errors)


async def _read_json_body(ctx: RequestContext) -> tuple[object, Rejection | None]:
    raw = await ctx.request.body()
    if not raw.strip():
        return {}, None
    try:
        return json.loads(raw), None
    except ValueError:
        return None, Rejection.bad_request(
            INVALID_REQUEST,
            [{"field": "body", "message": "Body must be valid JSON"}],
        )


async def _validate_body(
    ctx: RequestContext,
    model: type[BaseModel],
) -> Rejection | None:
    payload, rejection = await _read_json_body(ctx)
    if rejection is not None:
        return rejection
    try:
        ctx.body = model.model_validate(payload)
    except PydanticValidationError as e:
        return _rejection_from(e)
    return None


def _parse_user_id(ctx: RequestContext) -> Rejection | None:
    raw = ctx.request.path_params.get("id", "")
    too_long = len(raw) > len(str(DB_INTEGER_MAX))
    if not _is_whole_number(raw) or too_long or not 1 <= int(raw) <= DB_INTEGER_MAX:
        return Rejection.bad_request(
            INVALID_REQUEST,
            [{"field": "id", "message": USER_ID_MESSAGE}],
        )
    ctx.path["id"] = int(raw)
    return None


async def _ensure_user_is_new(
    ctx: RequestContext,
    body: UserCreateRequest,
) -> Rejection | None:
    if await ctx.users.exists_by_username_or_email(body.username, body.email):
        return Rejection(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this username or email already exists.",
            code=ErrorCode.USER_ALREADY_EXISTS,
        )
    return None


async def users_add_validator(ctx: RequestContext) -> Rejection | None:
    """Validate a new account payload and reject taken usernames or emails."""
    rejection = await _validate_body(ctx, UserCreateRequest)
    if rejection is not None:
        return rejection
    return await _ensure_user_is_new(ctx, ctx.body)


async def users_update_validator(ctx: RequestContext) -> Rejection | None:
    rejection = _parse_user_id(ctx)
    if rejection is not None:
        return rejection
    return await _validate_body(ctx, UserUpdateRequest)


async def users_remove_validator(ctx: RequestContext) -> Rejection | None:
    # Existence is left to the handler so a missing user is reported by it
    return _parse_user_id(ctx)


async def users_video_rating_validator(ctx: RequestContext) -> Rejection | None:
    """Require ``videoId`` to be a UUID naming an existing video."""
    raw = ctx.request.path_params.get("videoId", "")
    try:
        video_id = UUID(raw)
    except ValueError:
        return Rejection.bad_request(
            INVALID_REQUEST,
            [{"field": "videoId", "message": "Video id must be a valid UUID"}],
        )

    if not await ctx.videos.exists(video_id):
        return Rejection(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found",
            code=ErrorCode.VIDEO_NOT_FOUND,
        )

    ctx.path["video_id"] = video_id
    return None


async def pagination_validator(ctx: RequestContext) -> Rejection | None:
    try:
        PaginationParams.model_validate(dict(ctx.request.query_params))
    except PydanticValidationError as e:
        return _rejection_from(e)
    return None


async def users_sort_validator(ctx: RequestContext) -> Rejection | None:
    try:
        UsersSortParams.model_validate(dict(ctx.request.query_params))
    except PydanticValidationError as e:
        return _rejection_from(e)
    return None
