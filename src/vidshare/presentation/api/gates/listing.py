"""Listing parameters: sort key and pagination window.

``resolve_list_query`` is pure so both gate steps that rely on it are
idempotent: running either step twice on the same request yields the
same ``ListQuery``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace

from vidshare.presentation.api.gates.pipeline import Rejection, RequestContext

# Largest value a 32-bit INTEGER column or OFFSET accepts
DB_INTEGER_MAX = 2**31 - 1

PAGINATION_START_DEFAULT = 0
PAGINATION_START_MAX = DB_INTEGER_MAX
PAGINATION_COUNT_DEFAULT = 15
PAGINATION_COUNT_MAX = 100

USERS_SORT_DEFAULT = "-createdAt"
USERS_SORTABLE_COLUMNS = ("id", "username", "createdAt")


@dataclass(frozen=True)
class ListQuery:
    start: int = PAGINATION_START_DEFAULT
    count: int = PAGINATION_COUNT_DEFAULT
    sort: str = USERS_SORT_DEFAULT


def resolve_list_query(
    params: Mapping[str, str],
    default_sort: str = USERS_SORT_DEFAULT,
) -> ListQuery:
    """Fill absent listing parameters with their defaults.

    Values are expected to have passed the pagination and sort validators.
    """
    start = params.get("start")
    count = params.get("count")
    sort = params.get("sort")
    return ListQuery(
        start=int(start) if start is not None else PAGINATION_START_DEFAULT,
        count=int(count) if count is not None else PAGINATION_COUNT_DEFAULT,
        sort=sort or default_sort,
    )


async def set_users_sort(ctx: RequestContext) -> Rejection | None:
    resolved = resolve_list_query(ctx.request.query_params, USERS_SORT_DEFAULT)
    ctx.list_query = replace(ctx.list_query or ListQuery(), sort=resolved.sort)
    return None


async def set_pagination(ctx: RequestContext) -> Rejection | None:
    resolved = resolve_list_query(ctx.request.query_params)
    ctx.list_query = replace(
        ctx.list_query or ListQuery(),
        start=resolved.start,
        count=resolved.count,
    )
    return None
