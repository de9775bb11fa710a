"""Unit tests for listing defaults (sort and pagination)."""

import pytest

from vidshare.presentation.api.gates import (
    PAGINATION_COUNT_DEFAULT,
    USERS_SORT_DEFAULT,
    ListQuery,
    resolve_list_query,
    set_pagination,
    set_users_sort,
)
from tests.shared.fixtures.requests import make_request


class TestResolveListQuery:
    def test_defaults(self):
        assert resolve_list_query({}) == ListQuery(
            start=0,
            count=PAGINATION_COUNT_DEFAULT,
            sort=USERS_SORT_DEFAULT,
        )
        assert USERS_SORT_DEFAULT == "-createdAt"
        assert PAGINATION_COUNT_DEFAULT == 15

    def test_explicit_values_are_kept(self):
        query = resolve_list_query({"start": "30", "count": "10", "sort": "username"})

        assert query == ListQuery(start=30, count=10, sort="username")

    def test_custom_default_sort(self):
        assert resolve_list_query({}, default_sort="id").sort == "id"

    def test_is_idempotent(self):
        params = {"count": "5"}

        assert resolve_list_query(params) == resolve_list_query(params)


class TestListingGateSteps:
    @pytest.mark.asyncio
    async def test_steps_fill_defaults(self, make_context):
        ctx = make_context()

        await set_users_sort(ctx)
        await set_pagination(ctx)

        assert ctx.list_query == ListQuery()

    @pytest.mark.asyncio
    async def test_steps_keep_each_others_fields(self, make_context):
        ctx = make_context(make_request(query_string="sort=id&start=2&count=4"))

        await set_users_sort(ctx)
        await set_pagination(ctx)

        assert ctx.list_query == ListQuery(start=2, count=4, sort="id")

    @pytest.mark.asyncio
    async def test_running_twice_changes_nothing(self, make_context):
        ctx = make_context(make_request(query_string="sort=-username&count=7"))

        await set_users_sort(ctx)
        await set_pagination(ctx)
        first = ctx.list_query
        await set_users_sort(ctx)
        await set_pagination(ctx)

        assert ctx.list_query == first
