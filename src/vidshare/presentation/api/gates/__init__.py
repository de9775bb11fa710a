"""Request gates: ordered admission checks run before route handlers."""

from vidshare.presentation.api.gates.authentication import (
    authenticate,
    ensure_is_admin,
)
from vidshare.presentation.api.gates.listing import (
    PAGINATION_COUNT_DEFAULT,
    PAGINATION_COUNT_MAX,
    PAGINATION_START_DEFAULT,
    USERS_SORT_DEFAULT,
    USERS_SORTABLE_COLUMNS,
    ListQuery,
    resolve_list_query,
    set_pagination,
    set_users_sort,
)
from vidshare.presentation.api.gates.pipeline import (
    AuthenticatedPrincipal,
    Check,
    GatePipeline,
    GateRejectedError,
    Rejection,
    RequestContext,
)
from vidshare.presentation.api.gates.registration import (
    REGISTRATION_DISABLED_MESSAGE,
    ensure_registration_enabled,
)
from vidshare.presentation.api.gates.validators import (
    pagination_validator,
    users_add_validator,
    users_remove_validator,
    users_sort_validator,
    users_update_validator,
    users_video_rating_validator,
)

__all__ = [
    "PAGINATION_COUNT_DEFAULT",
    "PAGINATION_COUNT_MAX",
    "PAGINATION_START_DEFAULT",
    "REGISTRATION_DISABLED_MESSAGE",
    "USERS_SORTABLE_COLUMNS",
    "USERS_SORT_DEFAULT",
    "AuthenticatedPrincipal",
    "Check",
    "GatePipeline",
    "GateRejectedError",
    "ListQuery",
    "Rejection",
    "RequestContext",
    "authenticate",
    "ensure_is_admin",
    "ensure_registration_enabled",
    "pagination_validator",
    "resolve_list_query",
    "set_pagination",
    "set_users_sort",
    "users_add_validator",
    "users_remove_validator",
    "users_sort_validator",
    "users_update_validator",
    "users_video_rating_validator",
]
