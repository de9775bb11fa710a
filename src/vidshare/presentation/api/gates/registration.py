"""Self-registration switch.

Registration is closed unless ``SIGNUP_ENABLED`` is set. The refusal is a
plain-text body, unlike the JSON errors of the other checks.
"""

from fastapi import status

from vidshare.domain.shared.exceptions import ErrorCode
from vidshare.presentation.api.gates.pipeline import (
    TEXT_MEDIA_TYPE,
    Rejection,
    RequestContext,
)

REGISTRATION_DISABLED_MESSAGE = "User registration is not enabled."


async def ensure_registration_enabled(ctx: RequestContext) -> Rejection | None:
    """Let self-registration through only when SIGNUP_ENABLED is set.

    The rejection body is plain text, not JSON.
    """
    if ctx.settings.signup_enabled is True:
        return None

    return Rejection(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=REGISTRATION_DISABLED_MESSAGE,
        code=ErrorCode.REGISTRATION_DISABLED,
        media_type=TEXT_MEDIA_TYPE,
    )
