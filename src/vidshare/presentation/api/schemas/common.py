"""Common schemas shared across endpoints."""

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for domain errors and rejected requests."""

    detail: str
    code: str
    errors: list[FieldError] | None = None


class OAuthErrorResponse(BaseModel):
    """Error body of the token endpoint (RFC 6749 section 5.2)."""

    error: str
    error_description: str


class HealthResponse(BaseModel):
    status: str
    version: str
