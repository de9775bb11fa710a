"""Authentication exceptions.

These exceptions are raised by the vidshare_auth package and should be
caught and handled by the presentation layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class OAuthError(AuthError):
    """Base class for errors rendered as an OAuth2 error response.

    Attributes
    ----------
    error
        The RFC 6749 error code (``invalid_grant``, ...)
    status_code
        HTTP status the error is rendered with
    """

    error = "server_error"
    status_code = 400

    def __init__(self, message: str = "OAuth2 error"):
        super().__init__(message)


class InvalidRequestError(OAuthError):
    """Raised when a token request is missing a required parameter."""

    error = "invalid_request"

    def __init__(self, message: str = "Missing parameter"):
        super().__init__(message)


class InvalidGrantError(OAuthError):
    """Raised when user credentials or a refresh token are not valid."""

    error = "invalid_grant"

    def __init__(self, message: str = "Invalid grant: user credentials are invalid"):
        super().__init__(message)


class UnsupportedGrantTypeError(OAuthError):
    """Raised when the requested grant type is not handled."""

    error = "unsupported_grant_type"

    def __init__(self, message: str = "Unsupported grant type"):
        super().__init__(message)
