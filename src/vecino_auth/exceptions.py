"""Authentication exceptions.

These exceptions are raised by the vecino_auth package and should be
caught and handled by the application layer or the API exception handlers.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class TokenError(AuthError):
    """Base for every reason a request carries no usable session token."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class MissingTokenError(TokenError):
    """Raised when a protected request carries no bearer token."""

    def __init__(self, message: str = "Authentication token required"):
        super().__init__(message)


class InvalidTokenError(TokenError):
    """Raised when a JWT has a bad signature or a malformed payload."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(TokenError):
    """Raised when a correctly signed JWT is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class ForbiddenError(AuthError):
    """Raised when the caller's role may not use the requested route."""

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
