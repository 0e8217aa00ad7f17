"""Errors raised by the token and password services.

The HTTP layer maps every ``AuthError`` to a 401, except
``WeakPasswordError`` which is a 400.
"""


class AuthError(Exception):
    """Base class; ``message`` is safe to show to clients."""

    def __init__(self, message: str = "Authentication failed"):
        self.message = message
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Bad signature, wrong token type, or unreadable claims."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(InvalidTokenError):
    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Password outside the accepted length range."""

    def __init__(self, message: str = "Password must be 8 to 128 characters"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password. Both cases share one message."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
