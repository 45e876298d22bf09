# server/core/errors.py


class BlogApiError(Exception):
    """
    Base class for errors that end a single request.
    Each subclass carries the status code and message of the envelope it is rendered as.
    """
    status_code = 500
    message = "Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(BlogApiError):
    status_code = 403
    message = "Validation Error!"

    def __init__(self, errors: dict[str, list[str]]):
        super().__init__()
        self.errors = errors


class InvalidCredentialsError(BlogApiError):
    status_code = 401
    message = "Invalid credentials"


class UnauthenticatedError(BlogApiError):
    status_code = 401
    message = "Unauthenticated."


class UnknownUserError(BlogApiError):
    """Raised when a token is requested for a user id that does not exist."""

    def __init__(self, user_id):
        super().__init__()
        self.user_id = user_id


class InvalidInputError(ValueError):
    """Raised by the password hasher for empty or oversized input."""
