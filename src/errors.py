"""Application error kinds.

Route handlers and services never recover from these locally: they are raised
and translated to a status code and a short message by the exception handlers
registered in ``src.main``.
"""


class AppError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code = 400
    message = "Bad request"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadParamsError(AppError):
    """A required parameter was missing, empty or inconsistent."""

    status_code = 422
    message = "A required parameter was omitted or invalid"


class BadCredentialsError(AppError):
    """Unknown email or wrong password; the two are deliberately indistinguishable."""

    status_code = 401
    message = "The provided username or password is incorrect"


class DocumentNotFoundError(AppError):
    status_code = 404
    message = "The provided ID doesn't match any documents"


class UnauthorizedError(AppError):
    """Missing, malformed or unknown bearer token."""

    status_code = 401
    message = "Invalid authentication credentials"
