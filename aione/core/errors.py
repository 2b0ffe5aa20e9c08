"""Error taxonomy shared by services and routes.

Every error carries a human-readable ``message`` and the HTTP ``status_code``
the API returns for it; the handlers in ``aione.main`` render them as
``{"error": message}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(AppError):
    """Uniqueness violation or a record still referenced elsewhere."""

    status_code = 400


class AuthError(AppError):
    """Bad credentials (401) or a missing, invalid or insufficient token (401/403)."""

    status_code = 401


class NotFoundError(AppError):
    """No record matches the requested id (or it belongs to someone else)."""

    status_code = 404


class InternalError(AppError):
    """Unexpected failure, including an unreachable database."""

    status_code = 500
