"""
Application error taxonomy.

Every failure an access module surfaces to its caller is one of these.
app.main turns them into JSON responses using code and http_status.
"""


class AppError(Exception):
    code = "app_error"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class Unauthenticated(AppError):
    """A mutating call was attempted without a resolved actor."""
    code = "unauthenticated"
    http_status = 401

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class ValidationFailed(AppError):
    """Input rejected before any backend round trip."""
    code = "validation_failed"
    http_status = 422


class NotFound(AppError):
    code = "not_found"
    http_status = 404


class BackendUnavailable(AppError):
    """Transport, storage or PostgREST failure. Never retried."""
    code = "backend_unavailable"
    http_status = 503
