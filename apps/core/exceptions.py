from __future__ import annotations


class ApiError(Exception):
    """
    Base error for the JSON API. Rendered by ApiErrorMiddleware as
    {"success": false, "error": message, "details": details}.
    """
    status = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None, details=None, status: int | None = None):
        self.message = message or self.default_message
        self.details = details
        if status is not None:
            self.status = status
        super().__init__(self.message)


class NotFoundError(ApiError):
    status = 404
    default_message = "Not found"


class ValidationFailed(ApiError):
    status = 400
    default_message = "Validation failed"

    @classmethod
    def from_form(cls, form) -> "ValidationFailed":
        details = {field: [str(e) for e in errors] for field, errors in form.errors.items()}
        return cls(details=details)


class Conflict(ApiError):
    status = 400
    default_message = "Conflicting state"


class AuthRequired(ApiError):
    status = 401
    default_message = "Authentication required"


class Forbidden(ApiError):
    status = 403
    default_message = "Permission denied"
