"""Service-level errors rendered as JSON error bodies by the API layer."""

from typing import Any


class ServiceError(Exception):
    """Base class for every error a service raises on purpose."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        field: str | None = None,
        index: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.field = field
        self.index = index

    def at_index(self, index: int) -> "ServiceError":
        """Tag the error with the position of the offending batch element."""
        self.index = index
        self.message = f"Job at index {index}: {self.message}"
        self.args = (self.message,)
        return self

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.field is not None:
            body["field"] = self.field
        if self.index is not None:
            body["index"] = self.index
        return body


class Unauthorized(ServiceError):
    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class InvalidArgument(ServiceError):
    """Malformed id or pagination/query parameter."""

    status_code = 400
    code = "INVALID_ARGUMENT"


class ValidationFailed(ServiceError):
    """Request payload failed validation."""

    status_code = 400
    code = "VALIDATION_ERROR"


class MissingRequiredField(ValidationFailed):
    code = "MISSING_REQUIRED_FIELD"

    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"{field} is required", field=field)


class InvalidEnumValue(ValidationFailed):
    code = "INVALID_STATUS"

    def __init__(self, field: str, allowed: list[str]):
        super().__init__(
            f"{field} must be one of: {', '.join(allowed)}",
            field=field,
        )


class InvalidFieldValue(ValidationFailed):
    code = "INVALID_FIELD"


class InvalidForeignKey(ValidationFailed):
    code = "INVALID_FOREIGN_KEY"


class InvalidUpdateFields(ValidationFailed):
    code = "INVALID_UPDATE_FIELDS"


class EmptyBatch(ValidationFailed):
    code = "EMPTY_JOBS_ARRAY"


class NotFound(ServiceError):
    """Record is absent or owned by another user; callers cannot tell which."""

    status_code = 404
    code = "NOT_FOUND"


class InternalError(ServiceError):
    status_code = 500
    code = "INTERNAL_ERROR"
