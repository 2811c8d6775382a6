from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    error_code = "SERVICE_ERROR"
    default_message = "Service error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {
            "code": self.code or self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    error_code = "SERVICE_VALIDATION_ERROR"
    default_message = "Invalid input"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found (or is not owned by the caller)."""

    http_status = 404
    error_code = "NOT_FOUND"
    default_message = "Not found"


class UnauthorizedError(ServiceError):
    """Raised when the session cookie is missing or does not resolve to a user."""

    http_status = 401
    error_code = "UNAUTHORIZED"
    default_message = "Unauthorized"
