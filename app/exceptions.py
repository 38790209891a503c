from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when input data is invalid or a precondition for a service call is not met.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class NotFoundError(ServiceValidationError):
    """Raised when a requested resource was not found or belongs to another tenant."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class UnauthorizedError(ServiceValidationError):
    """Raised when a session token or the cron secret is missing or wrong."""

    http_status = 401

    def __init__(self, message: str = "Unauthorized", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class PersistenceReadError(Exception):
    """Raised when ingredients or existing alerts for a tenant cannot be loaded.

    Fatal to the tenant being processed: the on-demand check surfaces it as a 500,
    the daily check logs it and moves on to the next tenant.
    """

    http_status = 500

    def __init__(self, message: str, tenant_id: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.tenant_id = tenant_id

    def __str__(self) -> str:
        return self.message


class NotificationError(Exception):
    """Raised by a notifier when an alert summary could not be delivered."""

    def __init__(self, message: str, recipient: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.recipient = recipient
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message
