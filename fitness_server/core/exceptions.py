"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationException(AppException):
    """Missing or invalid request field."""

    def __init__(self, message: str = "Validation error"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class UnauthorizedException(AppException):
    """Credential check failed."""

    def __init__(self, message: str = "Unauthorized"):
        """Initialize with 401 status code."""
        super().__init__(message, status_code=401)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class ConflictException(AppException):
    """Conflict exception."""

    def __init__(self, message: str = "Conflict"):
        """Initialize with 409 status code."""
        super().__init__(message, status_code=409)


class StoreException(AppException):
    """Data store failure; the message shown to callers stays generic."""

    def __init__(self, message: str = "Internal Server Error"):
        """Initialize with 500 status code."""
        super().__init__(message, status_code=500)


class MailDeliveryException(AppException):
    """Outbound mail relay failure."""

    def __init__(self, message: str = "Failed to send email"):
        """Initialize with 502 status code."""
        super().__init__(message, status_code=502)
