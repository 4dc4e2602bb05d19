"""API-related exceptions."""

from typing import Any, Dict, Optional

from . import SignStampError


class APIError(SignStampError):
    """Base class for API-related errors."""

    pass


class BadRequestError(APIError):
    """400 Bad Request errors."""

    def __init__(
        self,
        message: str = "Invalid request",
        code: str = "BAD_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=400)


class NotFoundError(APIError):
    """404 Not Found errors."""

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=404)


class PayloadTooLargeError(APIError):
    """413 Payload Too Large errors."""

    def __init__(
        self,
        message: str = "Uploaded file is too large",
        code: str = "PAYLOAD_TOO_LARGE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=413)
