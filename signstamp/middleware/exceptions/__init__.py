"""Exception handling for the SignStamp service."""

from typing import Any, Dict, Optional


class SignStampError(Exception):
    """Base exception for all SignStamp service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code


from .api import BadRequestError, NotFoundError, PayloadTooLargeError
from .business import (
    DocumentLoadError,
    DocumentProcessingError,
    EmptyDocumentError,
    ImageEmbedError,
)
from .external import ExternalServiceError, ImageDownloadError, SignatureFetchError

__all__ = [
    # Base
    "SignStampError",
    # API Errors
    "BadRequestError",
    "NotFoundError",
    "PayloadTooLargeError",
    # Business Errors
    "DocumentLoadError",
    "DocumentProcessingError",
    "EmptyDocumentError",
    "ImageEmbedError",
    # External Service Errors
    "ExternalServiceError",
    "ImageDownloadError",
    "SignatureFetchError",
]
