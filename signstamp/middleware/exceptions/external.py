"""Exceptions raised when third-party services misbehave."""

from typing import Any, Dict, Optional

from . import SignStampError


class ExternalServiceError(SignStampError):
    """Base class for failures of upstream HTTP services."""

    def __init__(
        self, message: str, code: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=502,  # Bad Gateway
        )


class SignatureFetchError(ExternalServiceError):
    """Raised when the signature provider returns no usable signature."""

    def __init__(
        self,
        message: str = "Failed to fetch signature data",
        code: str = "SIGNATURE_FETCH_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details)


class ImageDownloadError(ExternalServiceError):
    """Raised when a signature image cannot be downloaded."""

    def __init__(
        self,
        message: str = "Failed to download signature image",
        code: str = "IMAGE_DOWNLOAD_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details)
