"""Business logic related exceptions."""

from typing import Any, Dict, Optional

from . import SignStampError


class BusinessError(SignStampError):
    """Base class for business logic errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=422  # Unprocessable Entity
        )


class DocumentLoadError(BusinessError):
    """The input bytes could not be parsed as a PDF document."""

    def __init__(
        self,
        message: str = "Invalid PDF file",
        code: str = "INVALID_PDF",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


class EmptyDocumentError(BusinessError):
    """The PDF document has no pages to sign."""

    def __init__(
        self,
        message: str = "PDF has no pages",
        code: str = "EMPTY_DOCUMENT",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


class ImageEmbedError(BusinessError):
    """The signature image is not a supported (PNG) raster image."""

    def __init__(
        self,
        message: str = "Signature image must be a valid PNG",
        code: str = "INVALID_IMAGE",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


class DocumentProcessingError(BusinessError):
    """Errors that occur while drawing onto or saving the document."""

    def __init__(
        self,
        message: str = "Failed to process document",
        code: str = "PROCESSING_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)
