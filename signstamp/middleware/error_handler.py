from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator
from pydantic import BaseModel, ValidationError

from ..models.api import APIErrorResponse
from .exceptions import (
    BadRequestError,
    DocumentLoadError,
    DocumentProcessingError,
    EmptyDocumentError,
    ExternalServiceError,
    ImageDownloadError,
    ImageEmbedError,
    NotFoundError,
    PayloadTooLargeError,
    SignatureFetchError,
    SignStampError,
)

logger = Logger()


class ErrorCode(Enum):
    # Validation errors
    VALIDATION_INVALID_INPUT = "VALIDATION_INVALID_INPUT"

    # API errors
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Business errors
    INVALID_PDF = "INVALID_PDF"
    EMPTY_DOCUMENT = "EMPTY_DOCUMENT"
    INVALID_IMAGE = "INVALID_IMAGE"
    PROCESSING_ERROR = "PROCESSING_ERROR"

    # External service errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    SIGNATURE_FETCH_FAILED = "SIGNATURE_FETCH_FAILED"
    IMAGE_DOWNLOAD_FAILED = "IMAGE_DOWNLOAD_FAILED"

    # System errors
    SYSTEM_INTERNAL_ERROR = "SYSTEM_INTERNAL_ERROR"

    @property
    def default_message(self) -> str:
        messages: Dict["ErrorCode", str] = {
            ErrorCode.VALIDATION_INVALID_INPUT: "Invalid input",
            ErrorCode.BAD_REQUEST: "Bad request",
            ErrorCode.NOT_FOUND: "Resource not found",
            ErrorCode.PAYLOAD_TOO_LARGE: "Uploaded file is too large",
            ErrorCode.INVALID_PDF: "Invalid PDF file",
            ErrorCode.EMPTY_DOCUMENT: "PDF has no pages",
            ErrorCode.INVALID_IMAGE: "Invalid signature image",
            ErrorCode.PROCESSING_ERROR: "Failed to process document",
            ErrorCode.UPSTREAM_ERROR: "Upstream service failed",
            ErrorCode.SIGNATURE_FETCH_FAILED: "Failed to fetch signature data",
            ErrorCode.IMAGE_DOWNLOAD_FAILED: "Failed to download signature image",
            ErrorCode.SYSTEM_INTERNAL_ERROR: "An unexpected error occurred",
        }
        return messages[self]

    @classmethod
    def from_exception(cls, e: Exception) -> "ErrorCode":
        """Map exceptions to error codes, most specific class first."""
        mappings: Dict[type, "ErrorCode"] = {
            ValidationError: ErrorCode.VALIDATION_INVALID_INPUT,
            BadRequestError: ErrorCode.BAD_REQUEST,
            NotFoundError: ErrorCode.NOT_FOUND,
            PayloadTooLargeError: ErrorCode.PAYLOAD_TOO_LARGE,
            DocumentLoadError: ErrorCode.INVALID_PDF,
            EmptyDocumentError: ErrorCode.EMPTY_DOCUMENT,
            ImageEmbedError: ErrorCode.INVALID_IMAGE,
            DocumentProcessingError: ErrorCode.PROCESSING_ERROR,
            SignatureFetchError: ErrorCode.SIGNATURE_FETCH_FAILED,
            ImageDownloadError: ErrorCode.IMAGE_DOWNLOAD_FAILED,
            ExternalServiceError: ErrorCode.UPSTREAM_ERROR,
        }
        for klass in type(e).__mro__:
            if klass in mappings:
                return mappings[klass]
        return ErrorCode.SYSTEM_INTERNAL_ERROR


class ErrorResponse(BaseModel):
    message: str
    code: ErrorCode
    details: Optional[Dict[str, Any]] = None

    @classmethod
    def from_code(
        cls, code: ErrorCode, details: Optional[Dict[str, Any]] = None
    ) -> "ErrorResponse":
        return cls(message=code.default_message, code=code, details=details)

    @classmethod
    def from_exception(cls, e: Exception) -> "ErrorResponse":
        """Create an ErrorResponse from an exception."""
        code = ErrorCode.from_exception(e)
        message = str(e) if str(e) else code.default_message
        details = getattr(e, "details", None)

        return cls(message=message, code=code, details=details)


def create_error_response(
    status_code: HTTPStatus,
    error_response: ErrorResponse,
) -> Dict[str, Any]:
    """Helper to create standardized error responses with error codes."""
    api_error = APIErrorResponse(
        error=error_response.message,
        code=error_response.code.value,
        details=error_response.details,
    )

    return {
        "statusCode": int(status_code),
        "body": api_error.model_dump_json(),
        "headers": {"Content-Type": "application/json"},
    }


@lambda_handler_decorator
def error_handler_middleware(handler, event, context):
    """Middleware to handle exceptions and format error responses with error codes."""
    try:
        return handler(event, context)

    # --- SignStampError exceptions (our custom exceptions) ---
    except SignStampError as e:
        log_level = "warning" if e.status_code < 500 else "error"
        getattr(logger, log_level)(
            f"{e.__class__.__name__}: {str(e)}",
            extra={"code": e.code, "details": e.details},
        )

        error_response = ErrorResponse.from_exception(e)
        return create_error_response(HTTPStatus(e.status_code), error_response)

    # --- Input Validation Errors ---
    except ValidationError as e:
        logger.warning(f"Input validation failed: {e}", exc_info=True)
        error_response = ErrorResponse.from_code(
            ErrorCode.VALIDATION_INVALID_INPUT, details={"errors": str(e)}
        )
        return create_error_response(HTTPStatus.BAD_REQUEST, error_response)

    # --- Generic Fallback Error ---
    except Exception as e:
        logger.exception(f"Unhandled error: {e.__class__.__name__}: {str(e)}")
        error_response = ErrorResponse.from_code(
            ErrorCode.SYSTEM_INTERNAL_ERROR, details={"error": str(e)}
        )
        return create_error_response(HTTPStatus.INTERNAL_SERVER_ERROR, error_response)
