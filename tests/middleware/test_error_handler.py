"""Unit tests for the error handler middleware."""

import json
import unittest
from unittest.mock import MagicMock

from pydantic import BaseModel, ValidationError

from signstamp.middleware.error_handler import (
    ErrorCode,
    ErrorResponse,
    error_handler_middleware,
)
from signstamp.middleware.exceptions import (
    BadRequestError,
    EmptyDocumentError,
    ExternalServiceError,
    ImageDownloadError,
    ImageEmbedError,
)


class Strict(BaseModel):
    value: int


def raising(exc):
    @error_handler_middleware
    def handler(event, context):
        raise exc

    return handler


class TestErrorHandlerMiddleware(unittest.TestCase):
    """Test cases for error_handler_middleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.context = MagicMock()

    def test_passes_through_successful_responses(self):
        @error_handler_middleware
        def handler(event, context):
            return {"statusCode": 200, "body": "ok"}

        self.assertEqual({"statusCode": 200, "body": "ok"}, handler({}, self.context))

    def test_business_error_maps_to_422(self):
        # Act
        response = raising(EmptyDocumentError())({}, self.context)

        # Assert
        self.assertEqual(422, response["statusCode"])
        self.assertEqual({"Content-Type": "application/json"}, response["headers"])
        body = json.loads(response["body"])
        self.assertEqual("PDF has no pages", body["error"])
        self.assertEqual("EMPTY_DOCUMENT", body["code"])

    def test_bad_request_keeps_details(self):
        error = BadRequestError("No PDF file provided", details={"field": "pdf"})

        response = raising(error)({}, self.context)

        self.assertEqual(400, response["statusCode"])
        body = json.loads(response["body"])
        self.assertEqual("BAD_REQUEST", body["code"])
        self.assertEqual({"field": "pdf"}, body["details"])

    def test_external_error_maps_to_502(self):
        response = raising(ImageDownloadError())({}, self.context)

        self.assertEqual(502, response["statusCode"])
        self.assertEqual("IMAGE_DOWNLOAD_FAILED", json.loads(response["body"])["code"])

    def test_validation_error_maps_to_400(self):
        try:
            Strict(value="abc")
        except ValidationError as e:
            error = e

        response = raising(error)({}, self.context)

        self.assertEqual(400, response["statusCode"])
        self.assertEqual(
            "VALIDATION_INVALID_INPUT", json.loads(response["body"])["code"]
        )

    def test_unexpected_error_maps_to_500(self):
        response = raising(RuntimeError("boom"))({}, self.context)

        self.assertEqual(500, response["statusCode"])
        body = json.loads(response["body"])
        self.assertEqual("SYSTEM_INTERNAL_ERROR", body["code"])
        self.assertEqual("An unexpected error occurred", body["error"])


class TestErrorCode(unittest.TestCase):
    """Test cases for ErrorCode mapping."""

    def test_subclass_maps_to_nearest_parent(self):
        class ProviderTimeout(ExternalServiceError):
            def __init__(self):
                super().__init__("Provider timed out", "PROVIDER_TIMEOUT")

        self.assertEqual(
            ErrorCode.UPSTREAM_ERROR, ErrorCode.from_exception(ProviderTimeout())
        )

    def test_error_response_uses_exception_message(self):
        response = ErrorResponse.from_exception(ImageEmbedError("Unsupported format"))

        self.assertEqual("Unsupported format", response.message)
        self.assertEqual(ErrorCode.INVALID_IMAGE, response.code)
