"""Request parsing service for multipart and JSON request bodies."""

import base64
import binascii
import json
from typing import Any, Tuple

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger
from pydantic import ValidationError

from ..middleware.exceptions import BadRequestError, PayloadTooLargeError
from ..models.api.requests import GenerateSignatureRequest, SignPdfForm
from ..utils.multipart import MultipartParser

PDF_CONTENT_TYPE = "application/pdf"


class RequestParsingService:
    """Service for parsing HTTP request data."""

    def __init__(self, app: APIGatewayHttpResolver, logger: Logger):
        """Initialize request parsing service.

        Args:
            app: The API Gateway resolver instance
            logger: Logger instance
        """
        self.app = app
        self.logger = logger

    def get_multipart_content(self) -> Tuple[Any, str]:
        """Extract and prepare multipart request body and content type.

        Returns:
            Tuple of (body, content_type)

        Raises:
            BadRequestError: If content type is invalid or body can't be decoded
        """
        body = self.app.current_event.body
        headers = self.app.current_event.headers or {}
        content_type = headers.get("content-type", headers.get("Content-Type", ""))

        if not content_type or "multipart/form-data" not in content_type:
            raise BadRequestError(
                f"Content-Type must be multipart/form-data, got: {content_type}"
            )

        if self.app.current_event.is_base64_encoded:
            try:
                body = base64.b64decode(body or "")
                self.logger.debug("Decoded base64 body for multipart parsing")
            except (binascii.Error, ValueError, TypeError) as e:
                self.logger.error(f"Error decoding base64 body: {e}", exc_info=True)
                raise BadRequestError("Invalid base64 encoding in request body")

        return body, content_type

    def parse_sign_form(self, body: Any, content_type: str) -> SignPdfForm:
        """Parse the multipart body of a signing request.

        Args:
            body: The request body
            content_type: The Content-Type header

        Returns:
            Validated SignPdfForm instance

        Raises:
            BadRequestError: If the body can't be parsed or a field is malformed
        """
        try:
            parsed_form = MultipartParser(content_type, body).parse()
        except ValueError as e:
            self.logger.warning(f"Multipart parser failed: {e}")
            raise BadRequestError(f"Failed to parse multipart form data: {e}")

        self.logger.debug(
            "Multipart form parsed", extra={"parsed_form_keys": list(parsed_form.keys())}
        )

        try:
            return SignPdfForm(**parsed_form)
        except ValidationError as e:
            raise BadRequestError(
                "Invalid form fields", details=_validation_details(e)
            )

    def validate_sign_form(self, form_data: SignPdfForm, max_file_size: int) -> None:
        """Validate a signing form.

        Args:
            form_data: Form data to validate
            max_file_size: Largest accepted PDF in bytes

        Raises:
            BadRequestError: If a required field is missing or the file is not a PDF
            PayloadTooLargeError: If the PDF exceeds max_file_size
        """
        pdf = form_data.pdf

        if pdf is None or not pdf.content:
            raise BadRequestError("No PDF file provided")
        if not form_data.signatureImageUrl:
            raise BadRequestError("Signature image URL is required")

        if pdf.content_type.split(";")[0].strip().lower() != PDF_CONTENT_TYPE:
            raise BadRequestError(
                f"Invalid file type: {pdf.content_type}. Only PDF files are allowed."
            )

        if len(pdf.content) > max_file_size:
            max_size_mb = round(max_file_size / (1024 * 1024))
            raise PayloadTooLargeError(
                f"File too large. Maximum size is {max_size_mb}MB.",
                details={"size": len(pdf.content), "max_size": max_file_size},
            )

    def parse_generate_request(self) -> GenerateSignatureRequest:
        """Parse the JSON body of a signature generation request.

        Raises:
            BadRequestError: If the body is not JSON or names are missing
        """
        try:
            payload = self.app.current_event.json_body
        except (json.JSONDecodeError, TypeError) as e:
            raise BadRequestError(f"Request body must be JSON: {e}")

        if not isinstance(payload, dict):
            raise BadRequestError("Request body must be a JSON object")

        try:
            return GenerateSignatureRequest(**payload)
        except ValidationError as e:
            raise BadRequestError(
                "First name and last name are required",
                details=_validation_details(e),
            )


def _validation_details(e: ValidationError) -> dict:
    """JSON-safe summary of a pydantic validation error."""
    return {
        "errors": e.errors(
            include_url=False, include_context=False, include_input=False
        )
    }
