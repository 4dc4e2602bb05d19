"""Handler for signing uploaded PDFs (POST /api/process-pdf-with-position).

This module parses the multipart upload, stamps the signature image onto the
requested page and returns the signed PDF as a binary download.
"""

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, Response
from aws_lambda_powertools.logging import Logger

from ..config.app import AppConfig
from ..services.request_parser import RequestParsingService
from ..services.signing import SigningService


def content_disposition(filename: str) -> str:
    """Attachment header value with quotes and line breaks removed from the name."""
    safe_name = "".join(c for c in filename if c not in '"\r\n') or "signed.pdf"
    return f'attachment; filename="{safe_name}"'


def handle_sign_document(
    app: APIGatewayHttpResolver,
    app_config: AppConfig,
    signing_service: SigningService,
    logger: Logger,
) -> Response:
    """Handle POST /api/process-pdf-with-position requests.

    Args:
        app: The API Gateway resolver instance
        app_config: Application configuration
        signing_service: Service that downloads the signature and stamps it
        logger: Logger instance

    Returns:
        Response carrying the signed PDF

    Raises:
        BadRequestError: If the form is malformed or required fields are missing
        PayloadTooLargeError: If the PDF exceeds the configured size limit
        ImageDownloadError: If the signature image can't be downloaded
        DocumentLoadError: If the upload is not a parseable PDF
        EmptyDocumentError: If the PDF has no pages
        ImageEmbedError: If the signature image is not a PNG
    """
    parser_service = RequestParsingService(app, logger)

    # 1. Parse request content - will raise BadRequestError if invalid
    body, content_type = parser_service.get_multipart_content()
    form_data = parser_service.parse_sign_form(body, content_type)

    # 2. Validate form data - will raise BadRequestError if invalid
    parser_service.validate_sign_form(form_data, app_config.max_file_size)

    logger.info(
        f"Processing PDF with positioned signature: {form_data.pdf.file_name}",
        extra={
            "position_x": form_data.positionX,
            "position_y": form_data.positionY,
            "page": form_data.page,
        },
    )

    # 3. Sign the document
    signed = signing_service.sign(
        form_data.pdf.content, form_data.pdf.file_name, form_data
    )

    # 4. Binary body - resolver will base64 encode it
    return Response(
        status_code=200,
        content_type="application/pdf",
        body=signed.content,
        headers={
            "Content-Disposition": content_disposition(signed.filename),
        },
    )
