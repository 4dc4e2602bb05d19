"""Handler for signature generation (POST /api/generate-signature)."""

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger

from ..models.api import SignatureMetadataResponse, SignatureResponse
from ..services.request_parser import RequestParsingService
from ..services.signature import SignatureService


def handle_generate_signature(
    app: APIGatewayHttpResolver,
    signature_service: SignatureService,
    logger: Logger,
) -> SignatureResponse:
    """Handle POST /api/generate-signature requests.

    Args:
        app: The API Gateway resolver instance
        signature_service: Service that fetches signatures from the provider
        logger: Logger instance

    Returns:
        SignatureResponse with the image URL and generation metadata

    Raises:
        BadRequestError: If first or last name is missing
        SignatureFetchError: If the provider returns no usable signature
        ImageDownloadError: If the signature image can't be downloaded
    """
    parser_service = RequestParsingService(app, logger)
    request = parser_service.parse_generate_request()

    signature = signature_service.generate(
        request.firstName, request.lastName, download=False
    )
    logger.info(
        "Signature generated",
        extra={
            "provider": signature.metadata.provider,
            "typography_key": signature.metadata.typography_key,
            "used_style": signature.metadata.used_style,
        },
    )

    return SignatureResponse(
        image_url=signature.image_url,
        metadata=SignatureMetadataResponse.from_domain(signature.metadata),
    )
