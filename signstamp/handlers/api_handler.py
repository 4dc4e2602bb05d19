import functools
import json
from datetime import datetime, timezone

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, CORSConfig
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic_core import to_jsonable_python

from signstamp.clients.signature_api import SignatureAPIClient
from signstamp.config.app import AppConfig
from signstamp.handlers import handle_generate_signature, handle_sign_document
from signstamp.middleware.error_handler import error_handler_middleware
from signstamp.middleware.logging import logging_middleware
from signstamp.models.api import HealthResponse, SignatureResponse, VersionResponse
from signstamp.pdf_processor.placer import SignaturePlacer
from signstamp.services.signature import SignatureService
from signstamp.services.signing import SigningService

# --- Constants and Setup ---
logger = Logger()


def serialize(body) -> str:
    """Serialize route results, including pydantic models, by field alias."""
    return json.dumps(to_jsonable_python(body, by_alias=True), separators=(",", ":"))


# --- Load Configuration and Initialize Services ---
try:
    app_config = AppConfig.from_env()
    logger.info(
        "Configuration loaded successfully.",
        extra={
            "app_env": app_config.app_env,
            "version": app_config.version,
            "commit_hash": app_config.commit_hash,
            "placement": app_config.placement.model_dump(),
        },
    )
except Exception as e:
    logger.exception("CRITICAL: Failed to load configuration or initialize services.")
    # This error prevents the Lambda from functioning, raise to indicate failure
    raise RuntimeError(f"Initialization error: {e}") from e

# Configure CORS
cors_config = CORSConfig(
    allow_origin=app_config.allowed_origin,
    allow_headers=["Content-Type"],
    expose_headers=["Content-Disposition"],
)

# Initialize API Gateway resolver
app = APIGatewayHttpResolver(cors=cors_config, serializer=serialize)

# --- Initialize Global Clients ---
signature_client = SignatureAPIClient(app_config)
signature_service = SignatureService(signature_client)
signing_service = SigningService(SignaturePlacer(app_config.placement), signature_client)


# --- API Route Handlers ---
@app.get("/api/health")
def get_health() -> HealthResponse:
    """Returns service status."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc), environment=app_config.app_env
    )


@app.get("/version")
def get_version() -> VersionResponse:
    """Returns the application version."""
    display_version = f"{app_config.version}-B:{app_config.commit_hash[:7]}-{app_config.app_env[0].upper()}"
    logger.info(f"Version requested: {display_version}")
    return VersionResponse(version=display_version)


@app.post("/api/generate-signature")
def post_generate_signature() -> SignatureResponse:
    """Handle POST /api/generate-signature request."""
    return handle_generate_signature(
        app=app,
        signature_service=signature_service,
        logger=logger,
    )


@app.post("/api/process-pdf-with-position")
def post_process_pdf_route():
    """Handle POST /api/process-pdf-with-position request."""
    bound_handler = functools.partial(
        handle_sign_document,
        app=app,
        app_config=app_config,
        signing_service=signing_service,
        logger=logger,
    )
    return bound_handler()


# --- Main Lambda Entry Point ---
@error_handler_middleware
@logging_middleware
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """Main Lambda handler function.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    return app.resolve(event, context)
