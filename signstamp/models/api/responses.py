"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..domain import SignatureMetadata


class APIErrorResponse(BaseModel):
    """Standardized error response for API endpoints.

    Attributes:
        error: Human-readable error message
        code: Error code string
        details: Additional error context or details
    """
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Error code string")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")


class VersionResponse(BaseModel):
    """Response for GET /version endpoint."""
    version: str = Field(..., description="API version string")


class HealthResponse(BaseModel):
    """Response for GET /api/health endpoint."""
    status: str = Field("OK", description="Service status")
    timestamp: datetime = Field(..., description="Server time")
    environment: str = Field(..., description="Application environment")


class SignatureMetadataResponse(BaseModel):
    """Signature metadata in camelCase, as the web client expects it."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    provider: str
    typography_key: str
    used_style: int
    generated_at: datetime

    @classmethod
    def from_domain(cls, metadata: SignatureMetadata) -> "SignatureMetadataResponse":
        return cls(**metadata.model_dump())


class SignatureResponse(BaseModel):
    """Response for POST /api/generate-signature endpoint."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    image_url: str = Field(..., description="URL of the generated signature image")
    metadata: SignatureMetadataResponse = Field(..., description="Generation details")
