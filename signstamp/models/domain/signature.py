"""Signature image domain models."""

from datetime import datetime, timezone

from typing import Optional

from pydantic import BaseModel, Field


class SignatureMetadata(BaseModel):
    """Details of how a signature image was produced."""

    first_name: str
    last_name: str
    provider: str = Field(..., description="Provider key picked from the API response")
    typography_key: str = Field(..., description="Typography variant requested")
    used_style: int = Field(..., ge=0, description="Style index sent to the API")
    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class GeneratedSignature(BaseModel):
    """A signature image fetched from the provider."""

    image_bytes: Optional[bytes] = Field(None, description="Image content, if downloaded")
    image_url: str
    metadata: SignatureMetadata
