"""Request models for API endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ..domain import PlacementPosition


# Custom file upload model to match what the multipart parser returns for files
class FileContent(BaseModel):
    """Model for representing an uploaded file in multipart/form-data."""

    content: bytes = Field(..., description="The file content")
    content_type: str = Field(..., description="Content type of the file")
    file_name: str = Field(..., description="Original filename")


class GenerateSignatureRequest(BaseModel):
    """Request body for POST /api/generate-signature."""

    firstName: str = Field(..., min_length=1, description="Signer's first name")
    lastName: str = Field(..., min_length=1, description="Signer's last name")

    @field_validator("firstName", "lastName", mode="before")
    @classmethod
    def strip_names(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


# Pydantic Model for Multipart Form Data used in the signing handler
class SignPdfForm(BaseModel):
    """Model representing the fields of a POST /api/process-pdf-with-position request.

    Positions use the top-left convention: positionY is the distance from the
    top of the page to the top of the signature.
    """

    pdf: Optional[FileContent] = Field(None, description="PDF file upload")
    signatureImageUrl: Optional[str] = Field(
        None, description="URL of the signature image to stamp"
    )
    positionX: Optional[float] = Field(None, description="X position from the left")
    positionY: Optional[float] = Field(None, description="Y position from the top")
    page: Optional[int] = Field(None, description="Page number (1-based)")
    firstName: Optional[str] = Field(None, description="Signer's first name")
    lastName: Optional[str] = Field(None, description="Signer's last name")

    @field_validator(
        "signatureImageUrl",
        "positionX",
        "positionY",
        "page",
        "firstName",
        "lastName",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Treat empty form fields as missing."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def to_position(self) -> PlacementPosition:
        """Placement intent carried by the form."""
        return PlacementPosition(x=self.positionX, y=self.positionY, page=self.page)
