"""Placement domain models.

Page geometry and resolved placements use the native PDF coordinate system
(origin at the bottom-left corner, y growing upwards). Requested positions
use the top-left convention callers think in.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PageGeometry(BaseModel):
    """Size of a page in points."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., description="Page width in points")
    height: float = Field(..., description="Page height in points")


class PlacementPosition(BaseModel):
    """Where the caller wants the signature.

    Attributes:
        x: Distance from the left edge; None means the configured default
        y: Distance from the top edge to the top of the image; None means
            the configured default
        page: Page number (1-based); None means the configured default
    """

    model_config = ConfigDict(frozen=True)

    x: Optional[float] = Field(None, description="X position from the left")
    y: Optional[float] = Field(None, description="Y position from the top")
    page: Optional[int] = Field(None, description="Page number (1-based)")


class ScaledImageBox(BaseModel):
    """Image dimensions after fitting into the signature box."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class ResolvedPlacement(BaseModel):
    """Final draw rectangle in native page coordinates."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float


class SignedDocument(BaseModel):
    """Output of a signature placement.

    Attributes:
        content: Serialized PDF bytes
        page_index: Zero-based index of the page that was signed
        page: Geometry of the signed page
        placement: Rectangle the signature was drawn at
    """

    model_config = ConfigDict(frozen=True)

    content: bytes
    page_index: int = Field(..., ge=0)
    page: PageGeometry
    placement: ResolvedPlacement
