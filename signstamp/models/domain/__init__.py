"""Domain models for the SignStamp service."""

from .placement import (
    PageGeometry,
    PlacementPosition,
    ResolvedPlacement,
    ScaledImageBox,
    SignedDocument,
)
from .signature import GeneratedSignature, SignatureMetadata

__all__ = [
    "PageGeometry",
    "PlacementPosition",
    "ResolvedPlacement",
    "ScaledImageBox",
    "SignedDocument",
    "GeneratedSignature",
    "SignatureMetadata",
]
