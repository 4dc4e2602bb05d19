"""API models for request/response handling."""

from .requests import FileContent, GenerateSignatureRequest, SignPdfForm
from .responses import (
    APIErrorResponse,
    HealthResponse,
    SignatureMetadataResponse,
    SignatureResponse,
    VersionResponse,
)

__all__ = [
    # Requests
    'FileContent',
    'GenerateSignatureRequest',
    'SignPdfForm',

    # Responses
    'APIErrorResponse',
    'HealthResponse',
    'SignatureMetadataResponse',
    'SignatureResponse',
    'VersionResponse',
]
