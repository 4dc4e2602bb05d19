"""Service for stamping signature images onto uploaded PDFs."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..clients.signature_api import SignatureAPIClient
from ..middleware.logging import logger
from ..models.api.requests import SignPdfForm
from ..pdf_processor.placer import SignaturePlacer


class SignedPdf(BaseModel):
    """A signed PDF ready to be returned to the caller."""

    content: bytes = Field(..., description="Signed PDF bytes")
    filename: str = Field(..., description="File name for the download")
    metadata: Dict[str, Any] = Field(default_factory=dict)


class SigningService:
    """Service for signing uploaded PDF documents."""

    def __init__(self, placer: SignaturePlacer, client: SignatureAPIClient) -> None:
        """Initialize signing service.

        Args:
            placer: Signature placer
            client: Client used to download signature images
        """
        self.placer = placer
        self.client = client

    def sign(
        self, pdf_bytes: bytes, filename: Optional[str], form: SignPdfForm
    ) -> SignedPdf:
        """Download the signature image and stamp it onto the PDF.

        Args:
            pdf_bytes: Uploaded PDF content
            filename: Original file name of the upload
            form: Parsed request form with the image URL and position

        Returns:
            SignedPdf with the new document bytes

        Raises:
            ImageDownloadError: If the signature image can't be downloaded
            DocumentLoadError: If the PDF can't be parsed
            EmptyDocumentError: If the PDF has no pages
            ImageEmbedError: If the signature image is not a valid PNG
        """
        position = form.to_position()
        logger.info(
            "Signing PDF",
            extra={"file_name": filename, "position": position.model_dump()},
        )

        image_bytes = self.client.download_image(form.signatureImageUrl)
        signed = self.placer.place_signature(pdf_bytes, image_bytes, position)

        metadata: Dict[str, Any] = {
            "page": signed.page_index + 1,
            "placement": signed.placement.model_dump(),
            "processedAt": datetime.now(timezone.utc).isoformat(),
        }
        if form.firstName and form.lastName:
            metadata["fullName"] = f"{form.firstName} {form.lastName}"

        logger.info("PDF signed", extra={"file_name": filename, **metadata})

        return SignedPdf(
            content=signed.content,
            filename=filename or "signed.pdf",
            metadata=metadata,
        )
