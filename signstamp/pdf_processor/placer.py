"""Module to stamp a signature image onto a page of a PDF document"""

from typing import Callable, Optional

from aws_lambda_powertools.logging import Logger

from ..config.app import PlacementConfig
from ..middleware.exceptions import EmptyDocumentError
from ..models.domain import PlacementPosition, SignedDocument
from .coordinates import clamp, resolve
from .document import PdfiumDocument

logger = Logger()


class SignaturePlacer:
    """Places a signature image onto one page of a PDF.

    Every call loads its own document and closes it before returning, so a
    single placer can serve concurrent requests.
    """

    def __init__(
        self,
        config: Optional[PlacementConfig] = None,
        loader: Callable[[bytes], PdfiumDocument] = PdfiumDocument.load,
    ) -> None:
        """Initialize the placer.

        Args:
            config: Placement defaults and size limits
            loader: Callable that parses PDF bytes into a document
        """
        self.config = config or PlacementConfig()
        self.loader = loader

    def place(
        self,
        pdf_bytes: bytes,
        signature_image_bytes: bytes,
        position: Optional[PlacementPosition] = None,
    ) -> bytes:
        """Stamp the signature and return the serialized PDF.

        See place_signature for the placement rules.
        """
        return self.place_signature(pdf_bytes, signature_image_bytes, position).content

    def place_signature(
        self,
        pdf_bytes: bytes,
        signature_image_bytes: bytes,
        position: Optional[PlacementPosition] = None,
    ) -> SignedDocument:
        """Stamp the signature and return the PDF with the placement used.

        Out-of-range page numbers select the last page and coordinates are
        clamped so the signature stays on the page.

        Args:
            pdf_bytes: PDF file content
            signature_image_bytes: PNG file content
            position: Requested position; missing values use the config defaults

        Returns:
            SignedDocument with the new PDF bytes and the draw rectangle

        Raises:
            DocumentLoadError: If the PDF can't be parsed
            EmptyDocumentError: If the PDF has no pages
            ImageEmbedError: If the image is not a valid PNG
            DocumentProcessingError: If drawing or saving fails
        """
        position = position or PlacementPosition()

        document = self.loader(pdf_bytes)
        try:
            pages = document.pages()
            if not pages:
                raise EmptyDocumentError()

            requested_page = (
                position.page
                if position.page is not None
                else self.config.default_page
            )
            page_index = int(clamp(requested_page - 1, 0, len(pages) - 1))
            page = pages[page_index]
            geometry = page.size()

            image = document.embed_png(signature_image_bytes)
            box = image.fit_to_box(
                geometry.width * self.config.max_width_fraction,
                geometry.height * self.config.max_height_fraction,
            )

            placement = resolve(
                geometry.width,
                geometry.height,
                box.width,
                box.height,
                position.x,
                position.y,
                self.config.default_x,
                self.config.default_y,
            )
            logger.debug(
                "Resolved signature placement",
                extra={
                    "page_index": page_index,
                    "page_count": len(pages),
                    "page": geometry.model_dump(),
                    "placement": placement.model_dump(),
                },
            )

            page.draw(image, placement)
            content = document.serialize()
        finally:
            document.close()

        return SignedDocument(
            content=content,
            page_index=page_index,
            page=geometry,
            placement=placement,
        )
