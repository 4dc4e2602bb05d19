"""
Module to open a PDF document, stamp raster images onto its pages and save it
"""

import io

import pypdfium2 as pdfium
from PIL import Image

from ..middleware.exceptions import (
    DocumentLoadError,
    DocumentProcessingError,
    ImageEmbedError,
)
from ..models.domain import PageGeometry, ResolvedPlacement, ScaledImageBox
from .coordinates import fit_to_box

SUPPORTED_IMAGE_FORMAT = "PNG"


class EmbeddedImage:
    """A decoded raster image ready to be drawn onto a page."""

    def __init__(self, image: Image.Image):
        self.image = image
        self.width, self.height = image.size

    def fit_to_box(self, max_width: float, max_height: float) -> ScaledImageBox:
        """Scale the image uniformly to fit into max_width x max_height."""
        return fit_to_box(self.width, self.height, max_width, max_height)


class PdfiumPage:
    """A single page of a PdfiumDocument."""

    def __init__(self, document: "PdfiumDocument", page: pdfium.PdfPage):
        self.document = document
        self.page = page

    def size(self) -> PageGeometry:
        """
        Read the page size from the MediaBox.

        The size is taken before /Rotate is applied so that it matches the
        space images are drawn in.

        Returns:
            PageGeometry: Page width and height in points.
        """
        left, bottom, right, top = self.page.get_mediabox()
        return PageGeometry(width=right - left, height=top - bottom)

    def draw(self, image: EmbeddedImage, placement: ResolvedPlacement) -> None:
        """
        Draw an image onto the page.

        Args:
            image (EmbeddedImage): The image to draw.
            placement (ResolvedPlacement): Target rectangle in native page coordinates.

        Raises:
            DocumentProcessingError: If PDFium fails to insert the image.
        """
        try:
            image_obj = pdfium.PdfImage.new(self.document.pdf)
            bitmap = pdfium.PdfBitmap.from_pil(image.image)
            image_obj.set_bitmap(bitmap, pages=[self.page])
            bitmap.close()

            # placement is relative to the MediaBox lower-left corner
            left, bottom, _, _ = self.page.get_mediabox()

            # image objects occupy the unit square until transformed
            matrix = (
                pdfium.PdfMatrix()
                .scale(placement.width, placement.height)
                .translate(left + placement.x, bottom + placement.y)
            )
            image_obj.set_matrix(matrix)

            self.page.insert_obj(image_obj)
            self.page.gen_content()
        except pdfium.PdfiumError as e:
            raise DocumentProcessingError(
                "Failed to draw signature onto page",
                details={"error": str(e)},
            ) from e


class PdfiumDocument:
    """PDF document backed by pypdfium2.

    The document is owned by whoever loaded it and must be closed after use.
    """

    def __init__(self, pdf: pdfium.PdfDocument):
        self.pdf = pdf

    @classmethod
    def load(cls, data: bytes) -> "PdfiumDocument":
        """
        Parse a PDF document from bytes.

        Args:
            data (bytes): The PDF file content.

        Returns:
            PdfiumDocument: The loaded document.

        Raises:
            DocumentLoadError: If the bytes are not a parseable PDF.
        """
        if not data:
            raise DocumentLoadError("PDF file is empty")
        try:
            # copy so PDFium never holds a reference to the caller's buffer
            pdf = pdfium.PdfDocument(bytes(data))
        except (pdfium.PdfiumError, ValueError) as e:
            raise DocumentLoadError(
                "Failed to load PDF document", details={"error": str(e)}
            ) from e
        return cls(pdf)

    def pages(self) -> list[PdfiumPage]:
        """Return the pages of the document in order."""
        return [PdfiumPage(self, self.pdf[i]) for i in range(len(self.pdf))]

    def embed_png(self, data: bytes) -> EmbeddedImage:
        """
        Decode PNG bytes into an image that can be drawn onto pages.

        Args:
            data (bytes): PNG file content.

        Returns:
            EmbeddedImage: The decoded image.

        Raises:
            ImageEmbedError: If the bytes are not a valid PNG image.
        """
        try:
            image = Image.open(io.BytesIO(data))
            if image.format != SUPPORTED_IMAGE_FORMAT:
                raise ImageEmbedError(
                    f"Unsupported signature image format: {image.format}",
                    details={"format": image.format},
                )
            image.load()
        except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
            raise ImageEmbedError(
                "Failed to decode signature image", details={"error": str(e)}
            ) from e

        mode = "RGBA" if "A" in image.mode or "transparency" in image.info else "RGB"
        return EmbeddedImage(image.convert(mode))

    def serialize(self) -> bytes:
        """
        Save the document to bytes.

        Raises:
            DocumentProcessingError: If PDFium fails to save the document.
        """
        buffer = io.BytesIO()
        try:
            self.pdf.save(buffer)
        except pdfium.PdfiumError as e:
            raise DocumentProcessingError(
                "Failed to save PDF document", details={"error": str(e)}
            ) from e
        return buffer.getvalue()

    def close(self) -> None:
        """Release the PDFium document."""
        self.pdf.close()
