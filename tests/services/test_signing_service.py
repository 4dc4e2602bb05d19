"""Unit tests for the signing service."""

import unittest
from unittest.mock import MagicMock

from signstamp.clients.signature_api import SignatureAPIClient
from signstamp.middleware.exceptions import EmptyDocumentError, ImageDownloadError
from signstamp.models.api.requests import SignPdfForm
from signstamp.models.domain import (
    PageGeometry,
    PlacementPosition,
    ResolvedPlacement,
    SignedDocument,
)
from signstamp.pdf_processor.placer import SignaturePlacer
from signstamp.services.signing import SigningService


class TestSigningService(unittest.TestCase):
    """Test cases for SigningService."""

    def setUp(self):
        """Set up test fixtures."""
        self.mock_placer = MagicMock(spec=SignaturePlacer)
        self.mock_client = MagicMock(spec=SignatureAPIClient)
        self.mock_client.download_image.return_value = b"png-bytes"
        self.mock_placer.place_signature.return_value = SignedDocument(
            content=b"%PDF-signed",
            page_index=1,
            page=PageGeometry(width=612, height=792),
            placement=ResolvedPlacement(x=200, y=341, width=153, height=51),
        )
        self.service = SigningService(self.mock_placer, self.mock_client)

    def test_sign_success(self):
        # Arrange
        form = SignPdfForm(
            signatureImageUrl="https://img/sig.png",
            positionX="150",
            positionY="300.5",
            page="2",
            firstName="Jane",
            lastName="Doe",
        )

        # Act
        result = self.service.sign(b"%PDF", "contract.pdf", form)

        # Assert
        self.mock_client.download_image.assert_called_once_with("https://img/sig.png")
        self.mock_placer.place_signature.assert_called_once_with(
            b"%PDF", b"png-bytes", PlacementPosition(x=150, y=300.5, page=2)
        )
        self.assertEqual(b"%PDF-signed", result.content)
        self.assertEqual("contract.pdf", result.filename)
        self.assertEqual(2, result.metadata["page"])
        self.assertEqual("Jane Doe", result.metadata["fullName"])
        self.assertEqual(200, result.metadata["placement"]["x"])
        self.assertIn("processedAt", result.metadata)

    def test_sign_without_position_uses_placer_defaults(self):
        form = SignPdfForm(signatureImageUrl="https://img/sig.png", positionX="")

        result = self.service.sign(b"%PDF", None, form)

        self.mock_placer.place_signature.assert_called_once_with(
            b"%PDF", b"png-bytes", PlacementPosition()
        )
        self.assertEqual("signed.pdf", result.filename)
        self.assertNotIn("fullName", result.metadata)

    def test_sign_download_failure_skips_placement(self):
        self.mock_client.download_image.side_effect = ImageDownloadError()
        form = SignPdfForm(signatureImageUrl="https://img/sig.png")

        with self.assertRaises(ImageDownloadError):
            self.service.sign(b"%PDF", "a.pdf", form)
        self.mock_placer.place_signature.assert_not_called()

    def test_sign_propagates_placement_errors(self):
        self.mock_placer.place_signature.side_effect = EmptyDocumentError()
        form = SignPdfForm(signatureImageUrl="https://img/sig.png")

        with self.assertRaises(EmptyDocumentError):
            self.service.sign(b"%PDF", "a.pdf", form)
