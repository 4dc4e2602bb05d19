"""Service for generating handwritten-style signature images."""

import random
from typing import Any, Dict, List, Optional

from ..clients.signature_api import SignatureAPIClient
from ..middleware.exceptions import BadRequestError, SignatureFetchError
from ..middleware.logging import logger
from ..models.domain import GeneratedSignature, SignatureMetadata

MIN_STYLE = 0
MAX_STYLE = 8


def typography_keys(first_name: str, last_name: str) -> List[str]:
    """Name variants the provider keys its signatures by.

    For "Jane Doe": "jane Doe", "DJane", "Jdoe", "Jane", "Doe".
    """
    return [
        f"{first_name.lower()} {last_name}",
        f"{last_name[0].upper()}{first_name}",
        f"{first_name[0].upper()}{last_name.lower()}",
        first_name,
        last_name,
    ]


class SignatureService:
    """Service for fetching a random signature for a name."""

    def __init__(
        self, client: SignatureAPIClient, rng: Optional[random.Random] = None
    ) -> None:
        """Initialize signature service.

        Args:
            client: Signature API client
            rng: Random source for style, provider and typography choices
        """
        self.client = client
        self.rng = rng or random.Random()

    def generate(
        self, first_name: str, last_name: str, download: bool = True
    ) -> GeneratedSignature:
        """Generate a signature image for a name.

        Picks a random style, a random provider from the API response and a
        random typography variant, falling back to the first signature of the
        provider that has an image.

        Args:
            first_name: Signer's first name
            last_name: Signer's last name
            download: Fetch the image bytes; when False only the URL is returned

        Returns:
            GeneratedSignature with the image URL, its bytes when downloaded,
            and its metadata

        Raises:
            BadRequestError: If a name is missing or blank
            SignatureFetchError: If the provider returns no usable signature
            ImageDownloadError: If the signature image can't be downloaded
        """
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()
        if not first_name or not last_name:
            raise BadRequestError("First name and last name are required")

        logger.info(
            "Generating signature",
            extra={"first_name": first_name, "last_name": last_name},
        )

        style = self.rng.randint(MIN_STYLE, MAX_STYLE)
        payload = self.client.fetch_signature_data(first_name, last_name, style)

        data = payload["data"]
        providers = list(data.keys()) if isinstance(data, dict) else []
        if not providers:
            raise SignatureFetchError("No providers available in API response")

        provider = self.rng.choice(providers)
        typography_key = self.rng.choice(typography_keys(first_name, last_name))
        signature = self._select_signature(data[provider], typography_key)
        if signature is None:
            raise SignatureFetchError(
                f"No valid signature found for provider '{provider}'",
                details={"provider": provider},
            )

        image_url = signature["image"]
        image_bytes = self.client.download_image(image_url) if download else None

        return GeneratedSignature(
            image_bytes=image_bytes,
            image_url=image_url,
            metadata=SignatureMetadata(
                first_name=first_name,
                last_name=last_name,
                provider=provider,
                typography_key=typography_key,
                used_style=style,
            ),
        )

    @staticmethod
    def _select_signature(
        signatures: Any, typography_key: str
    ) -> Optional[Dict[str, Any]]:
        if not isinstance(signatures, dict):
            return None

        preferred = signatures.get(typography_key)
        if isinstance(preferred, dict) and preferred.get("image"):
            return preferred

        return next(
            (
                sig
                for sig in signatures.values()
                if isinstance(sig, dict) and sig.get("image")
            ),
            None,
        )
