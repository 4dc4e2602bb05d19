"""Client wrapper for the third-party signature image provider."""

from typing import Any, Dict, List, Optional

import requests

from ..config.app import AppConfig
from ..middleware.exceptions import ImageDownloadError, SignatureFetchError
from ..middleware.logging import logger

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# Tried in order; the first successful response wins.
REQUEST_PROFILES: List[Dict[str, Any]] = [
    {
        "name": "browser",
        "headers": {
            "User-Agent": BROWSER_USER_AGENT,
            "Accept": "application/json, text/plain, */*",
            "Accept-Language": "en-US,en;q=0.9",
        },
    },
    {
        "name": "browser-referer",
        "headers": {
            "User-Agent": BROWSER_USER_AGENT,
            "Accept": "application/json, text/plain, */*",
            "Accept-Language": "en-US,en;q=0.9",
            "Origin": "https://onlinesignatures.net",
            "Referer": "https://onlinesignatures.net/",
        },
    },
    {
        "name": "plain",
        "headers": {"Accept": "*/*"},
    },
]


class SignatureAPIClient:
    """Client wrapper for the signature image API."""

    def __init__(
        self,
        config: AppConfig,
        profiles: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        """Initialize the signature API client.

        Args:
            config: Application configuration
            profiles: Request profiles to try in order, defaults to REQUEST_PROFILES
        """
        self.base_url = config.signature_api_url
        self.timeout = config.http_timeout
        self.profiles = profiles if profiles is not None else REQUEST_PROFILES

    def fetch_signature_data(
        self, first_name: str, last_name: str, style: int
    ) -> Dict[str, Any]:
        """Fetch generated signatures for a name.

        Args:
            first_name: Signer's first name
            last_name: Signer's last name
            style: Style index understood by the provider

        Returns:
            Decoded JSON payload, guaranteed to contain a "data" field

        Raises:
            SignatureFetchError: If every request profile fails or the payload is invalid
        """
        params = {"first-name": first_name, "last-name": last_name, "styles": style}
        errors = []

        for profile in self.profiles:
            try:
                response = self._get(self.base_url, profile, params=params)
                payload = response.json()
            except (requests.RequestException, ValueError) as e:
                errors.append(f"{profile['name']}: {e}")
                logger.warning(
                    "Signature API request failed",
                    extra={"profile": profile["name"], "error": str(e)},
                )
                continue

            if not isinstance(payload, dict) or not payload.get("data"):
                raise SignatureFetchError(
                    "Invalid API response: missing data field",
                    details={"profile": profile["name"]},
                )

            logger.debug(
                "Signature API request succeeded", extra={"profile": profile["name"]}
            )
            return payload

        raise SignatureFetchError(
            "Failed to fetch signature data", details={"attempts": errors}
        )

    def download_image(self, url: str) -> bytes:
        """Download a signature image.

        Args:
            url: Image URL

        Returns:
            Raw image bytes

        Raises:
            ImageDownloadError: If every request profile fails
        """
        errors = []

        for profile in self.profiles:
            try:
                response = self._get(url, profile)
            except requests.RequestException as e:
                errors.append(f"{profile['name']}: {e}")
                logger.warning(
                    "Signature image download failed",
                    extra={"profile": profile["name"], "url": url, "error": str(e)},
                )
                continue

            if not response.content:
                errors.append(f"{profile['name']}: empty body")
                continue

            return response.content

        raise ImageDownloadError(
            f"Failed to download signature image from {url}",
            details={"url": url, "attempts": errors},
        )

    def _get(
        self, url: str, profile: Dict[str, Any], params: Optional[dict] = None
    ) -> requests.Response:
        response = requests.get(
            url, params=params, headers=profile["headers"], timeout=self.timeout
        )
        response.raise_for_status()
        return response
