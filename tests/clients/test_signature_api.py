"""Unit tests for the signature API client."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from signstamp.clients.signature_api import REQUEST_PROFILES, SignatureAPIClient
from signstamp.config.app import AppConfig
from signstamp.middleware.exceptions import ImageDownloadError, SignatureFetchError


def make_response(status_code=200, json_data=None, content=b""):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error"
        )
    return response


class TestSignatureAPIClient(unittest.TestCase):
    """Test cases for the signature API client."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = AppConfig(
            app_env="dev",
            version="1.0.0",
            commit_hash="abc1234",
            signature_api_url="https://signatures.test/api",
            http_timeout=3,
        )
        self.client = SignatureAPIClient(self.config)

        self.get_patch = patch("signstamp.clients.signature_api.requests.get")
        self.mock_get = self.get_patch.start()

    def tearDown(self):
        """Tear down test fixtures."""
        self.get_patch.stop()

    def test_fetch_signature_data_first_profile_succeeds(self):
        # Arrange
        payload = {"data": {"provider-a": {"Jane": {"image": "https://img/1.png"}}}}
        self.mock_get.return_value = make_response(json_data=payload)

        # Act
        result = self.client.fetch_signature_data("Jane", "Doe", 3)

        # Assert
        self.assertEqual(payload, result)
        self.mock_get.assert_called_once_with(
            "https://signatures.test/api",
            params={"first-name": "Jane", "last-name": "Doe", "styles": 3},
            headers=REQUEST_PROFILES[0]["headers"],
            timeout=3,
        )

    def test_fetch_signature_data_falls_back_to_next_profile(self):
        # Arrange
        payload = {"data": {"provider-a": {}}}
        self.mock_get.side_effect = [
            make_response(status_code=403),
            requests.ConnectionError("reset"),
            make_response(json_data=payload),
        ]

        # Act
        result = self.client.fetch_signature_data("Jane", "Doe", 0)

        # Assert
        self.assertEqual(payload, result)
        self.assertEqual(3, self.mock_get.call_count)
        used_headers = [c.kwargs["headers"] for c in self.mock_get.call_args_list]
        self.assertEqual([p["headers"] for p in REQUEST_PROFILES], used_headers)

    def test_fetch_signature_data_all_profiles_fail(self):
        # Arrange
        self.mock_get.return_value = make_response(status_code=429)

        # Act & Assert
        with self.assertRaises(SignatureFetchError) as ctx:
            self.client.fetch_signature_data("Jane", "Doe", 1)
        self.assertEqual(len(REQUEST_PROFILES), len(ctx.exception.details["attempts"]))
        self.assertEqual(502, ctx.exception.status_code)

    def test_fetch_signature_data_non_json_body_tries_next_profile(self):
        # Arrange
        broken = make_response()
        broken.json.side_effect = ValueError("Expecting value")
        self.mock_get.side_effect = [broken, make_response(json_data={"data": {"p": {}}})]

        # Act
        result = self.client.fetch_signature_data("Jane", "Doe", 1)

        # Assert
        self.assertEqual({"data": {"p": {}}}, result)

    def test_fetch_signature_data_missing_data_field(self):
        self.mock_get.return_value = make_response(json_data={"error": "nope"})

        with self.assertRaises(SignatureFetchError) as ctx:
            self.client.fetch_signature_data("Jane", "Doe", 1)
        self.assertIn("missing data field", str(ctx.exception))

    def test_download_image(self):
        self.mock_get.return_value = make_response(content=b"\x89PNG...")

        result = self.client.download_image("https://img/1.png")

        self.assertEqual(b"\x89PNG...", result)
        self.mock_get.assert_called_once_with(
            "https://img/1.png",
            params=None,
            headers=REQUEST_PROFILES[0]["headers"],
            timeout=3,
        )

    def test_download_image_failure(self):
        self.mock_get.side_effect = requests.Timeout("slow")

        with self.assertRaises(ImageDownloadError) as ctx:
            self.client.download_image("https://img/1.png")
        self.assertEqual("https://img/1.png", ctx.exception.details["url"])

    def test_download_image_empty_body_tries_next_profile(self):
        self.mock_get.side_effect = [
            make_response(content=b""),
            make_response(content=b"png-bytes"),
        ]

        self.assertEqual(b"png-bytes", self.client.download_image("https://img/1.png"))

    def test_custom_profiles(self):
        # Arrange
        profiles = [{"name": "only", "headers": {"X-Test": "1"}}]
        client = SignatureAPIClient(self.config, profiles=profiles)
        self.mock_get.return_value = make_response(status_code=500)

        # Act & Assert
        with self.assertRaises(ImageDownloadError):
            client.download_image("https://img/1.png")
        self.mock_get.assert_called_once()
