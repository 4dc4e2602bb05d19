"""Multipart form data parsing utilities.

Parses multipart/form-data bodies as API Gateway delivers them: text fields
become strings, file parts keep their raw bytes.
"""

import io
import re
from typing import Any, BinaryIO, Dict, List, Optional, Tuple, Union

CRLF = b"\r\n"
HEADER_SEPARATOR = b"\r\n\r\n"
# parameters separated by ";" outside double quotes
PARAM_PATTERN = re.compile(r'(?:[^;"]|"[^"]*")+')


class MultipartParser:
    """Parse multipart/form-data content with support for both text fields and binary files."""

    def __init__(
        self, content_type: str, body_data: Union[bytes, str, BinaryIO, io.BytesIO]
    ):
        """Initialize the parser with content type and body data.

        Args:
            content_type: The Content-Type header with boundary information
            body_data: The raw request body as bytes, text or file-like object

        Raises:
            ValueError: If the boundary is missing from Content-Type
        """
        self.boundary = extract_boundary(content_type)
        self.body_bytes = self._ensure_bytes(body_data)

    def _ensure_bytes(self, data: Union[bytes, str, BinaryIO, io.BytesIO]) -> bytes:
        if hasattr(data, "read"):
            data.seek(0)
            data = data.read()
        if isinstance(data, str):
            # API Gateway hands over non-base64 bodies as text
            return data.encode("utf-8")
        return data or b""

    def parse(self) -> Dict[str, Any]:
        """Parse multipart form data into dictionary format.

        Returns:
            Dict with form fields and file data. Files are dicts with
            file_name, content and content_type keys.
        """
        result = {}
        for part in self._split_parts():
            name, value = self._process_part(part)
            if name:
                result[name] = value
        return result

    def _split_parts(self) -> List[bytes]:
        """Split the body on the boundary delimiter, dropping preamble and epilogue."""
        delimiter = b"--" + self.boundary.encode("utf-8")
        chunks = self.body_bytes.split(delimiter)

        parts = []
        # chunks[0] is the preamble
        for chunk in chunks[1:]:
            if chunk.startswith(b"--"):
                # closing delimiter
                break
            if chunk.startswith(CRLF):
                chunk = chunk[len(CRLF):]
            if chunk.endswith(CRLF):
                chunk = chunk[: -len(CRLF)]
            if chunk:
                parts.append(chunk)
        return parts

    def _process_part(self, part: bytes) -> Tuple[Optional[str], Any]:
        """Process a single part from multipart data.

        Args:
            part: The part content as bytes

        Returns:
            Tuple of (field_name, field_value) or (None, None) if invalid
        """
        header_end = part.find(HEADER_SEPARATOR)
        if header_end == -1:
            return None, None

        headers = parse_headers(part[:header_end])
        content = part[header_end + len(HEADER_SEPARATOR):]

        if "content-disposition" not in headers:
            return None, None

        name, filename = parse_content_disposition(headers["content-disposition"])
        if not name:
            return None, None

        if filename is not None:
            return name, {
                "file_name": filename,
                "content": content,
                "content_type": headers.get("content-type", "application/octet-stream"),
            }

        return name, content.decode("utf-8", errors="replace").strip()


def extract_boundary(content_type: str) -> str:
    """Extract boundary string from a Content-Type header.

    Args:
        content_type: The Content-Type header

    Returns:
        The boundary string

    Raises:
        ValueError: If boundary is missing from Content-Type
    """
    for param in split_params(content_type)[1:]:
        key, _, value = param.strip().partition("=")
        if key.lower() == "boundary" and value:
            return value.strip('"')
    raise ValueError("Content-Type missing boundary parameter")


def split_params(header_value: str) -> List[str]:
    """Split a header value on semicolons that are not inside quoted strings."""
    return PARAM_PATTERN.findall(header_value)


def parse_headers(headers_bytes: bytes) -> Dict[str, str]:
    """Parse part headers into a dictionary with lower-cased names."""
    headers = {}
    for line in headers_bytes.split(CRLF):
        name, sep, value = line.partition(b":")
        if not sep:
            continue
        headers[name.decode("utf-8", errors="replace").strip().lower()] = value.decode(
            "utf-8", errors="replace"
        ).strip()
    return headers


def parse_content_disposition(content_disp: str) -> Tuple[Optional[str], Optional[str]]:
    """Parse Content-Disposition header to extract name and filename.

    Args:
        content_disp: The Content-Disposition header value

    Returns:
        Tuple of (name, filename), either can be None
    """
    name = None
    filename = None

    for param in split_params(content_disp):
        key, _, value = param.strip().partition("=")
        key = key.lower()
        if key == "name":
            name = value.strip("\"'")
        elif key == "filename":
            filename = value.strip("\"'")

    return name, filename
