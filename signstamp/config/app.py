import os
from pathlib import Path
from typing import Callable, Optional, TypeVar

from aws_lambda_powertools.logging import Logger
from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = Logger()

T = TypeVar("T", int, float)

DEFAULT_SIGNATURE_API_URL = "https://onlinesignatures.net/api/get-signatures-data"
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


class PlacementConfig(BaseModel):
    """Defaults and limits applied when stamping a signature onto a page.

    Coordinates use the top-left convention: ``default_y`` is the distance
    from the top edge of the page to the top edge of the signature.
    """

    default_x: float = Field(default=200.0, description="Default X position")
    default_y: float = Field(
        default=400.0, description="Default Y position, measured from the top"
    )
    default_page: int = Field(default=1, ge=1, description="Default page (1-based)")
    max_width_fraction: float = Field(
        default=0.25,
        gt=0,
        le=1,
        description="Maximum signature width as a fraction of the page width",
    )
    max_height_fraction: float = Field(
        default=0.10,
        gt=0,
        le=1,
        description="Maximum signature height as a fraction of the page height",
    )


class AppConfig(BaseModel):
    """Application configuration."""

    app_env: str = Field(
        description="Application environment (local, dev or prod)"
    )
    version: str = Field(description="Application version")
    commit_hash: str = Field(description="Commit hash")
    placement: PlacementConfig = Field(
        default_factory=PlacementConfig,
        description="Signature placement defaults",
    )
    max_file_size: int = Field(
        default=DEFAULT_MAX_FILE_SIZE,
        gt=0,
        description="Maximum accepted PDF upload size in bytes",
    )
    signature_api_url: str = Field(
        default=DEFAULT_SIGNATURE_API_URL,
        description="Endpoint of the signature image provider",
    )
    http_timeout: float = Field(
        default=15.0, gt=0, description="Timeout for outbound HTTP calls in seconds"
    )
    allowed_origin: str = Field(default="*", description="CORS allowed origin")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables.

        In 'local' mode (default), it first loads variables from a .env file.
        In 'dev' and 'prod' modes, it reads directly from environment variables.
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": dotenv_path})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        placement = PlacementConfig(
            default_x=_env_float("SIGNATURE_X", 200.0),
            default_y=_env_float("SIGNATURE_Y", 400.0),
            default_page=_env_int("SIGNATURE_PAGE", 1),
            max_width_fraction=_env_float("SIGNATURE_MAX_WIDTH_FRACTION", 0.25),
            max_height_fraction=_env_float("SIGNATURE_MAX_HEIGHT_FRACTION", 0.10),
        )

        return cls(
            app_env=app_env,
            version=os.getenv("VERSION", "unknown"),
            commit_hash=os.getenv("COMMIT_HASH", "unknown"),
            placement=placement,
            max_file_size=_env_int("MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE),
            signature_api_url=os.getenv("SIGNATURE_API_URL")
            or DEFAULT_SIGNATURE_API_URL,
            http_timeout=_env_float("HTTP_TIMEOUT", 15.0),
            allowed_origin=os.getenv("ALLOWED_ORIGIN") or "*",
        )


def _env_float(name: str, default: float) -> float:
    value = _parse_env(name, float)
    return default if value is None else value


def _env_int(name: str, default: int) -> int:
    value = _parse_env(name, int)
    return default if value is None else value


def _parse_env(name: str, cast: Callable[[str], T]) -> Optional[T]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return cast(raw)
    except ValueError:
        logger.warning(
            "Ignoring unparseable environment variable",
            extra={"variable": name, "value": raw},
        )
        return None
