"""Runtime configuration loaded from the process environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from youtube_seo.constants import DEFAULT_IMAGE_MODEL, DEFAULT_TEXT_MODEL, INTERSTITIAL_SECONDS
from youtube_seo.errors import StartupConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Immutable settings handed to the content client and controllers."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., min_length=1, repr=False)
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    interstitial_seconds: float = Field(INTERSTITIAL_SECONDS, ge=0)
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    When ``environ`` is omitted, a ``.env`` file found from the working
    directory upwards is loaded first and ``os.environ`` is used.

    Raises:
        StartupConfigurationError: If neither GEMINI_API_KEY nor API_KEY is set.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    api_key = (environ.get("GEMINI_API_KEY") or environ.get("API_KEY") or "").strip()
    if not api_key:
        raise StartupConfigurationError(
            "GEMINI_API_KEY environment variable not set. "
            "Get your API key from https://ai.google.dev/"
        )

    try:
        interstitial_seconds = float(
            environ.get("INTERSTITIAL_SECONDS", str(INTERSTITIAL_SECONDS))
        )
    except ValueError as e:
        raise StartupConfigurationError(
            f"INTERSTITIAL_SECONDS must be a number: {environ.get('INTERSTITIAL_SECONDS')!r}"
        ) from e

    return Settings(
        api_key=api_key,
        text_model=environ.get("TEXT_MODEL", DEFAULT_TEXT_MODEL),
        image_model=environ.get("IMAGE_MODEL", DEFAULT_IMAGE_MODEL),
        interstitial_seconds=max(interstitial_seconds, 0.0),
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str) -> None:
    """Apply the service log format at the requested level."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    logger.debug("Logging configured at %s", level)
