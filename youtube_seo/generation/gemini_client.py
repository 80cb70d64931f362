"""Gemini/Imagen implementation of the content provider.

One text request (structured JSON output) and one image request per
thumbnail prompt. Each call is a single best-effort attempt: no retry,
no caching, failures propagate as typed GenerationFailure exceptions.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Optional

from google.genai import Client, types
from pydantic import ValidationError

from youtube_seo.config import Settings
from youtube_seo.constants import (
    EXPECTED_TAG_RANGE,
    EXPECTED_TITLE_COUNT,
    THUMBNAIL_ASPECT_RATIO,
    THUMBNAIL_DATA_URI_PREFIX,
    THUMBNAIL_IMAGE_COUNT,
    THUMBNAIL_MIME_TYPE,
)
from youtube_seo.errors import TextGenerationFailure, ThumbnailGenerationFailure
from youtube_seo.generation.prompts import TEXT_RESPONSE_SCHEMA, build_text_prompt
from youtube_seo.models.content import YouTubeContent

logger = logging.getLogger(__name__)


class GeminiContentClient:
    """
    Content provider backed by the google-genai SDK.

    Example:
        >>> client = GeminiContentClient(load_settings())
        >>> content = await client.generate_text_content("How to bake sourdough")
        >>> print(content.titles[0])
    """

    def __init__(self, settings: Settings, client: Optional[Client] = None):
        """
        Initialize the content client.

        Args:
            settings: Credentials and model names.
            client: Prebuilt SDK client. Created from ``settings.api_key`` when omitted.
        """
        self.settings = settings
        self.client = client or Client(api_key=settings.api_key)
        self.text_model = settings.text_model
        self.image_model = settings.image_model

        logger.info(
            "GeminiContentClient initialized (text=%s, image=%s)",
            self.text_model,
            self.image_model,
        )

    async def generate_text_content(self, topic: str) -> YouTubeContent:
        """
        Generate titles, description, tags and SEO scoring for a topic.

        Raises:
            TextGenerationFailure: On transport errors, unparseable JSON, or
                a payload missing any of the six required fields.
        """
        logger.debug("Requesting text content for topic %r", topic)
        try:
            response = await self.client.aio.models.generate_content(
                model=self.text_model,
                contents=build_text_prompt(topic),
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=TEXT_RESPONSE_SCHEMA,
                ),
            )
            payload = _parse_json_payload(response.text)
            content = YouTubeContent.model_validate(payload)
        except (ValueError, ValidationError) as e:
            logger.error("Malformed text content response: %s", e, exc_info=True)
            raise TextGenerationFailure() from e
        except Exception as e:
            logger.error("Error generating YouTube content: %s", e, exc_info=True)
            raise TextGenerationFailure() from e

        logger.debug(
            "Text content ready: %d titles, %d tags, score %d",
            len(content.titles),
            len(content.tags),
            content.seo_score,
        )
        _warn_on_unexpected_counts(content)
        return content

    async def generate_thumbnail(self, prompt: str) -> str:
        """
        Generate one 16:9 PNG thumbnail.

        Returns:
            The image as a ``data:image/png;base64,...`` URI.

        Raises:
            ThumbnailGenerationFailure: On transport errors or when no image comes back.
        """
        logger.debug("Requesting thumbnail: %s", prompt[:80])
        try:
            response = await self.client.aio.models.generate_images(
                model=self.image_model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=THUMBNAIL_IMAGE_COUNT,
                    output_mime_type=THUMBNAIL_MIME_TYPE,
                    aspect_ratio=THUMBNAIL_ASPECT_RATIO,
                ),
            )
        except Exception as e:
            logger.error("Error generating thumbnail: %s", e, exc_info=True)
            raise ThumbnailGenerationFailure() from e

        image_bytes = _first_image_bytes(response)
        if not image_bytes:
            logger.error("No image was generated for prompt: %s", prompt[:80])
            raise ThumbnailGenerationFailure()

        return THUMBNAIL_DATA_URI_PREFIX + base64.b64encode(image_bytes).decode("ascii")


def _parse_json_payload(text: Optional[str]) -> Any:
    """Parse the model's JSON text, tolerating a surrounding markdown code fence."""
    if not text:
        raise ValueError("Empty response body")

    result_text = text.strip()

    # Remove markdown code blocks if present
    if result_text.startswith("```"):
        lines = result_text.split("\n")
        result_text = "\n".join(line for line in lines if not line.startswith("```"))

    return json.loads(result_text)


def _first_image_bytes(response: Any) -> Optional[bytes]:
    generated = getattr(response, "generated_images", None) or []
    if not generated:
        return None
    image = getattr(generated[0], "image", None)
    return getattr(image, "image_bytes", None) if image is not None else None


def _warn_on_unexpected_counts(content: YouTubeContent) -> None:
    """Log titles or tags outside the requested counts; the content is still used."""
    min_tags, max_tags = EXPECTED_TAG_RANGE
    if len(content.titles) != EXPECTED_TITLE_COUNT:
        logger.warning("Expected %d titles, got %d", EXPECTED_TITLE_COUNT, len(content.titles))
    if not min_tags <= len(content.tags) <= max_tags:
        logger.warning("Expected %d-%d tags, got %d", min_tags, max_tags, len(content.tags))
