"""Content generation against the external AI provider."""

from youtube_seo.generation.gemini_client import GeminiContentClient
from youtube_seo.generation.prompts import (
    THUMBNAIL_STYLES,
    build_text_prompt,
    build_thumbnail_prompts,
)
from youtube_seo.generation.provider import ContentProvider

__all__ = [
    "ContentProvider",
    "GeminiContentClient",
    "THUMBNAIL_STYLES",
    "build_text_prompt",
    "build_thumbnail_prompts",
]
