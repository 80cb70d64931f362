"""Capability interface for content providers."""

from typing import Protocol

from youtube_seo.models.content import YouTubeContent


class ContentProvider(Protocol):
    """Text and image generation, one best-effort call each.

    Implementations raise ``GenerationFailure`` subclasses on any failure.
    """

    async def generate_text_content(self, topic: str) -> YouTubeContent: ...

    async def generate_thumbnail(self, prompt: str) -> str: ...
