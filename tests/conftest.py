import asyncio
from typing import Optional

import pytest

from youtube_seo.errors import TextGenerationFailure, ThumbnailGenerationFailure
from youtube_seo.models import YouTubeContent

SAMPLE_PAYLOAD = {
    "titles": [
        "Sourdough for Beginners: Foolproof Loaf",
        "I Baked Sourdough for 30 Days, Here's What I Learned",
        "The Only Sourdough Recipe You Need",
    ],
    "description": "Learn to bake a crusty sourdough loaf at home.\n\n#sourdough #baking #bread",
    "tags": [
        "sourdough",
        "sourdough bread",
        "how to bake bread",
        "sourdough starter",
        "bread recipe",
        "baking",
        "homemade bread",
        "artisan bread",
        "beginner baking",
        "bread tutorial",
    ],
    "seoScore": 82,
    "scoreJustification": "Strong keyword coverage with high-intent titles.",
    "keywordAnalysis": "'sourdough bread' has high search volume and moderate competition.",
}


def sample_content(**overrides) -> YouTubeContent:
    return YouTubeContent.model_validate({**SAMPLE_PAYLOAD, **overrides})


class FakeProvider:
    """Deterministic in-memory provider that records every call."""

    def __init__(
        self,
        content: Optional[YouTubeContent] = None,
        fail_text: bool = False,
        fail_thumbnail_at: Optional[int] = None,
        delay: float = 0.0,
    ):
        self.content = content or sample_content()
        self.fail_text = fail_text
        self.fail_thumbnail_at = fail_thumbnail_at
        self.delay = delay
        self.text_calls: list[str] = []
        self.thumbnail_calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.text_calls) + len(self.thumbnail_calls)

    async def generate_text_content(self, topic: str) -> YouTubeContent:
        self.text_calls.append(topic)
        await asyncio.sleep(self.delay)
        if self.fail_text:
            raise TextGenerationFailure()
        return self.content

    async def generate_thumbnail(self, prompt: str) -> str:
        index = len(self.thumbnail_calls)
        self.thumbnail_calls.append(prompt)
        await asyncio.sleep(self.delay)
        if self.fail_thumbnail_at == index:
            raise ThumbnailGenerationFailure()
        return f"data:image/png;base64,thumb{index}"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def provider():
    return FakeProvider()
