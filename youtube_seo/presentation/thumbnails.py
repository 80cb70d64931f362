"""Thumbnail grid entries and their download filenames."""

import re

from youtube_seo.constants import MAX_FILENAME_STEM_LENGTH
from youtube_seo.models.content import ThumbnailSet
from youtube_seo.models.view import ThumbnailDownload


def sanitize_topic(topic: str) -> str:
    """
    Make a topic safe to embed in a filename.

    - Collapse whitespace runs into hyphens
    - Replace special characters except alphanumeric, hyphens, underscores
    - Limit length to 100 chars
    """
    stem = re.sub(r"\s+", "-", topic.strip())
    stem = re.sub(r"[^a-zA-Z0-9_-]", "_", stem)
    return stem[:MAX_FILENAME_STEM_LENGTH]


def thumbnail_filename(topic: str, index: int) -> str:
    """Download name for the 1-based ``index``-th thumbnail."""
    return f"thumbnail-{sanitize_topic(topic)}-{index}.png"


def thumbnail_downloads(thumbnails: ThumbnailSet, topic: str) -> list[ThumbnailDownload]:
    return [
        ThumbnailDownload(index=index, url=url, filename=thumbnail_filename(topic, index))
        for index, url in enumerate(thumbnails.images, 1)
    ]
