"""Presentation helpers: score gauge, copy confirmations, downloads, views."""

from youtube_seo.presentation.clipboard import CopyConfirmations
from youtube_seo.presentation.score import ScoreBand, score_band, score_gauge
from youtube_seo.presentation.thumbnails import sanitize_topic, thumbnail_filename
from youtube_seo.presentation.views import (
    build_result_view,
    copy_key,
    copy_text,
    result_for_state,
    summarize_state,
)

__all__ = [
    "CopyConfirmations",
    "ScoreBand",
    "build_result_view",
    "copy_key",
    "copy_text",
    "result_for_state",
    "sanitize_topic",
    "score_band",
    "score_gauge",
    "summarize_state",
    "thumbnail_filename",
]
