"""Assemble render-ready views from controller state."""

from __future__ import annotations

from typing import Optional

from youtube_seo.constants import INTERSTITIAL_MESSAGE, LOADING_MESSAGE, TAGS_COPY_SEPARATOR
from youtube_seo.models.content import ThumbnailSet, YouTubeContent
from youtube_seo.models.state import Displaying, Failed, Idle, Interstitial, Loading, UIState
from youtube_seo.models.view import CopyBlock, CopyField, ResultView, StateSummary
from youtube_seo.presentation.score import score_gauge
from youtube_seo.presentation.thumbnails import thumbnail_downloads


def copy_key(field: CopyField, index: Optional[int] = None) -> str:
    """Key identifying one copy button, e.g. 'titles:2' or 'tags'."""
    return f"{field}:{index}" if field == "titles" else field


def copy_text(content: YouTubeContent, field: CopyField, index: Optional[int] = None) -> str:
    """
    Text placed on the clipboard for a copy button.

    Titles are copied one at a time; tags are copied as one comma-separated block.

    Raises:
        IndexError: If ``field`` is 'titles' and ``index`` is missing or out of range.
    """
    if field == "titles":
        if index is None or not 0 <= index < len(content.titles):
            raise IndexError(f"Title index {index} out of range (0-{len(content.titles) - 1})")
        return content.titles[index]
    if field == "description":
        return content.description
    if field == "tags":
        return TAGS_COPY_SEPARATOR.join(content.tags)
    return content.keyword_analysis


def copy_blocks(content: YouTubeContent) -> list[CopyBlock]:
    blocks = [
        CopyBlock(key=copy_key("titles", i), label=f"Title {i + 1}", text=title)
        for i, title in enumerate(content.titles)
    ]
    blocks.append(
        CopyBlock(key="keywordAnalysis", label="Keyword Analysis", text=content.keyword_analysis)
    )
    blocks.append(CopyBlock(key="description", label="Description", text=content.description))
    blocks.append(CopyBlock(key="tags", label="Tags", text=copy_text(content, "tags")))
    return blocks


def build_result_view(content: YouTubeContent, thumbnails: ThumbnailSet, topic: str) -> ResultView:
    return ResultView(
        content=content,
        score=score_gauge(content.seo_score),
        copy_blocks=copy_blocks(content),
        thumbnails=thumbnail_downloads(thumbnails, topic),
    )


def summarize_state(state: UIState) -> StateSummary:
    """Short status line for the page."""
    if isinstance(state, Idle):
        return StateSummary(kind="idle", message=state.validation_message)
    if isinstance(state, Loading):
        return StateSummary(kind="loading", message=LOADING_MESSAGE)
    if isinstance(state, Interstitial):
        return StateSummary(kind="interstitial", message=INTERSTITIAL_MESSAGE)
    if isinstance(state, Failed):
        return StateSummary(kind="failed", message=state.validation_message or state.message)
    return StateSummary(kind="displaying", message=state.validation_message)


def result_for_state(state: UIState, topic: Optional[str]) -> Optional[ResultView]:
    """Only Displaying exposes a result; every other state hides it."""
    if isinstance(state, Displaying):
        return build_result_view(state.content, state.thumbnails, topic or "")
    return None
