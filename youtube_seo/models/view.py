"""Render-ready view models consumed by the browser page."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from youtube_seo.models.content import YouTubeContent

ScoreBandName = Literal["high", "medium", "low"]
CopyField = Literal["titles", "description", "tags", "keywordAnalysis"]


class ScoreGauge(BaseModel):
    """Circular SEO score gauge geometry."""

    score: int
    band: ScoreBandName
    color: str
    size: int
    stroke_width: int
    radius: float
    circumference: float
    dash_offset: float = Field(..., description="Unfilled arc length; 0 means a full ring.")


class CopyBlock(BaseModel):
    """A piece of text with its own copy button."""

    key: str = Field(..., description="Copy key, e.g. 'titles:0' or 'tags'.")
    label: str
    text: str


class ThumbnailDownload(BaseModel):
    index: int = Field(..., ge=1, description="1-based position in the grid.")
    url: str
    filename: str


class ResultView(BaseModel):
    content: YouTubeContent
    score: ScoreGauge
    copy_blocks: list[CopyBlock]
    thumbnails: list[ThumbnailDownload]


class StateSummary(BaseModel):
    kind: Literal["idle", "loading", "interstitial", "displaying", "failed"]
    message: Optional[str] = None
