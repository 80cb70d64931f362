"""Models package for the YouTube SEO Content Generator.

This package organizes models by domain:
- content: Generated text and thumbnails
- state: Controller UI states
- view: Render-ready view models
- api: HTTP request/response payloads
"""

# API models
from youtube_seo.models.api import (
    ApiError,
    CopyRequest,
    CopyResponse,
    GenerateContentRequest,
    SessionView,
)

# Content models
from youtube_seo.models.content import GenerationRequest, ThumbnailSet, YouTubeContent

# State models
from youtube_seo.models.state import (
    BUSY_STATES,
    Displaying,
    Failed,
    Idle,
    Interstitial,
    Loading,
    UIState,
)

# View models
from youtube_seo.models.view import (
    CopyBlock,
    CopyField,
    ResultView,
    ScoreGauge,
    StateSummary,
    ThumbnailDownload,
)

__all__ = [
    # Content
    "GenerationRequest",
    "ThumbnailSet",
    "YouTubeContent",
    # State
    "BUSY_STATES",
    "Displaying",
    "Failed",
    "Idle",
    "Interstitial",
    "Loading",
    "UIState",
    # View
    "CopyBlock",
    "CopyField",
    "ResultView",
    "ScoreGauge",
    "StateSummary",
    "ThumbnailDownload",
    # API
    "ApiError",
    "CopyRequest",
    "CopyResponse",
    "GenerateContentRequest",
    "SessionView",
]
