"""SEO score gauge: band and arc geometry as pure functions of the score."""

import math
from enum import Enum

from youtube_seo.constants import (
    SCORE_BAND_COLORS,
    SCORE_GAUGE_SIZE,
    SCORE_GAUGE_STROKE_WIDTH,
    SCORE_HIGH_THRESHOLD,
    SCORE_MEDIUM_THRESHOLD,
    SEO_SCORE_MAX,
    SEO_SCORE_MIN,
)
from youtube_seo.models.view import ScoreGauge


class ScoreBand(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def color(self) -> str:
        return SCORE_BAND_COLORS[self.value]


def score_band(score: int) -> ScoreBand:
    """>= 75 high, [40, 75) medium, < 40 low."""
    if score >= SCORE_HIGH_THRESHOLD:
        return ScoreBand.HIGH
    if score >= SCORE_MEDIUM_THRESHOLD:
        return ScoreBand.MEDIUM
    return ScoreBand.LOW


def score_gauge(
    score: int,
    size: int = SCORE_GAUGE_SIZE,
    stroke_width: int = SCORE_GAUGE_STROKE_WIDTH,
) -> ScoreGauge:
    """
    Compute the circular gauge for a score.

    The filled arc is proportional to the score: the dash offset is the
    unfilled part of the circumference.

    Args:
        score: SEO score, clamped to [0, 100] for the arc.
        size: Gauge width/height in px.
        stroke_width: Ring thickness in px.
    """
    clamped = min(max(score, SEO_SCORE_MIN), SEO_SCORE_MAX)
    radius = size / 2 - stroke_width / 2
    circumference = 2 * math.pi * radius
    dash_offset = circumference - (clamped / SEO_SCORE_MAX) * circumference
    band = score_band(score)

    return ScoreGauge(
        score=score,
        band=band.value,
        color=band.color,
        size=size,
        stroke_width=stroke_width,
        radius=radius,
        circumference=circumference,
        dash_offset=dash_offset,
    )
