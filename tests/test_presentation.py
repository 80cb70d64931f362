import asyncio
import math

import pytest

from youtube_seo.models import Displaying, Failed, Idle, ThumbnailSet
from youtube_seo.presentation import (
    CopyConfirmations,
    ScoreBand,
    build_result_view,
    copy_key,
    copy_text,
    result_for_state,
    sanitize_topic,
    score_band,
    score_gauge,
    summarize_state,
    thumbnail_filename,
)

from tests.conftest import sample_content


@pytest.mark.parametrize(
    "score, band",
    [
        (90, ScoreBand.HIGH),
        (75, ScoreBand.HIGH),
        (74, ScoreBand.MEDIUM),
        (60, ScoreBand.MEDIUM),
        (40, ScoreBand.MEDIUM),
        (39, ScoreBand.LOW),
        (20, ScoreBand.LOW),
        (0, ScoreBand.LOW),
        (100, ScoreBand.HIGH),
    ],
)
def test_score_band_thresholds(score, band):
    assert score_band(score) is band


def test_score_gauge_arc_is_proportional():
    gauge = score_gauge(75)

    assert gauge.radius == 55
    assert gauge.circumference == pytest.approx(2 * math.pi * 55)
    assert gauge.dash_offset == pytest.approx(gauge.circumference * 0.25)
    assert gauge.band == "high"
    assert gauge.color == ScoreBand.HIGH.color


def test_score_gauge_extremes():
    assert score_gauge(100).dash_offset == pytest.approx(0)
    empty = score_gauge(0)
    assert empty.dash_offset == pytest.approx(empty.circumference)


def test_score_gauge_is_deterministic():
    assert score_gauge(40) == score_gauge(40)


@pytest.mark.parametrize(
    "topic, expected",
    [
        ("How to bake a sourdough bread", "thumbnail-How-to-bake-a-sourdough-bread-1.png"),
        ("  spaced   out  ", "thumbnail-spaced-out-1.png"),
        ("../etc/passwd", "thumbnail-___etc_passwd-1.png"),
        ("Café: tips & tricks", "thumbnail-Caf__-tips-_-tricks-1.png"),
    ],
)
def test_thumbnail_filename(topic, expected):
    assert thumbnail_filename(topic, 1) == expected


def test_sanitize_topic_truncates_long_topics():
    assert len(sanitize_topic("x" * 300)) == 100


def test_copy_text_per_field():
    content = sample_content()

    assert copy_text(content, "titles", 1) == content.titles[1]
    assert copy_text(content, "description") == content.description
    assert copy_text(content, "keywordAnalysis") == content.keyword_analysis
    assert copy_text(content, "tags") == ", ".join(content.tags)


@pytest.mark.parametrize("index", [None, 3, -1])
def test_copy_text_rejects_bad_title_index(index):
    with pytest.raises(IndexError):
        copy_text(sample_content(), "titles", index)


def test_copy_key():
    assert copy_key("titles", 2) == "titles:2"
    assert copy_key("tags") == "tags"


def test_result_view_bundles_gauge_copy_blocks_and_downloads():
    content = sample_content()
    thumbnails = ThumbnailSet(images=["data:a", "data:b", "data:c"])

    view = build_result_view(content, thumbnails, "Sourdough basics")

    assert view.score.score == 82
    assert [b.key for b in view.copy_blocks] == [
        "titles:0",
        "titles:1",
        "titles:2",
        "keywordAnalysis",
        "description",
        "tags",
    ]
    assert [t.filename for t in view.thumbnails] == [
        "thumbnail-Sourdough-basics-1.png",
        "thumbnail-Sourdough-basics-2.png",
        "thumbnail-Sourdough-basics-3.png",
    ]
    assert view.thumbnails[0].url == "data:a"


@pytest.mark.anyio
async def test_copy_confirmation_reverts_after_window():
    copies = CopyConfirmations(reset_after=0.05)

    copies.mark("description")
    assert copies.is_copied("description")

    await asyncio.sleep(0.1)
    assert not copies.is_copied("description")


@pytest.mark.anyio
async def test_copy_confirmations_are_independent_per_item():
    copies = CopyConfirmations(reset_after=0.2)

    copies.mark("titles:0")
    await asyncio.sleep(0.1)
    copies.mark("titles:1")
    assert copies.copied_keys() == ["titles:0", "titles:1"]

    await asyncio.sleep(0.15)
    assert copies.copied_keys() == ["titles:1"]

    await asyncio.sleep(0.15)
    assert copies.copied_keys() == []


@pytest.mark.anyio
async def test_recopy_restarts_only_that_timer():
    copies = CopyConfirmations(reset_after=0.2)
    copies.mark("tags")
    copies.mark("description")

    await asyncio.sleep(0.1)
    copies.mark("tags")
    snapshots = [copies.copied_keys()]

    await asyncio.sleep(0.15)
    snapshots.append(copies.copied_keys())

    await asyncio.sleep(0.15)
    snapshots.append(copies.copied_keys())

    assert snapshots == [["description", "tags"], ["tags"], []]


@pytest.mark.anyio
async def test_copy_confirmation_lasts_two_seconds_by_default():
    copies = CopyConfirmations()
    assert copies.reset_after == 2.0

    copies.mark("tags")
    await asyncio.sleep(1.8)
    assert copies.is_copied("tags")

    await asyncio.sleep(0.4)
    assert not copies.is_copied("tags")


@pytest.mark.anyio
async def test_clear_cancels_pending_timers():
    copies = CopyConfirmations(reset_after=10)
    copies.mark("tags")
    copies.mark("description")

    copies.clear()

    assert copies.copied_keys() == []


def test_summary_shows_validation_message_over_kept_result():
    state = Displaying(
        content=sample_content(),
        thumbnails=ThumbnailSet(images=["data:a", "data:b", "data:c"]),
        validation_message="Please enter a video topic.",
    )

    summary = summarize_state(state)

    assert summary.kind == "displaying"
    assert summary.message == "Please enter a video topic."
    assert result_for_state(state, "Sourdough").score.score == 82


def test_summary_prefers_validation_message_on_failure():
    plain = Failed(message="Failed to generate text content. Please try again.")
    flagged = plain.model_copy(update={"validation_message": "Please enter a video topic."})

    assert summarize_state(plain).message == plain.message
    assert summarize_state(flagged).message == "Please enter a video topic."
    assert result_for_state(flagged, "Sourdough") is None


def test_idle_summary_has_no_result():
    assert summarize_state(Idle()).message is None
    assert result_for_state(Idle(), None) is None
