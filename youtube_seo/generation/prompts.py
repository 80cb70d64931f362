"""Prompt templates and the structured-output schema for the provider."""

from google.genai import types

TEXT_REQUIRED_FIELDS = [
    "titles",
    "description",
    "tags",
    "seoScore",
    "scoreJustification",
    "keywordAnalysis",
]

# Thumbnail variants, in display order
THUMBNAIL_STYLES = ("clickbait", "cinematic", "graphic")

_THUMBNAIL_TEMPLATES = {
    "clickbait": (
        'A visually stunning and clickbait YouTube thumbnail for a video about "{topic}". '
        "High contrast, vibrant colors, clear subject, and engaging text."
    ),
    "cinematic": (
        'An aesthetic and cinematic YouTube thumbnail for a video about "{topic}". '
        "Minimalist design, professional typography, high-quality imagery."
    ),
    "graphic": (
        'An engaging and informative graphic-style YouTube thumbnail for a video about "{topic}". '
        "Use icons, bold text overlays, and a clear visual hierarchy to convey the video's content."
    ),
}


def build_text_prompt(topic: str) -> str:
    """Prompt asking for the six-field JSON object for a video topic."""
    return f"""For a YouTube video about "{topic}", generate a JSON object with the following structure:
1. "titles": An array of 3 unique, click-worthy, and SEO-optimized titles that are likely to rank high on YouTube search.
2. "description": A detailed, SEO-friendly description for the video, including relevant keywords and 3-5 hashtags at the end.
3. "tags": An array of 10-15 relevant SEO tags.
4. "seoScore": An integer score from 0 to 100 representing the overall SEO potential of the generated content.
5. "scoreJustification": A brief, 1-2 sentence explanation for the given SEO score.
6. "keywordAnalysis": A short analysis of the main keywords, simulating insights from SEO tools, focusing on search volume, competition, and relevance."""


def build_thumbnail_prompts(topic: str) -> list[str]:
    """One image prompt per thumbnail style, in THUMBNAIL_STYLES order."""
    return [_THUMBNAIL_TEMPLATES[style].format(topic=topic) for style in THUMBNAIL_STYLES]


TEXT_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "titles": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="An array of 3 catchy, SEO-friendly titles for the YouTube video.",
        ),
        "description": types.Schema(
            type=types.Type.STRING,
            description="A detailed, SEO-friendly description including hashtags.",
        ),
        "tags": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="An array of 10-15 relevant SEO tags.",
        ),
        "seoScore": types.Schema(
            type=types.Type.INTEGER,
            description="An integer SEO score from 0 to 100.",
        ),
        "scoreJustification": types.Schema(
            type=types.Type.STRING,
            description="A brief justification for the SEO score.",
        ),
        "keywordAnalysis": types.Schema(
            type=types.Type.STRING,
            description="An analysis of the primary keywords.",
        ),
    },
    required=TEXT_REQUIRED_FIELDS,
)
