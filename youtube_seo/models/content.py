"""Generated content models: the text result and the thumbnail set."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from youtube_seo.constants import SEO_SCORE_MAX, SEO_SCORE_MIN


class GenerationRequest(BaseModel):
    """A single submission: the video topic, trimmed and non-empty."""

    topic: str = Field(..., min_length=1, description="Video topic, e.g. 'How to bake sourdough'.")

    @field_validator("topic", mode="before")
    @classmethod
    def strip_topic(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value


class YouTubeContent(BaseModel):
    """SEO text returned by the provider. All six fields are required."""

    model_config = ConfigDict(populate_by_name=True)

    titles: list[str] = Field(
        ..., description="3 catchy, SEO-friendly titles for the YouTube video."
    )
    description: str = Field(
        ..., description="A detailed, SEO-friendly description including hashtags."
    )
    tags: list[str] = Field(..., description="10-15 relevant SEO tags.")
    seo_score: int = Field(
        ...,
        alias="seoScore",
        ge=SEO_SCORE_MIN,
        le=SEO_SCORE_MAX,
        description="An integer SEO score from 0 to 100.",
    )
    score_justification: str = Field(
        ..., alias="scoreJustification", description="A brief justification for the SEO score."
    )
    keyword_analysis: str = Field(
        ..., alias="keywordAnalysis", description="An analysis of the primary keywords."
    )


class ThumbnailSet(BaseModel):
    """Generated thumbnails in prompt order: clickbait, cinematic, graphic."""

    images: list[str] = Field(
        default_factory=list,
        max_length=3,
        description="Image references as data:image/png;base64 URIs.",
    )

    def __len__(self) -> int:
        return len(self.images)
