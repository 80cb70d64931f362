"""Request and response payloads for the content API."""

from typing import Optional

from pydantic import BaseModel, Field

from youtube_seo.models.view import CopyField, ResultView, StateSummary


class GenerateContentRequest(BaseModel):
    """Topic submission from the browser form."""

    topic: str = Field(
        ...,
        description="Video topic. Blank topics are rejected with an inline message.",
    )
    session_id: Optional[str] = Field(
        None,
        description="Optional session identifier. If not provided, a new UUID will be generated. Reuse it to resubmit from the same page.",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "topic": "How to bake a sourdough bread",
                    "session_id": "60a8336a-3d5d-45eb-a390-b52ab9f2dcb2",
                }
            ]
        }
    }


class SessionView(BaseModel):
    """Everything the page needs to render one session."""

    session_id: str
    topic: Optional[str] = None
    state: StateSummary
    result: Optional[ResultView] = None
    copied: list[str] = Field(default_factory=list)


class CopyRequest(BaseModel):
    field: CopyField
    index: Optional[int] = Field(
        None, ge=0, description="0-based title index; required when field is 'titles'."
    )


class CopyResponse(BaseModel):
    key: str
    text: str = Field(..., description="Text to place on the clipboard.")
    copied: list[str]


class ApiError(BaseModel):
    """Error payload used in OpenAPI docs."""

    error: str
    detail: str
    session_id: Optional[str] = None
