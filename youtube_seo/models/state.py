"""UI state machine states owned by the generation controller."""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from youtube_seo.models.content import ThumbnailSet, YouTubeContent


class Idle(BaseModel):
    """Waiting for input. Carries the inline message after a blank submission."""

    kind: Literal["idle"] = "idle"
    validation_message: Optional[str] = None


class Loading(BaseModel):
    kind: Literal["loading"] = "loading"


class Interstitial(BaseModel):
    kind: Literal["interstitial"] = "interstitial"


class Displaying(BaseModel):
    """Results are ready to render. A later blank submission adds its message here."""

    kind: Literal["displaying"] = "displaying"
    content: YouTubeContent
    thumbnails: ThumbnailSet
    validation_message: Optional[str] = None


class Failed(BaseModel):
    kind: Literal["failed"] = "failed"
    message: str
    validation_message: Optional[str] = None


UIState = Annotated[
    Union[Idle, Loading, Interstitial, Displaying, Failed],
    Field(discriminator="kind"),
]

# States during which a new submission is refused
BUSY_STATES = (Loading, Interstitial)
