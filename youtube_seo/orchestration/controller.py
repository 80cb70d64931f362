"""Generation controller: topic validation, fan-out and the UI state machine.

States: Idle -> Loading -> Interstitial -> Displaying, or Loading -> Failed.
A new submission from Idle, Displaying or Failed restarts the cycle.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from pydantic import ValidationError

from youtube_seo.constants import INTERSTITIAL_SECONDS, UNKNOWN_FAILURE_MESSAGE
from youtube_seo.errors import GenerationFailure, GenerationInProgressError, TopicValidationError
from youtube_seo.generation.prompts import build_thumbnail_prompts
from youtube_seo.generation.provider import ContentProvider
from youtube_seo.models.content import GenerationRequest, ThumbnailSet
from youtube_seo.models.state import (
    BUSY_STATES,
    Displaying,
    Failed,
    Idle,
    Interstitial,
    Loading,
    UIState,
)

logger = logging.getLogger(__name__)

TransitionListener = Callable[[UIState], None]


def validate_topic(topic: Optional[str]) -> GenerationRequest:
    """
    Raises:
        TopicValidationError: If the topic is missing, blank or whitespace-only.
    """
    try:
        return GenerationRequest(topic=topic)
    except ValidationError as e:
        raise TopicValidationError() from e


class GenerationController:
    """
    Owns one page's UI state and runs generations for it.

    Example:
        >>> controller = GenerationController(provider)
        >>> state = await controller.submit("How to bake sourdough")
        >>> state.kind
        'displaying'
    """

    def __init__(
        self,
        provider: ContentProvider,
        interstitial_seconds: float = INTERSTITIAL_SECONDS,
        on_transition: Optional[TransitionListener] = None,
    ):
        self.provider = provider
        self.interstitial_seconds = interstitial_seconds
        self.on_transition = on_transition
        self.topic: Optional[str] = None
        self._state: UIState = Idle()

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return isinstance(self._state, BUSY_STATES)

    def accept(self, topic: str) -> bool:
        """
        Validate a submission and enter Loading.

        A blank topic never reaches the provider. It sets an inline
        validation message on the current state; a displayed result or
        failure is kept.

        Returns:
            True if the topic was accepted and ``run`` should follow.

        Raises:
            GenerationInProgressError: If a generation is already in flight.
        """
        if self.is_busy:
            raise GenerationInProgressError(
                f"Generation already in progress for topic {self.topic!r}"
            )

        try:
            request = validate_topic(topic)
        except TopicValidationError as e:
            # A displayed result or error stays on screen under the message
            if isinstance(self._state, Idle):
                self._transition(Idle(validation_message=str(e)))
            else:
                self._transition(self._state.model_copy(update={"validation_message": str(e)}))
            return False

        # Loading replaces any prior result, thumbnails or error
        self.topic = request.topic
        self._transition(Loading())
        return True

    async def run(self, topic: str) -> UIState:
        """
        Fan out one text and three thumbnail requests and settle the state.

        Join-all with fail-fast: the first failure moves to Failed and the
        siblings' results are discarded. On success the controller pauses in
        Interstitial before Displaying.
        """
        cleaned = topic.strip()
        prompts = build_thumbnail_prompts(cleaned)

        try:
            content, *images = await asyncio.gather(
                self.provider.generate_text_content(cleaned),
                *(self.provider.generate_thumbnail(prompt) for prompt in prompts),
            )
        except GenerationFailure as e:
            logger.warning("Generation failed for topic %r: %s", cleaned, e)
            self._transition(Failed(message=str(e)))
            return self._state
        except Exception as e:
            logger.error("Unexpected generation error for topic %r: %s", cleaned, e, exc_info=True)
            self._transition(Failed(message=UNKNOWN_FAILURE_MESSAGE))
            return self._state

        self._transition(Interstitial())
        await asyncio.sleep(self.interstitial_seconds)

        self._transition(Displaying(content=content, thumbnails=ThumbnailSet(images=images)))
        return self._state

    async def submit(self, topic: str) -> UIState:
        """Accept a topic and run the generation to completion."""
        if not self.accept(topic):
            return self._state
        return await self.run(topic)

    def _transition(self, state: UIState) -> None:
        previous = self._state.kind
        self._state = state
        logger.info("State %s -> %s", previous, state.kind)
        if self.on_transition is not None:
            self.on_transition(state)
