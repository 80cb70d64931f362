"""Exception types shared across generation, orchestration and the API."""

from youtube_seo.constants import (
    EMPTY_TOPIC_MESSAGE,
    TEXT_FAILURE_MESSAGE,
    THUMBNAIL_FAILURE_MESSAGE,
)


class TopicValidationError(ValueError):
    """Raised when a submitted topic is blank or whitespace-only."""

    def __init__(self, message: str = EMPTY_TOPIC_MESSAGE):
        super().__init__(message)


class GenerationFailure(Exception):
    """Raised when the provider fails to produce usable content.

    The exception message is shown to the user as-is.
    """

    pass


class TextGenerationFailure(GenerationFailure):
    """Text request failed, or the structured response was malformed/incomplete."""

    def __init__(self, message: str = TEXT_FAILURE_MESSAGE):
        super().__init__(message)


class ThumbnailGenerationFailure(GenerationFailure):
    """Image request failed or returned zero images."""

    def __init__(self, message: str = THUMBNAIL_FAILURE_MESSAGE):
        super().__init__(message)


class GenerationInProgressError(RuntimeError):
    """Raised when a topic is submitted while a generation is still in flight."""

    pass


class StartupConfigurationError(RuntimeError):
    """Raised at startup when required configuration (the API key) is missing."""

    pass
