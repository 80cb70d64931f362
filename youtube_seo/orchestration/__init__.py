"""Orchestration: the generation state machine and per-browser sessions."""

from youtube_seo.orchestration.controller import GenerationController, validate_topic
from youtube_seo.orchestration.sessions import Session, SessionNotFoundError, SessionRegistry

__all__ = [
    "GenerationController",
    "Session",
    "SessionNotFoundError",
    "SessionRegistry",
    "validate_topic",
]
