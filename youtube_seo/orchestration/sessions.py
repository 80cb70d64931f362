"""In-memory browser sessions, each with its own controller."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional
from uuid import uuid4

from youtube_seo.constants import COPY_CONFIRMATION_SECONDS, INTERSTITIAL_SECONDS, MAX_SESSIONS
from youtube_seo.generation.provider import ContentProvider
from youtube_seo.models.state import UIState
from youtube_seo.orchestration.controller import GenerationController
from youtube_seo.presentation.clipboard import CopyConfirmations

logger = logging.getLogger(__name__)


class SessionNotFoundError(KeyError):
    """Raised when a session id is unknown."""

    pass


@dataclass
class Session:
    session_id: str
    controller: GenerationController
    copies: CopyConfirmations
    task: Optional[asyncio.Task] = field(default=None, repr=False)

    @property
    def is_busy(self) -> bool:
        return self.task is not None or self.controller.is_busy


class SessionRegistry:
    """
    Holds one Session per browser page, in process memory only.

    Generations started through ``start`` run as background tasks on the
    event loop; the session keeps the task reference until it finishes.

    At most ``max_sessions`` are kept. Creating one more evicts the least
    recently used sessions that are not generating.
    """

    def __init__(
        self,
        provider: ContentProvider,
        interstitial_seconds: float = INTERSTITIAL_SECONDS,
        copy_reset_seconds: float = COPY_CONFIRMATION_SECONDS,
        max_sessions: int = MAX_SESSIONS,
    ):
        self.provider = provider
        self.interstitial_seconds = interstitial_seconds
        self.copy_reset_seconds = copy_reset_seconds
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, Session] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, session_id: str) -> Session:
        try:
            session = self._sessions[session_id]
        except KeyError as e:
            raise SessionNotFoundError(session_id) from e
        self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: Optional[str] = None) -> Session:
        """Return the named session, creating it (with a new UUID if unnamed)."""
        session_id = session_id or str(uuid4())
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        else:
            session = Session(
                session_id=session_id,
                controller=GenerationController(
                    self.provider,
                    interstitial_seconds=self.interstitial_seconds,
                    on_transition=_transition_logger(session_id),
                ),
                copies=CopyConfirmations(reset_after=self.copy_reset_seconds),
            )
            self._sessions[session_id] = session
            logger.info("Created session %s", session_id)
            self._evict(keep=session_id)
        return session

    def start(self, session: Session, topic: str) -> bool:
        """
        Submit a topic for a session and run the generation in the background.

        Returns:
            False if the topic was blank; the session keeps any shown result.

        Raises:
            GenerationInProgressError: If the session is still generating.
        """
        if not session.controller.accept(topic):
            return False

        session.copies.clear()
        session.task = asyncio.create_task(session.controller.run(topic))
        session.task.add_done_callback(lambda task: _forget_task(session, task))
        return True

    def _evict(self, keep: str) -> None:
        idle = [sid for sid, s in self._sessions.items() if sid != keep and not s.is_busy]
        overflow = len(self._sessions) - self.max_sessions
        for session_id in idle[: max(overflow, 0)]:
            self._sessions.pop(session_id).copies.clear()
            logger.info("Evicted session %s", session_id)
        if len(self._sessions) > self.max_sessions:
            logger.warning(
                "%d sessions held, above the limit of %d; the rest are generating",
                len(self._sessions),
                self.max_sessions,
            )

    async def wait(self, session_id: str) -> UIState:
        """Wait for a session's in-flight generation, if any, and return its state."""
        session = self.get(session_id)
        if session.task is not None:
            await asyncio.shield(session.task)
        return session.controller.state

    async def shutdown(self) -> None:
        """Cancel in-flight generations and pending copy timers."""
        tasks = [s.task for s in self._sessions.values() if s.task is not None]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        for session in self._sessions.values():
            session.copies.clear()
        self._sessions.clear()


def _transition_logger(session_id: str):
    def log_transition(state: UIState) -> None:
        logger.debug("Session %s entered %s", session_id, state.kind)

    return log_transition


def _forget_task(session: Session, task: asyncio.Task) -> None:
    if session.task is task:
        session.task = None
