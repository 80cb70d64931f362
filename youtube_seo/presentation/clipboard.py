"""Copy-to-clipboard confirmation state with per-item reset timers."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from youtube_seo.constants import COPY_CONFIRMATION_SECONDS

logger = logging.getLogger(__name__)


class CopyConfirmations:
    """
    Tracks which copy buttons currently show their confirmation.

    Each key gets its own one-shot timer on the running event loop. Copying
    the same key again restarts that key's timer only, so every key reverts
    exactly once, ``reset_after`` seconds after its latest copy.
    """

    def __init__(self, reset_after: float = COPY_CONFIRMATION_SECONDS):
        self.reset_after = reset_after
        self._timers: dict[str, asyncio.TimerHandle] = {}

    def mark(self, key: str, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """Show the confirmation for ``key`` and schedule its reset."""
        loop = loop or asyncio.get_running_loop()

        previous = self._timers.pop(key, None)
        if previous is not None:
            previous.cancel()

        self._timers[key] = loop.call_later(self.reset_after, self._reset, key)
        logger.debug("Copied %s, reverting in %.1fs", key, self.reset_after)

    def is_copied(self, key: str) -> bool:
        return key in self._timers

    def copied_keys(self) -> list[str]:
        return sorted(self._timers)

    def clear(self) -> None:
        """Drop every confirmation and cancel pending timers."""
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

    def _reset(self, key: str) -> None:
        self._timers.pop(key, None)
