# UIForge - Geometry and Sequence Utilities
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Debounced autosave.

Every toggle() restarts a countdown; the save callback runs once the
countdown completes without another toggle. A burst of edits therefore
produces a single save, ``buffer_time`` seconds after the last one.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from .types import constants

logger = logging.getLogger(__name__)


def after(seconds: float, action: Callable[[], None]) -> threading.Timer:
    """Run ``action`` once on a daemon timer thread after ``seconds``."""
    timer = threading.Timer(seconds, action)
    timer.daemon = True
    timer.start()
    return timer


class AutoSave:
    """Coalesces rapid change notifications into one deferred save."""

    def __init__(self, save: Callable[[], None],
                 buffer_time: float = constants.DEFAULT_BUFFER_TIME) -> None:
        self._save = save
        self.buffer_time = buffer_time
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def toggle(self) -> None:
        """Signal a change; (re)starts the debounce countdown."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            self._timer = threading.Timer(self.buffer_time, self._fire, args=(generation,))
            self._timer.daemon = True
            self._timer.start()
        logger.debug("Autosave scheduled in %gs (generation %d)", self.buffer_time, generation)

    def cancel(self) -> None:
        """Drop any pending save."""
        with self._lock:
            self._drop_timer()

    def flush(self) -> bool:
        """
        Run a pending save now, on the calling thread.

        Exceptions from the save callback propagate to the caller here,
        unlike saves fired from the timer thread, which are only logged.

        Returns:
            True if a save was pending and has run, False otherwise.
        """
        with self._lock:
            if self._timer is None:
                return False
            self._drop_timer()
        self._save()
        return True

    def _drop_timer(self) -> None:
        # caller holds the lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a toggle, cancel or flush after this timer was armed supersedes it
            if generation != self._generation:
                return
            self._timer = None
        try:
            self._save()
        except Exception:
            logger.exception("Autosave callback failed")
