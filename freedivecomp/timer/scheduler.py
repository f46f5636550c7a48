"""1 Hz tick driver on the Qt event loop."""

from __future__ import annotations

import logging
import time
from typing import Callable

from PyQt6.QtCore import QObject, Qt, QTimer

logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000
EARLY_TOLERANCE = 0.05  # fraction of an interval


class TickScheduler(QObject):
    """Calls ``on_tick()`` once per elapsed second while armed.

    The repeating ``QTimer`` only wakes us up; the number of ticks owed
    is worked out from a monotonic clock anchored at :meth:`arm`, so a
    late or coalesced trigger neither drops nor doubles a second.

    :meth:`disarm` bumps the arm generation, which makes any tick still
    pending from the previous arming (including the rest of a catch-up
    batch) a no-op.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(parent)
        self._interval = interval_ms / 1000.0
        self._clock = clock

        self._on_tick: Callable[[], None] | None = None
        self._generation: int = 0
        self._anchor: float = 0.0
        self._delivered: int = 0

        self._qt_timer = QTimer(self)
        self._qt_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    # ── public API ────────────────────────────────────────────────────

    @property
    def is_armed(self) -> bool:
        return self._on_tick is not None

    @property
    def delivered(self) -> int:
        """Ticks delivered since the last :meth:`arm`."""
        return self._delivered

    def arm(self, on_tick: Callable[[], None]) -> None:
        """Start ticking.  Re-arming drops the previous callback."""
        self._generation += 1
        self._on_tick = on_tick
        self._anchor = self._clock()
        self._delivered = 0
        self._qt_timer.start()
        logger.debug("scheduler armed (generation %d)", self._generation)

    def disarm(self) -> None:
        """Stop ticking; nothing already scheduled gets delivered."""
        if self._on_tick is None:
            return
        self._qt_timer.stop()
        self._generation += 1
        self._on_tick = None
        logger.debug("scheduler disarmed (generation %d)", self._generation)

    # ── internal ──────────────────────────────────────────────────────

    def _on_timeout(self) -> None:
        if self._on_tick is None:
            return
        generation = self._generation
        # whole seconds elapsed; a trigger up to EARLY_TOLERANCE early still counts
        due = int((self._clock() - self._anchor) / self._interval + EARLY_TOLERANCE)
        if due - self._delivered > 1:
            logger.warning("scheduler catching up %d ticks", due - self._delivered)
        while self._delivered < due:
            if generation != self._generation or self._on_tick is None:
                return
            self._delivered += 1
            self._on_tick()
