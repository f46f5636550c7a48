"""Forward engine cue events to the tone and notification collaborators."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Protocol

from ..timer.phases import CueEvent, Severity

logger = logging.getLogger(__name__)


class Emitter(Protocol):
    def emit(self, frequency: float, duration_seconds: float, volume: float = ...) -> None: ...


Announcer = Callable[[str, Severity], None]


class CueDispatcher:
    """Plays each cue's tone, then announces its text if it has one.

    Audio is optional: with no emitter, or one that raises, the tone is
    skipped and the announcement still goes out.  Announcer failures are
    logged and dropped as well.
    """

    def __init__(self, emitter: Emitter | None = None, announcer: Announcer | None = None) -> None:
        self.emitter = emitter
        self.announcer = announcer

    def dispatch(
        self,
        events: Iterable[CueEvent],
        still_current: Callable[[], bool] | None = None,
    ) -> int:
        """Deliver *events* in order; returns how many were delivered.

        ``still_current`` is checked before each event; once it returns
        False the rest are discarded (the session was stopped mid-way).
        """
        delivered = 0
        for event in events:
            if still_current is not None and not still_current():
                logger.debug("discarding cues after stop")
                break
            self._emit_tone(event)
            self._announce(event)
            delivered += 1
        return delivered

    def _emit_tone(self, event: CueEvent) -> None:
        if self.emitter is None:
            return
        try:
            self.emitter.emit(event.frequency, event.duration_seconds, event.volume)
        except Exception as e:
            logger.warning("tone %g Hz skipped: %s", event.frequency, e)

    def _announce(self, event: CueEvent) -> None:
        if not event.announce_text or self.announcer is None:
            return
        try:
            self.announcer(event.announce_text, event.severity or Severity.INFO)
        except Exception as e:
            logger.warning("announce %r failed: %s", event.announce_text, e)
