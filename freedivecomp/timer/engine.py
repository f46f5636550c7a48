"""Competition phase state machine.

States
------
IDLE              Waiting for the athlete's start command.
OFFICIAL_TOP      Preparation countdown (30 s for every discipline).
PERFORMANCE       The attempt itself, counting up.
BOTTOM_TIME       Depth window, counting down while the performance
                  clock keeps running (DYN / CWT only).
SURFACE_PROTOCOL  Recovery countdown after surfacing.
COMPLETED         Protocol finished; nothing more happens on a tick.

Transitions
-----------
IDLE | COMPLETED → OFFICIAL_TOP     (start)
OFFICIAL_TOP → PERFORMANCE          (countdown runs out)
PERFORMANCE → BOTTOM_TIME           (performance clock reaches bottom time)
BOTTOM_TIME → SURFACE_PROTOCOL      (bottom time runs out)
SURFACE_PROTOCOL → COMPLETED        (recovery countdown runs out)
Any → IDLE                          (stop)

Static apnea has no bottom time, so PERFORMANCE has no exit other than
``stop()`` there.

Every function here is pure: it takes the current state and returns the
next one plus the cues to play.  Wall-clock timing lives in
:mod:`freedivecomp.timer.scheduler`.
"""

from __future__ import annotations

from ..disciplines import DisciplineConfig
from .phases import (
    BottomTime,
    Completed,
    CueEvent,
    Idle,
    OfficialTop,
    Performance,
    PhaseState,
    Severity,
    SurfaceProtocol,
)


# ── cues ──────────────────────────────────────────────────────────────────

START_CUE = CueEvent(800, 0.3, announce_text="Official top started", severity=Severity.SUCCESS)
PERFORMANCE_START_CUE = CueEvent(
    1200, 0.5, volume=0.4, announce_text="Performance start", severity=Severity.INFO
)
OFFICIAL_TOP_WARNING_CUE = CueEvent(600, 0.2)
OFFICIAL_TOP_COUNTDOWN_CUE = CueEvent(600, 0.15)
BOTTOM_TIME_CUE = CueEvent(400, 0.4, announce_text="Bottom time", severity=Severity.WARNING)
BOTTOM_TIME_COUNTDOWN_CUE = CueEvent(500, 0.15)
SURFACE_PROTOCOL_CUE = CueEvent(
    1000, 0.6, volume=0.5, announce_text="Surface protocol", severity=Severity.INFO
)
SURFACE_COUNTDOWN_CUE = CueEvent(700, 0.15)
COMPLETED_CUE = CueEvent(
    1400, 0.8, volume=0.5, announce_text="Protocol completed", severity=Severity.SUCCESS
)

WARNING_AT = 6  # distinct tone one second before the final countdown
COUNTDOWN_FROM = 5  # last seconds that beep every tick

Transition = tuple[PhaseState, list[CueEvent]]


# ── engine ────────────────────────────────────────────────────────────────


class PhaseEngine:
    """Stateless transition functions for one session timeline.

    The engine never holds the current state; the caller owns it and
    feeds it back into :meth:`tick` once per second.
    """

    def start(self, config: DisciplineConfig) -> Transition:
        """Begin the official top, discarding any previous counters."""
        return OfficialTop(remaining=config.official_top_seconds), [START_CUE]

    def stop(self) -> PhaseState:
        """Silent abort back to IDLE."""
        return Idle()

    def tick(self, state: PhaseState, config: DisciplineConfig) -> Transition:
        """Advance *state* by one second.

        Total over every state: IDLE and COMPLETED come back unchanged
        with no cues.
        """
        if isinstance(state, OfficialTop):
            return self._tick_official_top(state)
        if isinstance(state, Performance):
            return self._tick_performance(state, config)
        if isinstance(state, BottomTime):
            return self._tick_bottom_time(state, config)
        if isinstance(state, SurfaceProtocol):
            return self._tick_surface_protocol(state)
        return state, []

    # ── per-phase rules ───────────────────────────────────────────────

    @staticmethod
    def _tick_official_top(state: OfficialTop) -> Transition:
        r = state.remaining
        if r <= 1:
            return Performance(elapsed=0), [PERFORMANCE_START_CUE]
        if r == WARNING_AT:
            return OfficialTop(r - 1), [OFFICIAL_TOP_WARNING_CUE]
        if r <= COUNTDOWN_FROM:
            return OfficialTop(r - 1), [OFFICIAL_TOP_COUNTDOWN_CUE]
        return OfficialTop(r - 1), []

    @staticmethod
    def _tick_performance(state: Performance, config: DisciplineConfig) -> Transition:
        e = state.elapsed
        bottom = config.bottom_time_seconds
        if bottom is not None and e == bottom - 1:
            return BottomTime(elapsed=e + 1, remaining=bottom), [BOTTOM_TIME_CUE]
        return Performance(e + 1), []

    @staticmethod
    def _tick_bottom_time(state: BottomTime, config: DisciplineConfig) -> Transition:
        r = state.remaining
        if r <= 1:
            return (
                SurfaceProtocol(remaining=config.surface_protocol_seconds),
                [SURFACE_PROTOCOL_CUE],
            )
        cues = [BOTTOM_TIME_COUNTDOWN_CUE] if r <= COUNTDOWN_FROM else []
        return BottomTime(elapsed=state.elapsed + 1, remaining=r - 1), cues

    @staticmethod
    def _tick_surface_protocol(state: SurfaceProtocol) -> Transition:
        r = state.remaining
        if r <= 1:
            return Completed(), [COMPLETED_CUE]
        cues = [SURFACE_COUNTDOWN_CUE] if r <= COUNTDOWN_FROM else []
        return SurfaceProtocol(r - 1), cues
