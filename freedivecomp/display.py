"""What the display layer gets to render.

Which counter shows on the big clock:

- OFFICIAL_TOP, SURFACE_PROTOCOL → seconds remaining
- PERFORMANCE, BOTTOM_TIME       → performance clock (elapsed)
- IDLE, COMPLETED                → 00:00
"""

from __future__ import annotations

from dataclasses import dataclass

from .disciplines import DisciplineConfig
from .timer.phases import Phase, PhaseState


PHASE_TITLES: dict[Phase, str] = {
    Phase.IDLE: "READY",
    Phase.OFFICIAL_TOP: "OFFICIAL TOP",
    Phase.PERFORMANCE: "PERFORMANCE TIME",
    Phase.BOTTOM_TIME: "BOTTOM TIME",
    Phase.SURFACE_PROTOCOL: "SURFACE PROTOCOL",
    Phase.COMPLETED: "COMPLETED",
}

_COUNTDOWN_PHASES = (Phase.OFFICIAL_TOP, Phase.SURFACE_PROTOCOL)
_PERFORMANCE_PHASES = (Phase.PERFORMANCE, Phase.BOTTOM_TIME)


def format_time(seconds: int) -> str:
    """``125`` → ``"02:05"``."""
    seconds = max(0, int(seconds))
    mins, secs = divmod(seconds, 60)
    return f"{mins:02d}:{secs:02d}"


def displayed_seconds(state: PhaseState) -> int:
    if state.phase in _COUNTDOWN_PHASES:
        return state.remaining
    if state.phase in _PERFORMANCE_PHASES:
        return state.elapsed
    return 0


def performance_seconds(state: PhaseState) -> int:
    if state.phase in _PERFORMANCE_PHASES:
        return state.elapsed
    return 0


def progress_percent(state: PhaseState, config: DisciplineConfig) -> float:
    """0 → 100 progress bar value, clamped."""
    if state.phase in _PERFORMANCE_PHASES:
        pct = state.elapsed / config.max_performance_seconds * 100
    elif state.phase == Phase.SURFACE_PROTOCOL:
        total = config.surface_protocol_seconds
        pct = (total - state.remaining) / total * 100
    else:
        pct = 0.0
    return max(0.0, min(100.0, pct))


def describe(config: DisciplineConfig) -> list[tuple[str, str]]:
    """Parameter rows for the discipline info panel."""
    rows = [("Official Top", f"{config.official_top_seconds}s")]
    if config.bottom_time_seconds is not None:
        rows.append(("Bottom Time", f"{config.bottom_time_seconds}s"))
    rows.append(("Surface Protocol", f"{config.surface_protocol_seconds}s"))
    rows.append(("Max Performance", format_time(config.max_performance_seconds)))
    return rows


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    phase_name: str
    displayed_seconds: int
    performance_seconds: int
    progress_percent: float
    is_running: bool

    @property
    def displayed_time(self) -> str:
        return format_time(self.displayed_seconds)

    @property
    def performance_time(self) -> str:
        return format_time(self.performance_seconds)

    @property
    def shows_progress(self) -> bool:
        return self.phase not in (Phase.IDLE, Phase.COMPLETED)

    def as_dict(self) -> dict:
        return {
            "phaseName": self.phase_name,
            "displayedTime": self.displayed_time,
            "performanceTime": self.performance_time,
            "progressPercent": self.progress_percent,
            "isRunning": self.is_running,
        }


def build_snapshot(state: PhaseState, config: DisciplineConfig, *, is_running: bool) -> Snapshot:
    return Snapshot(
        phase=state.phase,
        phase_name=PHASE_TITLES[state.phase],
        displayed_seconds=displayed_seconds(state),
        performance_seconds=performance_seconds(state),
        progress_percent=progress_percent(state, config),
        is_running=is_running,
    )
