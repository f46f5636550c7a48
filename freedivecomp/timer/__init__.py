"""Timer package."""

from .engine import PhaseEngine
from .phases import (
    BottomTime,
    Completed,
    CueEvent,
    Idle,
    OfficialTop,
    Performance,
    Phase,
    PhaseState,
    Severity,
    SurfaceProtocol,
)
from .scheduler import TickScheduler

__all__ = [
    "PhaseEngine",
    "TickScheduler",
    "Phase",
    "PhaseState",
    "Severity",
    "CueEvent",
    "Idle",
    "OfficialTop",
    "Performance",
    "BottomTime",
    "SurfaceProtocol",
    "Completed",
]
