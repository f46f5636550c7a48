"""Phase states and cue events: plain value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


class Phase(Enum):
    IDLE = "ready"
    OFFICIAL_TOP = "official-top"
    PERFORMANCE = "performance"
    BOTTOM_TIME = "bottom-time"
    SURFACE_PROTOCOL = "surface-protocol"
    COMPLETED = "completed"


class Severity(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"


DEFAULT_VOLUME = 0.3


# ── phase states ──────────────────────────────────────────────────────────


def _check_counter(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class Idle:
    phase: ClassVar[Phase] = Phase.IDLE
    remaining: ClassVar[int] = 0
    elapsed: ClassVar[int] = 0


@dataclass(frozen=True)
class OfficialTop:
    remaining: int
    phase: ClassVar[Phase] = Phase.OFFICIAL_TOP
    elapsed: ClassVar[int] = 0

    def __post_init__(self) -> None:
        _check_counter("remaining", self.remaining)


@dataclass(frozen=True)
class Performance:
    elapsed: int = 0
    phase: ClassVar[Phase] = Phase.PERFORMANCE
    remaining: ClassVar[int] = 0

    def __post_init__(self) -> None:
        _check_counter("elapsed", self.elapsed)


@dataclass(frozen=True)
class BottomTime:
    """Depth window.  ``elapsed`` keeps running the performance clock."""

    elapsed: int
    remaining: int
    phase: ClassVar[Phase] = Phase.BOTTOM_TIME

    def __post_init__(self) -> None:
        _check_counter("elapsed", self.elapsed)
        _check_counter("remaining", self.remaining)


@dataclass(frozen=True)
class SurfaceProtocol:
    remaining: int
    phase: ClassVar[Phase] = Phase.SURFACE_PROTOCOL
    elapsed: ClassVar[int] = 0

    def __post_init__(self) -> None:
        _check_counter("remaining", self.remaining)


@dataclass(frozen=True)
class Completed:
    phase: ClassVar[Phase] = Phase.COMPLETED
    remaining: ClassVar[int] = 0
    elapsed: ClassVar[int] = 0


PhaseState = Union[Idle, OfficialTop, Performance, BottomTime, SurfaceProtocol, Completed]


# ── cues ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CueEvent:
    """A tone to play, optionally paired with a message to announce."""

    frequency: float
    duration_seconds: float
    volume: float = DEFAULT_VOLUME
    announce_text: str | None = None
    severity: Severity | None = None
