"""Session façade: discipline selection, start / stop, snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal

from .audio.cues import Announcer, CueDispatcher, Emitter
from .disciplines import DEFAULT_REGISTRY, DisciplineCode, DisciplineConfig, DisciplineRegistry
from .display import Snapshot, build_snapshot
from .exceptions import InvalidOperation
from .timer.engine import PhaseEngine
from .timer.phases import Completed, CueEvent, Idle, Phase, PhaseState, Severity
from .timer.scheduler import TickScheduler

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """The one timeline a controller owns."""

    config: DisciplineConfig
    state: PhaseState
    armed: bool = False


class SessionController(QObject):
    """Drives one competition timeline.

    Signals
    -------
    snapshot_changed(snapshot: Snapshot)
        Emitted after every start, stop, discipline change and tick.
    phase_changed(phase: Phase)
        Emitted when the phase differs from the previous one.
    announced(message: str, severity: Severity)
        Every cue announcement, for banners / toasts.
    """

    snapshot_changed = pyqtSignal(object)
    phase_changed = pyqtSignal(object)
    announced = pyqtSignal(str, object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        discipline: DisciplineCode | str = DisciplineCode.STA,
        emitter: Emitter | None = None,
        announcer: Announcer | None = None,
        registry: DisciplineRegistry = DEFAULT_REGISTRY,
        scheduler: TickScheduler | None = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._engine = PhaseEngine()
        self._scheduler = scheduler or TickScheduler(self)
        self._extra_announcer = announcer
        self._dispatcher = CueDispatcher(emitter, self._announce)
        self._generation: int = 0
        self._session = Session(config=registry.get(discipline), state=Idle())

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def session(self) -> Session:
        return self._session

    @property
    def config(self) -> DisciplineConfig:
        return self._session.config

    @property
    def state(self) -> PhaseState:
        return self._session.state

    @property
    def phase(self) -> Phase:
        return self._session.state.phase

    @property
    def is_running(self) -> bool:
        return self._session.armed

    @property
    def dispatcher(self) -> CueDispatcher:
        return self._dispatcher

    def current_snapshot(self) -> Snapshot:
        return build_snapshot(self._session.state, self._session.config, is_running=self._session.armed)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def select_discipline(self, code: DisciplineCode | str) -> DisciplineConfig:
        """Switch discipline.  Only valid while not running."""
        if self._session.armed:
            raise InvalidOperation("cannot change discipline while the timer is running")
        config = self._registry.get(code)
        self._generation += 1
        previous = self._session.state.phase
        self._session = Session(config=config, state=Idle())
        logger.info("discipline selected: %s", config.name)
        self._publish(previous)
        return config

    def start(self) -> None:
        """Begin the official top.  Valid from IDLE or COMPLETED."""
        if self._session.armed:
            raise InvalidOperation("session already running")
        state, cues = self._engine.start(self._session.config)
        self._generation += 1
        previous = self._session.state.phase
        self._session.state = state
        self._session.armed = True
        logger.info("%s: official top started (%ds)", self._session.config.code.value, state.remaining)
        self._publish(previous)
        self._dispatch(cues)
        if self._session.armed:
            self._scheduler.arm(self._on_tick)

    def stop(self) -> None:
        """Abort from any phase back to IDLE.  Pending ticks and cues are dropped."""
        self._scheduler.disarm()
        self._generation += 1
        previous = self._session.state.phase
        self._session.state = self._engine.stop()
        self._session.armed = False
        logger.info("session stopped (was %s)", previous.value)
        self._publish(previous)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._session.armed:
            return
        previous = self._session.state.phase
        state, cues = self._engine.tick(self._session.state, self._session.config)
        self._session.state = state
        logger.debug("tick → %s", state)
        if isinstance(state, Completed):
            self._scheduler.disarm()
            self._session.armed = False
        if state.phase != previous:
            logger.info("phase %s → %s", previous.value, state.phase.value)
        generation = self._generation
        self._publish(previous)
        if generation == self._generation:
            self._dispatch(cues)

    def _dispatch(self, cues: list[CueEvent]) -> None:
        generation = self._generation
        self._dispatcher.dispatch(cues, still_current=lambda: generation == self._generation)

    def _announce(self, message: str, severity: Severity) -> None:
        self.announced.emit(message, severity)
        if self._extra_announcer is not None:
            self._extra_announcer(message, severity)

    def _publish(self, previous: Phase) -> None:
        if self._session.state.phase != previous:
            self.phase_changed.emit(self._session.state.phase)
        self.snapshot_changed.emit(self.current_snapshot())
