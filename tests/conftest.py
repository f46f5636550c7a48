"""Shared pytest fixtures for FreediveComp tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from freedivecomp.controller import SessionController
from freedivecomp.timer.engine import PhaseEngine
from freedivecomp.timer.scheduler import TickScheduler

from helpers import FakeClock, RecordingAnnouncer, RecordingEmitter


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def engine():
    return PhaseEngine()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(qapp, clock):
    """Scheduler on a fake monotonic clock; tests drive ``_on_timeout``."""
    sched = TickScheduler(parent=None, clock=clock)
    yield sched
    sched.disarm()


@pytest.fixture
def emitter():
    return RecordingEmitter()


@pytest.fixture
def announcer():
    return RecordingAnnouncer()


@pytest.fixture
def make_controller(qapp, scheduler, emitter, announcer):
    """Factory for a controller wired to the recording collaborators."""

    def _make(discipline="STA"):
        return SessionController(
            parent=None,
            discipline=discipline,
            emitter=emitter,
            announcer=announcer,
            scheduler=scheduler,
        )

    return _make


@pytest.fixture
def controller(make_controller):
    return make_controller("STA")
