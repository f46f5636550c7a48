"""Shared test helpers for FreediveComp."""

from freedivecomp.timer.engine import PhaseEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class RecordingEmitter:
    """Stand-in tone collaborator; remembers every tone it was asked for."""

    def __init__(self, fail: bool = False):
        self.tones: list[tuple] = []
        self.fail = fail

    def emit(self, frequency, duration_seconds, volume=0.3):
        if self.fail:
            raise RuntimeError("no audio device")
        self.tones.append((frequency, duration_seconds, volume))

    @property
    def frequencies(self):
        return [t[0] for t in self.tones]

    def clear(self):
        self.tones.clear()


class RecordingAnnouncer:
    def __init__(self):
        self.messages: list[tuple] = []

    def __call__(self, message, severity):
        self.messages.append((message, severity))

    @property
    def texts(self):
        return [m[0] for m in self.messages]

    def clear(self):
        self.messages.clear()


class FakeClock:
    """Monotonic clock the test advances by hand."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def run_ticks(engine: PhaseEngine, state, config, n: int):
    """Tick *n* times; return the final state and every cue produced."""
    cues = []
    for _ in range(n):
        state, produced = engine.tick(state, config)
        cues.extend(produced)
    return state, cues


def advance_seconds(clock: FakeClock, scheduler, n: int) -> None:
    """Let *n* seconds pass, firing the timer slot once per second."""
    for _ in range(n):
        clock.advance(1.0)
        scheduler._on_timeout()
