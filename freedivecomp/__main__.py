"""Allow running FreediveComp as a module: python -m freedivecomp."""

from __future__ import annotations

import argparse
import logging
import signal
import sys

from PyQt6.QtCore import QCoreApplication, QTimer

from .controller import SessionController
from .display import describe
from .exceptions import FreediveCompError
from .settings import load_settings
from .timer.phases import Phase, Severity

logger = logging.getLogger("freedivecomp")

_SEVERITY_MARKS = {
    Severity.INFO: "i",
    Severity.SUCCESS: "+",
    Severity.WARNING: "!",
}


def _positive_seconds(value: str) -> int:
    seconds = int(value)
    if seconds < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1 second, got {seconds}")
    return seconds


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="freedivecomp",
        description="AIDA/CMAS competition timer (console runner).",
    )
    parser.add_argument("discipline", nargs="?", help="STA, DYN or CWT")
    parser.add_argument(
        "--stop-after",
        type=_positive_seconds,
        metavar="SECONDS",
        help="stop manually once the performance clock reaches SECONDS "
             "(static apnea never ends on its own)",
    )
    parser.add_argument("--no-sound", action="store_true", help="disable beeps")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = load_settings()

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("FreediveComp")
    app.setOrganizationName("FreediveComp")

    emitter = None
    if settings.sound_enabled and not args.no_sound:
        from .audio.tones import ToneEmitter

        emitter = ToneEmitter(parent=app)
        emitter.set_volume(settings.sound_volume)

    def _print_announcement(message: str, severity: Severity) -> None:
        if settings.notifications_enabled:
            print(f"[{_SEVERITY_MARKS.get(severity, 'i')}] {message}", flush=True)

    discipline = args.discipline or settings.default_discipline
    try:
        controller = SessionController(
            parent=app,
            discipline=discipline,
            emitter=emitter,
            announcer=_print_announcement,
        )
    except FreediveCompError as e:
        if args.discipline:
            print(f"freedivecomp: {e}", file=sys.stderr)
            return 2
        logger.warning("%s; falling back to STA", e)
        controller = SessionController(parent=app, emitter=emitter, announcer=_print_announcement)

    config = controller.config
    print(config.name)
    for label, value in describe(config):
        print(f"  {label:<17}{value}")

    def _on_snapshot(snap) -> None:
        line = f"{snap.phase_name:<17} {snap.displayed_time}"
        if snap.shows_progress:
            line += f"  {snap.progress_percent:5.1f}%"
        print(line, flush=True)
        if args.stop_after is not None and snap.is_running and snap.performance_seconds >= args.stop_after:
            # Leave the tick handler before stopping
            QTimer.singleShot(0, controller.stop)

    def _on_phase(phase: Phase) -> None:
        if phase in (Phase.COMPLETED, Phase.IDLE):
            QTimer.singleShot(0, app.quit)

    controller.snapshot_changed.connect(_on_snapshot)
    controller.phase_changed.connect(_on_phase)

    # Ctrl+C stops the session; the idle timer lets Python see the signal
    signal.signal(signal.SIGINT, lambda *_: controller.stop())
    wakeup = QTimer(app)
    wakeup.timeout.connect(lambda: None)
    wakeup.start(200)

    controller.start()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
