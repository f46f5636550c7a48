"""Beep synthesis and playback using numpy + QSoundEffect.

Every cue is a single sine tone whose gain starts at the cue volume and
ramps exponentially down to 0.01 over the cue duration.  Rendered WAV
files are cached on disk per (frequency, duration, volume) so a repeated
countdown beep is only synthesised once.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl

from ..timer.phases import DEFAULT_VOLUME

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "FreediveComp"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SAMPLE_RATE = 44100
RAMP_FLOOR = 0.01  # gain the beep decays to by the end of its duration


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _exponential_ramp(length: int, start: float, end: float = RAMP_FLOOR) -> np.ndarray:
    """Gain curve from *start* to *end*, decaying exponentially."""
    if length <= 0:
        return np.zeros(0)
    start = max(start, end)
    return np.geomspace(start, end, length)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def synthesize_beep(frequency: float, duration_s: float, volume: float = DEFAULT_VOLUME) -> bytes:
    """Render one cue tone as WAV bytes."""
    tone = _sine(frequency, duration_s)
    env = _exponential_ramp(len(tone), volume)
    # Short silent tail so QSoundEffect doesn't clip the release
    padded = np.concatenate([tone * env, np.zeros(int(SAMPLE_RATE * 0.02))])
    return _to_wav_bytes(padded)


def tone_filename(frequency: float, duration_s: float, volume: float) -> str:
    return f"beep_{frequency:g}hz_{int(round(duration_s * 1000))}ms_v{int(round(volume * 100))}.wav"


# ═══════════════════════════════════════════════════════════════════════════
#  TONE EMITTER
# ═══════════════════════════════════════════════════════════════════════════


class ToneEmitter(QObject):
    """Plays cue tones.  Best effort: an unavailable audio backend only
    costs the beep, never the timing.

    Usage::

        emitter = ToneEmitter(parent=self)
        emitter.set_volume(70)
        emitter.emit(800, 0.3)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # master level, 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[str, object] = {}
        self._effect_cls = None
        self._available = True

    # ── public API ────────────────────────────────────────────────────

    def set_volume(self, level: int) -> None:
        """Set master volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def volume(self) -> int:
        """Current master volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def emit(self, frequency: float, duration_seconds: float, volume: float = DEFAULT_VOLUME) -> None:
        """Play one tone.  No-op while disabled or when audio is unavailable."""
        if not self._enabled:
            return
        effect_cls = self._sound_effect_class()
        if effect_cls is None:
            return
        path = self.ensure_wav(frequency, duration_seconds, volume)
        self._effect_for(path, effect_cls).play()

    @property
    def available(self) -> bool:
        """False once the multimedia backend has failed to load."""
        return self._available

    def ensure_wav(self, frequency: float, duration_seconds: float, volume: float) -> Path:
        """Return the cached WAV for this tone, rendering it if missing."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        path = self._sounds_dir / tone_filename(frequency, duration_seconds, volume)
        if not path.exists():
            path.write_bytes(synthesize_beep(frequency, duration_seconds, volume))
            logger.debug("rendered %s", path.name)
        return path

    # ── internal ──────────────────────────────────────────────────────

    def _sound_effect_class(self):
        """QSoundEffect, loaded on first use; None for good after a failed load."""
        if not self._available:
            return None
        if self._effect_cls is None:
            try:
                from PyQt6.QtMultimedia import QSoundEffect
            except ImportError as e:
                self._available = False
                logger.warning("audio unavailable, beeps disabled: %s", e)
                return None
            self._effect_cls = QSoundEffect
        return self._effect_cls

    def _effect_for(self, path: Path, effect_cls):
        effect = self._effects.get(path.name)
        if effect is None:
            effect = effect_cls(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(self._volume)
            self._effects[path.name] = effect
        return effect
