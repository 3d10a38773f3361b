"""Completion tone synthesis and playback using numpy + QSoundEffect.

The tone is a plain sine with an exponential amplitude decay, generated
once per parameter set and cached to disk as a WAV file so subsequent
plays (and launches) skip the synthesis.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl

from ..errors import ResourceUnavailable
from ..settings import APP_SUPPORT_DIR

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def exponential_envelope(
    length: int, start_gain: float, end_gain: float,
) -> np.ndarray:
    """Gain curve falling geometrically from *start_gain* to *end_gain*."""
    if start_gain <= 0 or end_gain <= 0:
        raise ValueError("exponential envelope gains must be positive")
    if length <= 0:
        return np.zeros(0, dtype=np.float64)
    return np.geomspace(start_gain, end_gain, length)


def synthesize_tone(
    frequency: float = 800.0,
    duration_s: float = 0.5,
    start_gain: float = 0.3,
    end_gain: float = 0.01,
) -> np.ndarray:
    """Sine tone under an exponential decay, as float64 samples in -1..1."""
    tone = _sine(frequency, duration_s)
    return tone * exponential_envelope(len(tone), start_gain, end_gain)


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


def tone_wav_bytes(
    frequency: float = 800.0,
    duration_s: float = 0.5,
    start_gain: float = 0.3,
    end_gain: float = 0.01,
) -> bytes:
    return _to_wav_bytes(
        synthesize_tone(frequency, duration_s, start_gain, end_gain)
    )


def tone_filename(
    frequency: float, duration_s: float, start_gain: float, end_gain: float,
) -> str:
    """Stable cache file name for a tone parameter set."""
    return (
        f"tone_{frequency:g}hz_{int(duration_s * 1000)}ms_"
        f"{start_gain:g}-{end_gain:g}.wav"
    )


# ═══════════════════════════════════════════════════════════════════════════
#  TONE PLAYER
# ═══════════════════════════════════════════════════════════════════════════


class QtTonePlayer(QObject):
    """Tone capability that plays synthesized tones through QSoundEffect.

    Usage::

        player = QtTonePlayer(parent=self)
        player.set_volume(70)
        player.play_tone(800.0, 0.5, 0.3, 0.01)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        volume: int = 70,
    ) -> None:
        super().__init__(parent)
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._volume = max(0, min(volume, 100)) / 100.0
        self._effects: dict[str, object] = {}

    # ── public API ────────────────────────────────────────────────────

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    def set_volume(self, level: int) -> None:
        """Set volume (0-100).  Updates all loaded effects."""
        self._volume = max(0, min(level, 100)) / 100.0
        for effect in self._effects.values():
            effect.setVolume(self._volume)

    def play_tone(
        self,
        frequency: float,
        duration_s: float,
        start_gain: float,
        end_gain: float,
    ) -> None:
        """Start playback and return immediately.

        Raises ``ResourceUnavailable`` when audio output cannot be used.
        """
        path = self.ensure_tone_file(frequency, duration_s, start_gain, end_gain)
        effect = self._effects.get(path.name)
        if effect is None:
            effect = self._load_effect(path)
            self._effects[path.name] = effect
        if effect.status() == effect.Status.Error:
            raise ResourceUnavailable("audio output", f"could not load {path.name}")
        effect.play()

    def ensure_tone_file(
        self,
        frequency: float,
        duration_s: float,
        start_gain: float,
        end_gain: float,
    ) -> Path:
        """Generate the WAV for this tone if it is not cached yet."""
        path = self._sounds_dir / tone_filename(
            frequency, duration_s, start_gain, end_gain,
        )
        if not path.exists():
            try:
                self._sounds_dir.mkdir(parents=True, exist_ok=True)
                path.write_bytes(
                    tone_wav_bytes(frequency, duration_s, start_gain, end_gain)
                )
            except OSError as exc:
                raise ResourceUnavailable("sound cache", str(exc)) from exc
            logger.debug("Generated tone %s", path)
        return path

    # ── internal ──────────────────────────────────────────────────────

    def _load_effect(self, path: Path):
        try:
            from PyQt6.QtMultimedia import QSoundEffect
        except ImportError as exc:
            raise ResourceUnavailable("audio output", str(exc)) from exc
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.setVolume(self._volume)
        return effect
