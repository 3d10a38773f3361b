"""Audio package."""

from .sounds import (
    QtTonePlayer,
    synthesize_tone,
    tone_wav_bytes,
    exponential_envelope,
    SAMPLE_RATE,
)

__all__ = [
    "QtTonePlayer",
    "synthesize_tone",
    "tone_wav_bytes",
    "exponential_envelope",
    "SAMPLE_RATE",
]
