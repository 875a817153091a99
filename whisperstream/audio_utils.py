"""PCM sample conversion helpers."""

from __future__ import annotations

import numpy as np

WHISPER_SAMPLE_RATE = 16000
"""Sample rate, in Hz, that the transcription models expect."""

INT16_TO_FLOAT = 1.0 / 32768.0
"""Scale factor mapping signed 16-bit samples onto [-1, 1)."""


def pcm_s16le_to_float(samples) -> np.ndarray:
    """Convert signed 16-bit integer samples to normalised float32."""
    values = np.asarray(samples, dtype=np.int16).ravel()
    return values.astype(np.float32) * np.float32(INT16_TO_FLOAT)


def pcm_bytes_to_float(data) -> np.ndarray:
    """Convert little-endian signed 16-bit PCM bytes to normalised float32.

    A trailing odd byte is ignored.
    """
    sample_count = len(data) // 2
    if sample_count == 0:
        return np.zeros(0, dtype=np.float32)
    values = np.frombuffer(data, dtype="<i2", count=sample_count)
    return values.astype(np.float32) * np.float32(INT16_TO_FLOAT)