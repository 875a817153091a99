"""Energy-based voice activity detection."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from whisperstream.audio_utils import WHISPER_SAMPLE_RATE


@dataclass
class VadConfig:
    """Tuning parameters for :class:`VoiceActivityDetector`."""

    energy_threshold: float = 0.005
    silence_timeout_ms: int = 500
    frame_duration_ms: int = 30
    max_speech_duration_ms: int = 30000


@dataclass(frozen=True)
class VadResult:
    """Outcome of processing one chunk of audio."""

    is_speech: bool
    end_of_speech: bool
    speech_samples: int


def _ms_to_samples(ms: int) -> int:
    return int(ms) * WHISPER_SAMPLE_RATE // 1000


class VoiceActivityDetector:
    """Classifies frames as speech or silence by RMS energy and tracks end of speech."""

    def __init__(self, config: VadConfig | None = None) -> None:
        self._config = config if config is not None else VadConfig()
        self._frame_samples = _ms_to_samples(self._config.frame_duration_ms)
        if self._frame_samples <= 0:
            raise ValueError("frame_duration_ms must cover at least one sample")
        self._silence_timeout_samples = _ms_to_samples(self._config.silence_timeout_ms)
        self._max_speech_samples = _ms_to_samples(self._config.max_speech_duration_ms)
        self._threshold = np.float32(self._config.energy_threshold)
        self._in_speech = False
        self._silence_counter = 0
        self._speech_counter = 0

    def process(self, samples) -> VadResult:
        """Process a chunk frame by frame and return the aggregate result."""
        data = np.asarray(samples, dtype=np.float32).ravel()
        any_speech = False
        eos = False

        for start in range(0, data.size, self._frame_samples):
            frame = data[start:start + self._frame_samples]
            frame_len = frame.size
            if self._is_speech_frame(frame):
                any_speech = True
                self._in_speech = True
                self._silence_counter = 0
                self._speech_counter += frame_len
                if self._speech_counter >= self._max_speech_samples:
                    eos = True
                    self._speech_counter = 0
                    self._in_speech = False
                    self._silence_counter = 0
            elif self._in_speech:
                self._silence_counter += frame_len
                if self._silence_counter >= self._silence_timeout_samples:
                    eos = True
                    self._in_speech = False
                    self._silence_counter = 0

        return VadResult(
            is_speech=any_speech or self._in_speech,
            end_of_speech=eos,
            speech_samples=self._speech_counter,
        )

    def reset(self) -> None:
        """Clear all speech/silence tracking."""
        self._in_speech = False
        self._silence_counter = 0
        self._speech_counter = 0

    def in_speech(self) -> bool:
        """Whether speech is currently considered active."""
        return self._in_speech

    def speech_samples(self) -> int:
        """Speech samples accumulated since the last end of speech or reset."""
        return self._speech_counter

    def config(self) -> VadConfig:
        """The configuration in use."""
        return self._config

    def _is_speech_frame(self, frame: np.ndarray) -> bool:
        if frame.size == 0:
            return False
        sum_sq = np.sum(frame * frame, dtype=np.float32)
        rms = np.sqrt(sum_sq / np.float32(frame.size))
        return bool(rms >= self._threshold)