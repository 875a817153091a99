"""Transcription backend interface and result types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from whisperstream.audio_utils import WHISPER_SAMPLE_RATE


@dataclass
class Segment:
    """A transcribed span of audio with absolute timestamps."""

    start_ms: int = 0
    end_ms: int = 0
    text: str = ""
    speaker: str = ""


@dataclass
class TranscriptionResult:
    """Segments produced for one audio window."""

    segments: list[Segment] = field(default_factory=list)
    is_final: bool = False


@dataclass
class BackendConfig:
    """Settings used to initialise a backend."""

    language: str = "en"
    sample_rate: int = WHISPER_SAMPLE_RATE
    model_id: str = ""
    model_path: str = ""
    beam_size: int = 5
    n_threads: int = 4


class TranscriptionBackend(ABC):
    """Speech-to-text engine that transcribes 16 kHz float32 windows."""

    @abstractmethod
    def initialize(self, config: BackendConfig) -> bool:
        """Load models and allocate resources; return whether it succeeded."""

    @abstractmethod
    def transcribe(self, samples, window_start_ms: int) -> TranscriptionResult:
        """Transcribe a window; segment times are offset by ``window_start_ms``."""

    @abstractmethod
    def is_ready(self) -> bool:
        """Whether the backend can accept transcription work."""