import numpy as np
import pytest

from whisperstream.audio_utils import WHISPER_SAMPLE_RATE
from whisperstream.backend import (
    BackendConfig,
    Segment,
    TranscriptionBackend,
    TranscriptionResult,
)


class EchoBackend(TranscriptionBackend):
    def __init__(self):
        self.config = None

    def initialize(self, config):
        self.config = config
        return True

    def transcribe(self, samples, window_start_ms):
        duration = len(samples) * 1000 // WHISPER_SAMPLE_RATE
        return TranscriptionResult(
            segments=[Segment(window_start_ms, window_start_ms + duration, "hello")],
            is_final=True,
        )

    def is_ready(self):
        return self.config is not None


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TranscriptionBackend()


def test_concrete_backend_initialize_and_ready():
    backend = EchoBackend()
    assert backend.is_ready() is False
    config = BackendConfig(model_path="/tmp/model.bin")
    assert backend.initialize(config) is True
    assert backend.is_ready() is True
    assert backend.config.model_path == "/tmp/model.bin"


def test_transcribe_offsets_by_window_start():
    backend = EchoBackend()
    backend.initialize(BackendConfig())
    result = backend.transcribe(np.zeros(WHISPER_SAMPLE_RATE, dtype=np.float32), 2500)
    assert result.is_final is True
    assert result.segments[0].start_ms == 2500
    assert result.segments[0].end_ms == 2500 + 1000
    assert result.segments[0].text == "hello"


def test_backend_config_defaults():
    config = BackendConfig()
    assert config.language == "en"
    assert config.sample_rate == WHISPER_SAMPLE_RATE
    assert config.beam_size == 5
    assert config.n_threads == 4


def test_transcription_result_lists_are_independent():
    first = TranscriptionResult()
    second = TranscriptionResult()
    first.segments.append(Segment(0, 10, "x"))
    assert len(first.segments) == 1
    assert len(second.segments) == 0
    assert second.is_final is False


def test_segment_speaker_defaults_empty():
    segment = Segment(start_ms=1, end_ms=2, text="word")
    assert segment.speaker == ""
    assert segment == Segment(1, 2, "word")