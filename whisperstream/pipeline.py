"""Audio ingestion: PCM decoding, resampling to 16 kHz and buffering."""

from __future__ import annotations

from whisperstream.audio_utils import WHISPER_SAMPLE_RATE, pcm_bytes_to_float
from whisperstream.resampler import Resampler
from whisperstream.ring_buffer import AudioRingBuffer


class AudioPipeline:
    """Converts incoming PCM audio to 16 kHz float32 and stores it in a ring buffer."""

    def __init__(self, input_sample_rate: int, ring_buffer_seconds: float = 30.0) -> None:
        self._input_sample_rate = int(input_sample_rate)
        self._ring = AudioRingBuffer(int(WHISPER_SAMPLE_RATE * ring_buffer_seconds))
        self._resampler: Resampler | None = None
        if self._input_sample_rate != WHISPER_SAMPLE_RATE:
            self._resampler = Resampler(self._input_sample_rate, WHISPER_SAMPLE_RATE)

    def ingest_pcm(self, data) -> int:
        """Ingest little-endian signed 16-bit PCM bytes.

        Returns the number of 16 kHz samples written to the ring buffer.
        """
        samples = pcm_bytes_to_float(data)
        if self._resampler is not None and self._resampler.needs_resampling():
            samples = self._resampler.process(samples)
        return self._ring.write(samples)

    def ring_buffer(self) -> AudioRingBuffer:
        """The ring buffer holding the converted audio."""
        return self._ring

    def input_sample_rate(self) -> int:
        """Sample rate of the incoming audio."""
        return self._input_sample_rate

    def reset(self) -> None:
        """Clear buffered audio and resampler state."""
        self._ring.reset()
        if self._resampler is not None:
            self._resampler.reset()