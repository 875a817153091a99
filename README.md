# whisperstream

Audio building blocks for a real-time speech-transcription service. The
package turns incoming 16-bit PCM into 16 kHz float32 samples and keeps the
most recent audio in a ring buffer. It can detect speech by its energy, and it
defines the interface a transcription engine implements. For the network side
it has a per-IP limiter for failed authentication attempts and a helper that
resolves a client's IP address from `X-Forwarded-For`.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and depends on `numpy`.

## Modules

- `whisperstream.audio_utils`
  - `pcm_s16le_to_float(samples)` turns signed 16-bit integer samples into a
    float32 array scaled by 1/32768.
  - `pcm_bytes_to_float(data)` does the same for little-endian PCM bytes. A
    trailing odd byte is ignored.
  - `WHISPER_SAMPLE_RATE` is 16000, the rate the models expect.
- `whisperstream.ring_buffer.AudioRingBuffer(capacity)`
  - A fixed-capacity float32 ring buffer. A capacity below 1 is raised to 1.
  - `write(samples)` appends samples. Once the buffer is full it overwrites the
    oldest ones, and if the input is larger than the capacity only its last
    `capacity` samples are kept. It returns the number of samples stored.
  - `extract_window(count, offset_from_end=0)` returns a copy of up to `count`
    samples that end `offset_from_end` samples before the write head. It
    returns an empty array when the offset reaches past the available data.
  - `available()`, `total_written()`, `capacity()`, `fill_ratio()` and
    `reset()` report on the buffer or clear it.
- `whisperstream.vad`
  - `VoiceActivityDetector(config=None)` splits audio into frames and marks a
    frame as speech when its RMS energy is at or above the threshold.
  - `process(samples)` returns a `VadResult` with `is_speech`, `end_of_speech`
    and `speech_samples`. End of speech is reported in two cases: silence after
    speech has lasted `silence_timeout_ms`, or continuous speech has reached
    `max_speech_duration_ms`.
  - `VadConfig` defaults: `energy_threshold=0.005`, `silence_timeout_ms=500`,
    `frame_duration_ms=30`, `max_speech_duration_ms=30000`.
- `whisperstream.resampler.Resampler(src_rate, dst_rate, channels=1)`
  - Streaming windowed-sinc resampling of interleaved float32 audio. Both rates
    must be positive, otherwise it raises `ValueError`.
  - `process(samples, end_of_input=False)` returns the output that is ready so
    far and carries filter state across calls. With `end_of_input=True` it
    flushes the rest of the output and starts afresh.
  - `ratio()` gives `dst_rate / src_rate`. `needs_resampling()` tells whether
    the two rates differ; when they are equal, `process` passes the input
    through unchanged.
- `whisperstream.pipeline.AudioPipeline(input_sample_rate, ring_buffer_seconds=30.0)`
  - `ingest_pcm(data)` converts PCM bytes to float32 and resamples them to
    16 kHz if the input rate differs. The result is written to a ring buffer of
    `ring_buffer_seconds` at 16 kHz, and the call returns the number of samples
    written. The resampler runs in streaming mode, so a few output samples stay
    held back until more input arrives.
  - `ring_buffer()`, `input_sample_rate()` and `reset()` give access to the
    buffer and the input rate, or clear the pipeline.
- `whisperstream.backend`
  - The dataclasses `Segment` (`start_ms`, `end_ms`, `text`, `speaker`),
    `TranscriptionResult` (`segments`, `is_final`) and `BackendConfig`
    (`language="en"`, `sample_rate=16000`, `model_id`, `model_path`,
    `beam_size=5`, `n_threads=4`).
  - The abstract `TranscriptionBackend`, with `initialize(config)`,
    `transcribe(samples, window_start_ms)` and `is_ready()`.
- `whisperstream.rate_limiter.AuthRateLimiter(max_failures=10, window_secs=60.0, max_tracked_ips=0, clock=time.monotonic)`
  - `check_and_record_failure(ip)` records a failure and returns `True` once
    the IP has more than `max_failures` failures in its current window. A
    window older than `window_secs` starts over.
  - `is_blocked(ip)` checks without recording a failure. `cleanup()` drops
    expired entries, and `len(limiter)` is the number of IPs being tracked.
  - With `max_tracked_ips` above zero, the limiter evicts expired entries first
    and then the oldest ones, so the number of tracked IPs stays within the
    cap. The limiter is thread-safe.
- `whisperstream.ip_extraction.extract_client_ip(forwarded_for, remote_addr, trust_proxy, trusted_hops=1)`
  - Returns `remote_addr` unless `trust_proxy` is set and the header is
    non-empty.
  - Otherwise it skips `trusted_hops - 1` entries from the right of the header
    and returns the next one, stripped of spaces and tabs. It falls back to
    `remote_addr` if the header has too few entries or the chosen entry is
    blank.

## Example

```python
import numpy as np

from whisperstream.pipeline import AudioPipeline
from whisperstream.vad import VadConfig, VoiceActivityDetector

pipeline = AudioPipeline(48000, 30.0)
vad = VoiceActivityDetector(VadConfig(silence_timeout_ms=500))

t = np.arange(48000) / 48000
tone = (0.3 * np.sin(2 * np.pi * 440 * t) * 32767).astype("<i2").tobytes()
silence = np.zeros(48000, dtype="<i2").tobytes()

for chunk in (tone, silence):
    written = pipeline.ingest_pcm(chunk)
    fresh = pipeline.ring_buffer().extract_window(written)
    print(written, vad.process(fresh))
```

A transcription engine plugs in by subclassing `TranscriptionBackend`:

```python
from whisperstream.backend import Segment, TranscriptionBackend, TranscriptionResult


class EchoBackend(TranscriptionBackend):
    def initialize(self, config):
        return True

    def transcribe(self, samples, window_start_ms):
        return TranscriptionResult(
            segments=[Segment(window_start_ms, window_start_ms + 1000, "hello", "")],
            is_final=True,
        )

    def is_ready(self):
        return True
```

## What the package does not do

The package is a library of parts, not a running service. It has no network
server, no command-line program and no speech model; `TranscriptionBackend`
is only an interface. It does not cut the ring buffer into transcription
windows for you, and it has no worker pool for running backends. It keeps no
per-stream sessions or checkpoints. Only raw PCM input is supported; there is
no Opus decoding.

## Running the tests

```
pip install ".[test]"
pytest
```