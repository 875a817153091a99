"""Streaming sample-rate conversion with a windowed-sinc filter."""

from __future__ import annotations

import math

import numpy as np

_ZERO_CROSSINGS = 16
_BLOCK = 4096


class Resampler:
    """Converts interleaved float32 audio from one rate to another, chunk by chunk.

    Filter state is carried across calls so that consecutive chunks join
    seamlessly. After a call with ``end_of_input`` the state starts afresh.
    """

    def __init__(self, src_rate: int, dst_rate: int, channels: int = 1) -> None:
        if src_rate <= 0 or dst_rate <= 0:
            raise ValueError("Sample rates must be positive")
        if channels < 1:
            raise ValueError("Channel count must be positive")
        self._src_rate = int(src_rate)
        self._dst_rate = int(dst_rate)
        self._channels = int(channels)
        self._ratio = self._dst_rate / self._src_rate
        self._cutoff = min(1.0, self._ratio)
        self._half_width = math.ceil(_ZERO_CROSSINGS / self._cutoff)
        self._offsets = np.arange(-self._half_width + 1, self._half_width + 1, dtype=np.int64)
        self.reset()

    def process(self, samples, end_of_input: bool = False) -> np.ndarray:
        """Resample a chunk and return the output samples that are ready."""
        data = np.asarray(samples, dtype=np.float32).ravel()
        if data.size % self._channels:
            raise ValueError("Sample count is not a multiple of the channel count")

        if not self.needs_resampling():
            if end_of_input:
                self.reset()
            return data.copy()

        frames = data.reshape(-1, self._channels).astype(np.float64)
        self._history = np.concatenate([self._history, frames])
        self._frames_in += frames.shape[0]

        limit = self._output_limit(end_of_input)
        pieces = [
            self._render(first, min(first + _BLOCK, limit))
            for first in range(self._next_out, limit, _BLOCK)
        ]
        self._next_out = limit

        if end_of_input:
            self.reset()
        else:
            self._trim()

        if not pieces:
            return np.zeros(0, dtype=np.float32)
        return np.concatenate(pieces).astype(np.float32).ravel()

    def reset(self) -> None:
        """Drop all carried-over state."""
        self._history = np.zeros((0, self._channels), dtype=np.float64)
        self._history_start = 0
        self._frames_in = 0
        self._next_out = 0

    def needs_resampling(self) -> bool:
        """Whether source and destination rates differ."""
        return self._src_rate != self._dst_rate

    def ratio(self) -> float:
        """Output rate divided by input rate."""
        return self._ratio

    def _output_limit(self, end_of_input: bool) -> int:
        total = self._frames_in
        if end_of_input:
            limit = -(-total * self._dst_rate // self._src_rate)
        else:
            usable = total - 1 - self._half_width
            limit = usable * self._dst_rate // self._src_rate + 1 if usable >= 0 else 0
        return max(limit, self._next_out)

    def _render(self, first: int, stop: int) -> np.ndarray:
        k = np.arange(first, stop, dtype=np.int64)
        t = (k * self._src_rate) / self._dst_rate
        base = np.floor(t).astype(np.int64)
        taps = base[:, None] + self._offsets[None, :]
        dist = t[:, None] - taps

        window = 0.5 * (1.0 + np.cos(np.pi * dist / self._half_width))
        weights = self._cutoff * np.sinc(self._cutoff * dist) * window
        weights[np.abs(dist) >= self._half_width] = 0.0

        valid = (taps >= 0) & (taps < self._frames_in)
        index = np.clip(taps - self._history_start, 0, self._history.shape[0] - 1)
        values = self._history[index] * valid[..., None]
        return np.einsum("kt,ktc->kc", weights, values)

    def _trim(self) -> None:
        earliest = (self._next_out * self._src_rate) // self._dst_rate - self._half_width + 1
        keep_from = max(earliest, self._history_start)
        drop = keep_from - self._history_start
        if drop > 0:
            self._history = self._history[drop:]
            self._history_start = keep_from