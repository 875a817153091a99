"""Fixed-capacity ring buffer for float32 audio samples."""

from __future__ import annotations

import numpy as np


class AudioRingBuffer:
    """Ring buffer that keeps the most recent ``capacity`` samples."""

    def __init__(self, capacity: int) -> None:
        self._capacity = max(int(capacity), 1)
        self._buffer = np.zeros(self._capacity, dtype=np.float32)
        self._write_pos = 0
        self._total_written = 0

    def write(self, samples) -> int:
        """Append samples, overwriting the oldest when full.

        Returns the number of samples stored, which is less than the input
        length only when the input is larger than the capacity.
        """
        data = np.asarray(samples, dtype=np.float32).ravel()
        count = data.size
        if count == 0:
            return 0
        if count > self._capacity:
            data = data[count - self._capacity:]
            count = self._capacity

        first = min(count, self._capacity - self._write_pos)
        self._buffer[self._write_pos:self._write_pos + first] = data[:first]
        if first < count:
            second = count - first
            self._buffer[:second] = data[first:]
            self._write_pos = second
        else:
            self._write_pos = (self._write_pos + first) % self._capacity

        self._total_written += count
        return count

    def extract_window(self, count: int, offset_from_end: int = 0) -> np.ndarray:
        """Copy up to ``count`` samples ending ``offset_from_end`` before the write head."""
        if count < 0 or offset_from_end < 0:
            raise ValueError("count and offset_from_end must be non-negative")
        avail = self.available()
        if offset_from_end >= avail:
            return np.zeros(0, dtype=np.float32)

        count = min(count, avail - offset_from_end)
        total_offset = offset_from_end + count
        if total_offset <= self._write_pos:
            start = self._write_pos - total_offset
        else:
            start = self._capacity - (total_offset - self._write_pos)

        out = np.empty(count, dtype=np.float32)
        first = min(count, self._capacity - start)
        out[:first] = self._buffer[start:start + first]
        if first < count:
            out[first:] = self._buffer[:count - first]
        return out

    def available(self) -> int:
        """Number of valid samples currently held."""
        return min(self._total_written, self._capacity)

    def total_written(self) -> int:
        """Total samples ever written since construction or reset."""
        return self._total_written

    def capacity(self) -> int:
        """Capacity in samples."""
        return self._capacity

    def fill_ratio(self) -> float:
        """Fraction of the buffer holding valid samples."""
        return self.available() / self._capacity

    def reset(self) -> None:
        """Forget all stored samples."""
        self._write_pos = 0
        self._total_written = 0