"""Audio building blocks for streaming speech transcription: PCM conversion, resampling, ring buffering, voice activity detection, a backend interface, auth rate limiting and client IP resolution."""

__version__ = "0.1.0"