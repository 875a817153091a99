[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whisperstream"
version = "0.1.0"
description = "Audio building blocks for streaming speech transcription: PCM conversion, resampling, ring buffering, voice activity detection, a backend interface, auth rate limiting and client IP resolution."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "speech",
    "transcription",
    "streaming",
    "audio",
    "vad",
    "resampling",
    "ring-buffer",
    "rate-limiting",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["whisperstream"]

[tool.pytest.ini_options]
addopts = "-ra"
