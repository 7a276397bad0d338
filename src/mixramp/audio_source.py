"""Audio source port consumed by the chunk driver.

A source exposes stream properties and hands out successive blocks of
interleaved float PCM. Decoding, format support and resampling belong to the
backing library.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Protocol

import numpy as np

from .errors import InputUnreadable

AudioBackend = Literal["pedalboard", "soundfile"]


class AudioSource(Protocol):
    """Port for reading a track chunk by chunk."""

    frames: int
    channel_count: int
    sample_rate: float

    def read(self, frames: int) -> np.ndarray:
        """Return up to ``frames`` frames as a 1-D interleaved float array."""

    def close(self) -> None:
        """Release the underlying decoder."""


class ArraySource:
    """In-memory source over channel-first float audio in ``[-1.0, 1.0]``."""

    def __init__(self, audio: np.ndarray, sample_rate: float) -> None:
        channel_first = np.asarray(audio, dtype=np.float64)
        if channel_first.ndim == 1:
            channel_first = channel_first[np.newaxis, :]
        if channel_first.ndim != 2:
            raise ValueError("Audio must be a 1D mono or 2D channel-first array.")
        self._frame_major = np.ascontiguousarray(channel_first.T)
        self._position = 0
        self.frames = int(channel_first.shape[1])
        self.channel_count = int(channel_first.shape[0])
        self.sample_rate = float(sample_rate)

    def read(self, frames: int) -> np.ndarray:
        block = self._frame_major[self._position : self._position + frames]
        self._position += block.shape[0]
        return block.reshape(-1)

    def close(self) -> None:
        return

    def __enter__(self) -> ArraySource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_audio_source(path: Path, backend: AudioBackend = "pedalboard") -> AudioSource:
    """Open ``path`` with the selected decoding backend.

    Raises:
        InputUnreadable: if the file is missing or the backend cannot decode it.
    """

    if not path.exists() or not path.is_file():
        raise InputUnreadable(f"Audio file not found: {path}")

    if backend == "pedalboard":
        from .infrastructure.pedalboard_source import PedalboardSource

        return PedalboardSource(path)
    if backend == "soundfile":
        from .infrastructure.soundfile_source import SoundFileSource

        return SoundFileSource(path)
    raise ValueError(f"Unknown audio backend {backend!r}.")
