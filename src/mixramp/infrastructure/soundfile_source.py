"""Audio source adapter backed by soundfile (libsndfile)."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import soundfile as sf

from mixramp.errors import InputUnreadable


class SoundFileSource:
    """Stream frames from any container libsndfile can decode."""

    def __init__(self, path: Path) -> None:
        self.path = path
        try:
            self._file = sf.SoundFile(str(path), "r")
        except (OSError, RuntimeError, TypeError) as exc:
            raise InputUnreadable(f"Cannot decode {path}: {exc}") from exc
        self.frames = int(self._file.frames)
        self.channel_count = int(self._file.channels)
        self.sample_rate = float(self._file.samplerate)

    def read(self, frames: int) -> np.ndarray:
        try:
            block = self._file.read(frames, dtype="float64", always_2d=True)
        except (OSError, RuntimeError) as exc:
            raise InputUnreadable(f"Cannot decode {self.path}: {exc}") from exc
        return block.reshape(-1)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> SoundFileSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
