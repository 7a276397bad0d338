"""Audio source adapter backed by pedalboard."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from pedalboard.io import AudioFile

from mixramp.errors import InputUnreadable


class PedalboardSource:
    """Stream frames from any container pedalboard can decode."""

    def __init__(self, path: Path) -> None:
        self.path = path
        try:
            self._file = AudioFile(str(path), "r")
        except (OSError, ValueError, RuntimeError) as exc:
            raise InputUnreadable(f"Cannot decode {path}: {exc}") from exc
        self.frames = int(self._file.frames)
        self.channel_count = int(self._file.num_channels)
        self.sample_rate = float(self._file.samplerate)

    def read(self, frames: int) -> np.ndarray:
        try:
            block = self._file.read(frames)
        except (OSError, ValueError, RuntimeError) as exc:
            raise InputUnreadable(f"Cannot decode {self.path}: {exc}") from exc
        # pedalboard returns channel-first blocks
        return np.ascontiguousarray(block.T, dtype=np.float64).reshape(-1)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> PedalboardSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
