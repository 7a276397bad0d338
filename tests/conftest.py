from __future__ import annotations

import io
import wave
from pathlib import Path

import numpy as np
import pytest


def make_wav_bytes(audio: np.ndarray, sample_rate: int) -> bytes:
    """Encode channel-first float audio as 16-bit PCM WAV."""

    channel_first = np.atleast_2d(np.asarray(audio, dtype=np.float64))
    pcm = np.clip(np.round(channel_first.T * 32767.0), -32768, 32767).astype("<i2")
    with io.BytesIO() as buffer:
        with wave.open(buffer, "wb") as wav:
            wav.setnchannels(channel_first.shape[0])
            wav.setsampwidth(2)
            wav.setframerate(sample_rate)
            wav.writeframes(pcm.tobytes())
        return buffer.getvalue()


def make_tone(
    *,
    frequency: float = 1_000.0,
    amplitude: float = 0.5,
    seconds: float = 1.0,
    sample_rate: int = 44_100,
) -> np.ndarray:
    t = np.arange(int(round(seconds * sample_rate))) / sample_rate
    return amplitude * np.sin(2 * np.pi * frequency * t)


@pytest.fixture
def tone():
    return make_tone


@pytest.fixture
def write_wav(tmp_path: Path):
    def _write(name: str, audio: np.ndarray, sample_rate: int = 44_100) -> Path:
        path = tmp_path / name
        path.write_bytes(make_wav_bytes(audio, sample_rate))
        return path

    return _write
