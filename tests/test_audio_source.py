from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from mixramp.audio_source import ArraySource, open_audio_source
from mixramp.errors import InputUnreadable


@pytest.mark.parametrize("backend", ["pedalboard", "soundfile"])
def test_source_reports_stream_properties(write_wav, backend) -> None:
    path = write_wav("stereo.wav", np.zeros((2, 4_410)), sample_rate=22_050)

    with open_audio_source(path, backend=backend) as source:
        assert source.frames == 4_410
        assert source.channel_count == 2
        assert source.sample_rate == 22_050.0


@pytest.mark.parametrize("backend", ["pedalboard", "soundfile"])
def test_source_reads_interleaved_blocks(write_wav, backend) -> None:
    left = np.full(10, 0.5)
    right = np.full(10, -0.25)
    path = write_wav("lr.wav", np.vstack([left, right]))

    with open_audio_source(path, backend=backend) as source:
        first = source.read(4)
        rest = source.read(100)

    assert first.shape == (8,)
    assert np.allclose(first[0::2], 0.5, atol=1e-4)
    assert np.allclose(first[1::2], -0.25, atol=1e-4)
    assert rest.shape == (12,)


@pytest.mark.parametrize("backend", ["pedalboard", "soundfile"])
def test_missing_file_is_unreadable(tmp_path: Path, backend) -> None:
    with pytest.raises(InputUnreadable) as exc:
        open_audio_source(tmp_path / "missing.wav", backend=backend)

    assert exc.value.code == "input_unreadable"


@pytest.mark.parametrize("backend", ["pedalboard", "soundfile"])
def test_undecodable_file_is_unreadable(tmp_path: Path, backend) -> None:
    bad = tmp_path / "bad.wav"
    bad.write_bytes(b"RIFF\x24\x00\x00\x00WAVEfmt \x02\x00\x00\x00")

    with pytest.raises(InputUnreadable):
        open_audio_source(bad, backend=backend)


def test_array_source_interleaves_channel_first_audio() -> None:
    source = ArraySource(np.array([[1.0, 2.0, 3.0], [-1.0, -2.0, -3.0]]), 8_000)

    assert source.frames == 3
    assert source.channel_count == 2
    assert source.read(2).tolist() == [1.0, -1.0, 2.0, -2.0]
    assert source.read(2).tolist() == [3.0, -3.0]
    assert source.read(2).shape == (0,)


def test_array_source_treats_1d_audio_as_mono() -> None:
    source = ArraySource(np.zeros(5), 8_000)

    assert source.channel_count == 1
    assert source.read(5).shape == (5,)
