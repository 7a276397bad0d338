from __future__ import annotations

import numpy as np
import pytest

from mixramp.audio_source import ArraySource
from mixramp.driver import ChunkBuffers, analyze_samples, analyze_source, chunk_frame_count
from mixramp.errors import InsufficientSamples, UnsupportedChannelLayout, UnsupportedSampleRate
from mixramp.ramps import render_tags


def _curve(audio: np.ndarray, sample_rate: int, **kwargs) -> list[tuple[float, float]]:
    readings: list[tuple[float, float]] = []
    analyze_samples(audio, sample_rate, on_chunk=lambda t, db: readings.append((t, db)), **kwargs)
    return readings


def test_chunk_frame_count_rounds_duration() -> None:
    assert chunk_frame_count(44_100) == 4_410
    assert chunk_frame_count(48_000, 0.25) == 12_000
    assert chunk_frame_count(8_000, 0.00001) == 1


def test_chunk_buffers_scale_and_deinterleave_in_place() -> None:
    buffers = ChunkBuffers(2, 2)
    left, right = buffers.left, buffers.right

    buffers.load(np.array([0.5, -0.5, 0.25, -0.25]))

    assert buffers.left is left and buffers.right is right
    assert buffers.left.tolist() == [16_384.0, 8_192.0]
    assert buffers.right.tolist() == [-16_384.0, -8_192.0]


def test_chunk_buffers_mono_has_no_right_channel() -> None:
    buffers = ChunkBuffers(3, 1)
    buffers.load(np.array([1.0, 0.0, -1.0]))

    assert buffers.right is None
    assert buffers.left.tolist() == [32_768.0, 0.0, -32_768.0]


def test_chunk_buffers_reject_surround() -> None:
    with pytest.raises(UnsupportedChannelLayout):
        ChunkBuffers(10, 6)


def test_silent_track_yields_empty_ramps() -> None:
    result = analyze_samples(np.zeros((2, 44_100)), 44_100)

    assert result.chunk_count == 10
    assert render_tags(result) == ["MIXRAMP_REF=89.00", "MIXRAMP_START=", "MIXRAMP_END="]


def test_steady_tone_gives_single_start_and_end_point(tone) -> None:
    result = analyze_samples(np.tile(tone(amplitude=0.5, seconds=0.1), 10), 44_100)

    assert result.track.length_seconds == pytest.approx(1.1)
    assert len(result.start) == 1
    assert result.start[0].time == 0.0
    assert len(result.end) == 1
    assert result.end[0].time == pytest.approx(0.2)
    assert result.start[0].db == result.end[0].db


def test_chunks_are_processed_in_time_order(tone) -> None:
    readings = _curve(tone(seconds=0.5), 44_100)

    assert [t for t, _ in readings] == pytest.approx([0.0, 0.1, 0.2, 0.3, 0.4])


def test_mono_and_duplicated_stereo_read_the_same(tone) -> None:
    signal = tone(frequency=440.0, amplitude=0.3, seconds=1.0, sample_rate=48_000) * np.linspace(0.0, 1.0, 48_000)

    mono = _curve(signal, 48_000)
    stereo = _curve(np.vstack([signal, signal]), 48_000)

    assert [db for _, db in stereo] == pytest.approx([db for _, db in mono])


def test_trailing_partial_chunk_is_dropped(tone) -> None:
    signal = tone(seconds=1.05)
    readings = _curve(signal, 44_100)
    result = analyze_samples(signal, 44_100)

    assert result.chunk_count == 10
    assert readings[-1][0] == pytest.approx(0.9)
    last_chunk_time = readings[-1][0]
    assert all(point.time <= last_chunk_time for point in result.start)
    assert all(point.time >= result.track.length_seconds - last_chunk_time - 1e-9 for point in result.end)


def test_fade_in_spreads_start_points_over_time(tone) -> None:
    envelope = np.linspace(0.0, 1.0, 88_200)
    result = analyze_samples(tone(seconds=2.0) * envelope, 44_100)

    assert len(result.start) > 1
    times = [point.time for point in result.start]
    dbs = [point.db for point in result.start]
    assert times == sorted(times)
    assert dbs == sorted(dbs)
    assert result.start[0].time == 0.0


def test_unsupported_sample_rate_fails_before_reading() -> None:
    source = ArraySource(np.zeros((2, 96_000)), 96_000)

    with pytest.raises(UnsupportedSampleRate):
        analyze_source(source)


def test_surround_source_is_rejected() -> None:
    with pytest.raises(UnsupportedChannelLayout):
        analyze_samples(np.zeros((6, 44_100)), 44_100)


def test_chunk_shorter_than_rms_window_is_fatal(tone) -> None:
    with pytest.raises(InsufficientSamples):
        analyze_samples(tone(seconds=1.0), 44_100, chunk_seconds=0.02)


def test_track_shorter_than_one_chunk_has_no_points(tone) -> None:
    result = analyze_samples(tone(seconds=0.05), 44_100)

    assert result.chunk_count == 0
    assert result.start == ()
    assert result.end == ()
