"""Chunk sequencing between an audio source, the loudness engine and the extractor."""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from .audio_contract import (
    CHUNK_SECONDS,
    PCM_SCALE,
    REFERENCE_LEVEL_DB,
    ensure_supported_channel_count,
)
from .audio_source import ArraySource, AudioSource
from .domain.models import MixRampResult, TrackInfo
from .gain_analysis import LoudnessEngine
from .ramps import RampExtractor

logger = logging.getLogger(__name__)

ChunkCallback = Callable[[float, float], None]


def chunk_frame_count(sample_rate: float, chunk_seconds: float = CHUNK_SECONDS) -> int:
    return max(1, int(round(chunk_seconds * sample_rate)))


class ChunkBuffers:
    """Per-channel analysis buffers, allocated once and refilled every chunk."""

    def __init__(self, frames: int, channel_count: int) -> None:
        ensure_supported_channel_count(channel_count)
        self.frames = frames
        self.channel_count = channel_count
        self.left = np.zeros(frames, dtype=np.float64)
        self.right = np.zeros(frames, dtype=np.float64) if channel_count == 2 else None

    def load(self, interleaved: np.ndarray) -> None:
        """Scale a full chunk of interleaved samples to 16-bit range and split it."""

        if self.right is None:
            np.multiply(interleaved, PCM_SCALE, out=self.left)
        else:
            np.multiply(interleaved[0::2], PCM_SCALE, out=self.left)
            np.multiply(interleaved[1::2], PCM_SCALE, out=self.right)


def analyze_source(
    source: AudioSource,
    *,
    chunk_seconds: float = CHUNK_SECONDS,
    on_chunk: ChunkCallback | None = None,
) -> MixRampResult:
    """Analyze every complete chunk of ``source`` and return its ramp pair.

    A trailing chunk shorter than ``chunk_seconds`` is not analyzed. End ramp
    times are measured against the track length plus one chunk, because each
    crossing is stamped with the start of its chunk.

    Raises:
        UnsupportedChannelLayout: for sources that are neither mono nor stereo.
        UnsupportedSampleRate: if the loudness filters do not cover the rate.
        InsufficientSamples: if a chunk completes no RMS window.
        AnalysisError: if the filter stage fails.
    """

    channel_count = source.channel_count
    sample_rate = source.sample_rate
    ensure_supported_channel_count(channel_count)
    engine = LoudnessEngine(sample_rate)

    chunk_frames = chunk_frame_count(sample_rate, chunk_seconds)
    buffers = ChunkBuffers(chunk_frames, channel_count)
    track = TrackInfo(
        frames=int(source.frames),
        sample_rate=sample_rate,
        channel_count=channel_count,
        length_seconds=source.frames / sample_rate + chunk_seconds,
    )
    extractor = RampExtractor(track.length_seconds)

    chunk_count = 0
    expected = chunk_frames * channel_count
    while True:
        block = source.read(chunk_frames)
        if block.shape[0] < expected:
            break
        buffers.load(block)

        chunk_time = chunk_count * chunk_frames / sample_rate
        engine.analyze(buffers.left, buffers.right, chunk_frames, channel_count)
        loudness = engine.read_and_reset()
        logger.debug("chunk_analyzed", extra={"chunk_time": chunk_time, "loudness_db": loudness})

        extractor.observe(chunk_time, loudness)
        if on_chunk is not None:
            on_chunk(chunk_time, loudness)
        chunk_count += 1

    logger.info(
        "track_analyzed",
        extra={"chunk_count": chunk_count, "length_seconds": track.length_seconds},
    )
    return MixRampResult(
        track=track,
        start=extractor.start_points(),
        end=extractor.end_points(),
        chunk_count=chunk_count,
        reference_db=REFERENCE_LEVEL_DB,
    )


def analyze_samples(
    audio: np.ndarray,
    sample_rate: float,
    *,
    chunk_seconds: float = CHUNK_SECONDS,
    on_chunk: ChunkCallback | None = None,
) -> MixRampResult:
    """Analyze in-memory channel-first float audio."""

    return analyze_source(ArraySource(audio, sample_rate), chunk_seconds=chunk_seconds, on_chunk=on_chunk)
