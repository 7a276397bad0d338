"""Audio contract shared by the chunk driver and the audio sources.

Invariants
----------
* Sources hand the driver interleaved float PCM in ``[-1.0, 1.0]``.
* The loudness engine receives samples on a signed 16-bit scale, so the
  driver multiplies every sample by ``PCM_SCALE`` before analysis.
* Only mono and stereo layouts are analyzed.
"""

from __future__ import annotations

from .errors import UnsupportedChannelLayout

# Analysis granularity. 20 ms is the ReplayGain minimum but yields chunks
# without a complete RMS window.
CHUNK_SECONDS = 0.10

# Reported as MIXRAMP_REF; the engine output is already on this scale.
REFERENCE_LEVEL_DB = 89.0

PCM_SCALE = float(1 << 15)

SUPPORTED_CHANNEL_COUNTS: tuple[int, ...] = (1, 2)


def ensure_supported_channel_count(channel_count: int) -> None:
    """Reject layouts other than mono and stereo."""

    if channel_count not in SUPPORTED_CHANNEL_COUNTS:
        raise UnsupportedChannelLayout(f"{channel_count} channels not supported.")
