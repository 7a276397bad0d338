"""Domain models for mix ramp analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RampPoint:
    """One (loudness, time) breakpoint of a fade-in or fade-out ramp."""

    db: float
    time: float


@dataclass(frozen=True, slots=True)
class TrackInfo:
    """Stream properties of the analyzed track.

    ``length_seconds`` is the decoded duration plus one chunk, so end ramp
    times count from the start of the last chunk that reached a threshold.
    """

    frames: int
    sample_rate: float
    channel_count: int
    length_seconds: float


@dataclass(frozen=True, slots=True)
class MixRampResult:
    """Complete ramp pair for one track."""

    track: TrackInfo
    start: tuple[RampPoint, ...]
    end: tuple[RampPoint, ...]
    chunk_count: int
    reference_db: float

    def as_dict(self) -> dict[str, Any]:
        return {
            "reference_db": self.reference_db,
            "start": [[point.db, point.time] for point in self.start],
            "end": [[point.db, point.time] for point in self.end],
            "chunk_count": self.chunk_count,
            "track": {
                "frames": self.track.frames,
                "sample_rate": self.track.sample_rate,
                "channel_count": self.track.channel_count,
                "length_seconds": self.track.length_seconds,
            },
        }
