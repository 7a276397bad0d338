"""Threshold crossing extraction and ramp rendering.

The extractor watches a chronological stream of chunk loudness readings. For
every level of a fixed dB ladder it remembers the first chunk that reached
the level (fade-in onset) and the last one (fade-out tail, stored as time
remaining until the end of the track).
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from .domain.models import MixRampResult, RampPoint

THRESHOLDS_DB: tuple[float, ...] = (
    -90.0, -60.0, -40.0, -30.0, -24.0, -21.0, -18.0, -15.0, -12.0, -9.0, -6.0, -3.0, 0.0, 3.0, 6.0,
)

if any(lower >= upper for lower, upper in zip(THRESHOLDS_DB, THRESHOLDS_DB[1:])):
    raise RuntimeError("THRESHOLDS_DB must be strictly increasing.")

_LADDER = np.array(THRESHOLDS_DB, dtype=np.float64)


class ThresholdTable:
    """Per-threshold crossing state, indexed by ladder position.

    NaN marks a threshold that has not been reached yet.
    """

    __slots__ = ("start_db", "start_time", "end_db", "end_time")

    def __init__(self, size: int = len(THRESHOLDS_DB)) -> None:
        self.start_db = np.full(size, np.nan)
        self.start_time = np.full(size, np.nan)
        self.end_db = np.full(size, np.nan)
        self.end_time = np.full(size, np.nan)


class RampExtractor:
    """Collect first and most recent threshold crossings over one track."""

    def __init__(self, length: float) -> None:
        self.length = float(length)
        self.table = ThresholdTable()

    def observe(self, chunk_time: float, loudness: float) -> None:
        """Record one chunk reading. Calls must arrive in increasing time order."""

        reached = loudness >= _LADDER
        first = reached & np.isnan(self.table.start_time)
        self.table.start_db[first] = loudness
        self.table.start_time[first] = chunk_time
        self.table.end_db[reached] = loudness
        self.table.end_time[reached] = self.length - chunk_time

    def start_points(self) -> tuple[RampPoint, ...]:
        return _compress(self.table.start_db, self.table.start_time)

    def end_points(self) -> tuple[RampPoint, ...]:
        return _compress(self.table.end_db, self.table.end_time)


def _compress(dbs: np.ndarray, times: np.ndarray) -> tuple[RampPoint, ...]:
    points: list[RampPoint] = []
    for db, time in zip(dbs.tolist(), times.tolist()):
        if math.isnan(time):
            continue
        point = RampPoint(db=db, time=time)
        if points and points[-1] == point:
            continue
        points.append(point)
    return tuple(points)


def format_points(points: Iterable[RampPoint]) -> str:
    """Render points as ``"<db> <time>;"`` pairs with two decimals each."""

    return "".join(f"{point.db:.2f} {point.time:.2f};" for point in points)


def render_tags(result: MixRampResult) -> list[str]:
    """Return the ``MIXRAMP_REF``, ``MIXRAMP_START`` and ``MIXRAMP_END`` lines."""

    return [
        f"MIXRAMP_REF={result.reference_db:.2f}",
        f"MIXRAMP_START={format_points(result.start)}",
        f"MIXRAMP_END={format_points(result.end)}",
    ]
