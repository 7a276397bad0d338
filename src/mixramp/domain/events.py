"""Domain event contracts for mix ramp analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True, slots=True)
class DomainEvent:
    """Base domain event emitted by application services."""

    correlation_id: str
    payload_summary: dict[str, Any]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


@dataclass(frozen=True, slots=True)
class TrackOpened(DomainEvent):
    """An audio source was opened and its stream properties read."""


@dataclass(frozen=True, slots=True)
class RampsExtracted(DomainEvent):
    """Every complete chunk was analyzed and the ramp pair rendered."""


@dataclass(frozen=True, slots=True)
class AnalysisFailed(DomainEvent):
    """Analysis stopped on a fatal error."""
