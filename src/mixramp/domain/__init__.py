"""Domain layer."""

from .events import AnalysisFailed, DomainEvent, RampsExtracted, TrackOpened
from .models import MixRampResult, RampPoint, TrackInfo

__all__ = [
    "DomainEvent",
    "TrackOpened",
    "RampsExtracted",
    "AnalysisFailed",
    "MixRampResult",
    "RampPoint",
    "TrackInfo",
]
