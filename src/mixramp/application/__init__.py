"""Application layer."""

from .event_publisher import EventPublisher, NullEventPublisher
from .mixramp_service import GenerateMixRamp

__all__ = ["EventPublisher", "NullEventPublisher", "GenerateMixRamp"]
