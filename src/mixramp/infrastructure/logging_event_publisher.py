"""Logging-backed event publisher for mix ramp runs."""

from __future__ import annotations

import logging

from mixramp.domain.events import DomainEvent

LOGGER = logging.getLogger("mixramp.events")

# Payload keys lifted to top-level record attributes when an event carries them.
_RECORD_FIELDS = ("stage", "code", "sample_rate", "channel_count", "chunk_count")


class LoggingEventPublisher:
    """Log each analysis event at INFO on ``mixramp.events``.

    Failures stay at INFO too: the CLI already reports them on stderr.
    """

    def publish(self, event: DomainEvent) -> None:
        event_name = type(event).__name__
        extra = {
            "event_name": event_name,
            "correlation_id": event.correlation_id,
            "payload_summary": event.payload_summary,
            "occurred_at": event.occurred_at.isoformat(),
        }
        for key in _RECORD_FIELDS:
            if key in event.payload_summary:
                extra[key] = event.payload_summary[key]

        LOGGER.info("mixramp_%s", _snake_case(event_name), extra=extra)


def _snake_case(name: str) -> str:
    return "".join(f"_{char.lower()}" if char.isupper() else char for char in name).lstrip("_")
