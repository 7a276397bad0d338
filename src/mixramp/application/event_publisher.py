"""Application-level event publishing contracts."""

from __future__ import annotations

from typing import Protocol

from mixramp.domain.events import DomainEvent


class EventPublisher(Protocol):
    """Port through which `GenerateMixRamp` reports run progress."""

    def publish(self, event: DomainEvent) -> None:
        """Publish one run event; must not raise for well-formed events."""


class NullEventPublisher:
    """Publisher for library callers that do not observe analysis runs."""

    def publish(self, event: DomainEvent) -> None:  # noqa: ARG002
        return
