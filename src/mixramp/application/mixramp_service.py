"""Application service generating mix ramps for one audio file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from uuid import uuid4

from mixramp.application.event_publisher import EventPublisher, NullEventPublisher
from mixramp.audio_source import open_audio_source
from mixramp.domain.events import AnalysisFailed, RampsExtracted, TrackOpened
from mixramp.domain.models import MixRampResult
from mixramp.driver import analyze_source
from mixramp.errors import MixRampError
from mixramp.utils.config import MixRampConfig


@dataclass(slots=True)
class GenerateMixRamp:
    """Use case that analyzes a file and returns its start and end ramps."""

    config: MixRampConfig = field(default_factory=MixRampConfig)
    event_publisher: EventPublisher = field(default_factory=NullEventPublisher)

    def run(self, path: Path, correlation_id: str | None = None) -> MixRampResult:
        run_correlation_id = correlation_id or str(uuid4())
        stage = "open"
        try:
            with open_audio_source(path, backend=self.config.backend) as source:
                self.event_publisher.publish(
                    TrackOpened(
                        correlation_id=run_correlation_id,
                        payload_summary={
                            "source": path.as_posix(),
                            "frames": source.frames,
                            "sample_rate": source.sample_rate,
                            "channel_count": source.channel_count,
                        },
                    )
                )
                stage = "analyze"
                result = analyze_source(source, chunk_seconds=self.config.chunk_seconds)
        except MixRampError as error:
            self.event_publisher.publish(
                AnalysisFailed(
                    correlation_id=run_correlation_id,
                    payload_summary={"stage": stage, "code": error.code, "error": error.message},
                )
            )
            raise

        self.event_publisher.publish(
            RampsExtracted(
                correlation_id=run_correlation_id,
                payload_summary={
                    "chunk_count": result.chunk_count,
                    "start_points": len(result.start),
                    "end_points": len(result.end),
                },
            )
        )
        return result
