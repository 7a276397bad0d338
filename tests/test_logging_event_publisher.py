from __future__ import annotations

import logging

from mixramp.domain.events import AnalysisFailed, RampsExtracted, TrackOpened
from mixramp.infrastructure.logging_event_publisher import LoggingEventPublisher


def test_failure_event_lifts_stage_and_code(caplog) -> None:
    event = AnalysisFailed(
        correlation_id="corr-log",
        payload_summary={"stage": "analyze", "code": "input_unreadable", "error": "Cannot decode x.wav"},
    )

    with caplog.at_level(logging.INFO, logger="mixramp.events"):
        LoggingEventPublisher().publish(event)

    (record,) = caplog.records
    assert record.levelno == logging.INFO
    assert record.getMessage() == "mixramp_analysis_failed"
    assert record.event_name == "AnalysisFailed"
    assert record.correlation_id == "corr-log"
    assert record.stage == "analyze"
    assert record.code == "input_unreadable"
    assert record.occurred_at == event.occurred_at.isoformat()


def test_track_events_carry_stream_and_chunk_fields(caplog) -> None:
    publisher = LoggingEventPublisher()

    with caplog.at_level(logging.INFO, logger="mixramp.events"):
        publisher.publish(
            TrackOpened(
                correlation_id="corr-ok",
                payload_summary={"source": "a.wav", "frames": 4_410, "sample_rate": 44_100.0, "channel_count": 2},
            )
        )
        publisher.publish(
            RampsExtracted(
                correlation_id="corr-ok",
                payload_summary={"chunk_count": 1, "start_points": 0, "end_points": 0},
            )
        )

    opened, extracted = caplog.records
    assert opened.getMessage() == "mixramp_track_opened"
    assert opened.sample_rate == 44_100.0
    assert opened.channel_count == 2
    assert not hasattr(opened, "stage")
    assert extracted.getMessage() == "mixramp_ramps_extracted"
    assert extracted.chunk_count == 1
