"""Error taxonomy for mix ramp generation.

Every error here is fatal for the track being analyzed. Callers report it and
stop; no partial ramp output is produced.
"""

from __future__ import annotations


class MixRampError(Exception):
    """Base class for all analysis failures."""

    code = "mixramp_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class InputUnreadable(MixRampError):
    """The audio source could not be opened or decoded."""

    code = "input_unreadable"


class UnsupportedChannelLayout(MixRampError):
    """The source has a channel count other than 1 or 2."""

    code = "unsupported_channel_layout"


class UnsupportedSampleRate(MixRampError):
    """The loudness filters are not defined for the source sample rate."""

    code = "unsupported_sample_rate"


class InsufficientSamples(MixRampError):
    """A chunk was too short to complete a single RMS window."""

    code = "insufficient_samples"


class AnalysisError(MixRampError):
    """The filter stage could not process the supplied samples."""

    code = "analysis_error"
