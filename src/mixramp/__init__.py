"""Public package exports for mixramp with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "THRESHOLDS_DB",
    "LoudnessEngine",
    "RampExtractor",
    "RampPoint",
    "MixRampResult",
    "analyze_samples",
    "analyze_source",
    "open_audio_source",
    "render_tags",
    "MixRampError",
]

__version__ = "0.1.0"

_EXPORT_MODULES: dict[str, str] = {
    "THRESHOLDS_DB": "mixramp.ramps",
    "LoudnessEngine": "mixramp.gain_analysis",
    "RampExtractor": "mixramp.ramps",
    "RampPoint": "mixramp.domain.models",
    "MixRampResult": "mixramp.domain.models",
    "analyze_samples": "mixramp.driver",
    "analyze_source": "mixramp.driver",
    "open_audio_source": "mixramp.audio_source",
    "render_tags": "mixramp.ramps",
    "MixRampError": "mixramp.errors",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'mixramp' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
