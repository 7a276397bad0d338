from __future__ import annotations

from pathlib import Path
from typing import Literal

import json

from pydantic import BaseModel, Field

from mixramp.audio_contract import CHUNK_SECONDS


class MixRampConfig(BaseModel):
    chunk_seconds: float = Field(CHUNK_SECONDS, gt=0.0, le=10.0)
    backend: Literal["pedalboard", "soundfile"] = "pedalboard"
    output_format: Literal["tags", "json"] = "tags"


def load_config(path: Path) -> MixRampConfig:
    data = _load_config_data(path)
    return MixRampConfig.model_validate(data)


def _load_config_data(path: Path) -> dict:
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:
            raise ImportError("PyYAML is required to load YAML configs.") from exc

        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
