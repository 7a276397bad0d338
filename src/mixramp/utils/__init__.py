from .config import MixRampConfig, load_config

__all__ = [
    "MixRampConfig",
    "load_config",
]
