"""Infrastructure domain — configuration loading."""

from archloom.infrastructure.config import ModelSettings, load_model_settings

__all__ = [
    "ModelSettings",
    "load_model_settings",
]
