"""Detection settings for the API layer."""

from functools import lru_cache

from kasboek.domain.recurring.value_objects import DetectionConfig
from kasboek_config import get_settings


@lru_cache
def get_detection_config() -> DetectionConfig:
    """Detection thresholds from the RECURRING_ settings, built once."""
    return get_settings().detection_config()
