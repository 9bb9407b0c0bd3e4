"""Application configuration using Pydantic BaseSettings."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Auto Camera configuration loaded from environment variables."""

    model_config = {"env_prefix": "AUTOCAM_", "env_file": ".env", "extra": "ignore"}

    # Cameras
    camera_count: int = 3
    silence_threshold: float = 0.1
    level_window: float = 0.1

    # Default cut options
    sample_interval: float = 1.0
    min_cut_duration: float = 2.0
    cut_frequency: Literal["low", "medium", "high"] = "medium"
    transition_duration: float = 0.0

    # Destination timeline
    sequence_suffix: str = "_Multicam"

    # Logging
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Return settings instance."""
    return Settings()
