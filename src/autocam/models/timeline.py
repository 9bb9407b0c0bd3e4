"""Sampled audio level timeline models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Reading(BaseModel):
    """Per-camera levels at one sampled instant and the camera judged active."""

    model_config = ConfigDict(frozen=True)

    levels: tuple[float, ...] = Field(..., min_length=1, description="Level per camera")
    active_camera: int = Field(..., ge=1, description="Dominant camera (1-indexed)")

    @field_validator("levels")
    @classmethod
    def validate_levels(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        for level in v:
            if not 0 <= level <= 1:
                raise ValueError(f"Level must be in [0, 1], got {level}")
        return v


class Timeline(BaseModel):
    """Timestamp-indexed readings covering [0, duration)."""

    samples: dict[float, Reading] = Field(default_factory=dict)
    duration: float = Field(..., ge=0, description="Analyzed duration in seconds")
    sample_interval: float = Field(..., gt=0, description="Seconds between samples")

    @field_validator("samples")
    @classmethod
    def validate_timestamps(cls, v: dict[float, Reading]) -> dict[float, Reading]:
        for ts in v:
            if ts < 0:
                raise ValueError(f"Sample timestamp must be non-negative, got {ts}")
        return v

    def timestamps(self) -> list[float]:
        """Sample timestamps in ascending order."""
        return sorted(self.samples)

    @property
    def camera_count(self) -> int:
        if not self.samples:
            return 0
        return len(next(iter(self.samples.values())).levels)
