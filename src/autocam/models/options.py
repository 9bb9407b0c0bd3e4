"""Cut generation options."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from autocam.config import Settings


class CutOptions(BaseModel):
    """User-specified analysis and cutting options for one pipeline run."""

    model_config = ConfigDict(frozen=True)

    sample_interval: float = Field(
        default=1.0, gt=0, description="Seconds between level samples"
    )
    min_cut_duration: float = Field(
        default=2.0, gt=0, description="Shortest cut allowed before switching camera"
    )
    cut_frequency: Literal["low", "medium", "high"] = Field(
        default="medium", description="How eagerly cameras are switched"
    )
    transition_duration: float = Field(
        default=0.0, ge=0, description="Transition duration between cuts (not applied yet)"
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CutOptions":
        return cls(
            sample_interval=settings.sample_interval,
            min_cut_duration=settings.min_cut_duration,
            cut_frequency=settings.cut_frequency,
            transition_duration=settings.transition_duration,
        )
