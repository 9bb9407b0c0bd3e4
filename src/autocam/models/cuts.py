"""Cut list data models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Cut(BaseModel):
    """A contiguous stretch of the output timeline shown from one camera."""

    model_config = ConfigDict(frozen=True)

    start_time: float = Field(..., ge=0, description="Cut start time in seconds")
    end_time: float = Field(..., ge=0, description="Cut end time in seconds")
    camera: int = Field(..., ge=1, description="Camera shown during this cut")

    @model_validator(mode="after")
    def validate_time_range(self) -> "Cut":
        if self.end_time < self.start_time:
            raise ValueError(
                f"end_time ({self.end_time}) must be >= start_time ({self.start_time})"
            )
        return self

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


class ValidationReport(BaseModel):
    """Every problem found in a cut list."""

    valid: bool
    errors: list[str] = Field(default_factory=list)


class CutSummary(BaseModel):
    """A cut together with its duration, used in statistics."""

    start_time: float
    end_time: float
    camera: int
    duration: float = Field(..., ge=0)


class CutStatistics(BaseModel):
    """Aggregate figures for a cut list."""

    total_cuts: int = Field(default=0, ge=0)
    total_duration: float = Field(default=0.0, ge=0)
    average_cut_duration: float = Field(default=0.0, ge=0)
    camera_usage: dict[int, float] = Field(
        default_factory=dict, description="Seconds on screen per camera"
    )
    shortest_cut: CutSummary | None = None
    longest_cut: CutSummary | None = None


class TimelineStatistics(BaseModel):
    """How often each camera was dominant across the sampled timeline."""

    duration: float = Field(..., ge=0)
    sample_interval: float = Field(..., gt=0)
    total_samples: int = Field(default=0, ge=0)
    camera_activity: dict[int, int] = Field(default_factory=dict)
    camera_percentages: dict[int, float] = Field(default_factory=dict)
