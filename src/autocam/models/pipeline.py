"""Pipeline state and stage models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from autocam.models.options import CutOptions


class PipelineStage(StrEnum):
    """Stages of the processing pipeline."""

    SETUP = "setup"
    BINDING = "binding"
    SAMPLING = "sampling"
    SYNTHESIS = "synthesis"
    OPTIMIZATION = "optimization"
    VALIDATION = "validation"
    PLACEMENT = "placement"
    COMPLETE = "complete"
    FAILED = "failed"
    CANCELLED = "cancelled"


class PipelineState(BaseModel):
    """Current state of a processing job."""

    job_id: str = Field(..., min_length=1)
    stage: PipelineStage = Field(default=PipelineStage.SETUP)
    progress: float = Field(default=0.0, ge=0, le=1)
    message: str = Field(default="")
    options: CutOptions = Field(default_factory=CutOptions)
    sequence_name: str | None = None
    started_at: datetime | None = None
    updated_at: datetime | None = None
    completed_at: datetime | None = None
    error: str | None = None
    total_samples: int = Field(default=0, ge=0)
    raw_cut_count: int = Field(default=0, ge=0)
    cut_count: int = Field(default=0, ge=0)
    new_sequence_name: str | None = None
