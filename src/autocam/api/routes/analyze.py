"""Analysis and cut validation endpoints."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from autocam.analysis.levels import EnvelopeLevelSource
from autocam.api.dependencies import get_app_settings, get_pipeline_manager
from autocam.config import Settings
from autocam.cutting.statistics import cut_statistics, timeline_statistics
from autocam.models.errors import ValidationError
from autocam.models.options import CutOptions
from autocam.pipeline.manager import PipelineManager

router = APIRouter(prefix="/api/v1", tags=["analyze"])


class EnvelopeRequest(BaseModel):
    envelopes: list[list[float]] = Field(..., min_length=1, description="One envelope per camera")
    frame_rate: float = Field(default=10.0, gt=0, description="Envelope frames per second")
    duration: float | None = Field(
        default=None, ge=0, description="Seconds to analyze; defaults to envelope length"
    )
    options: CutOptions = Field(default_factory=CutOptions)


class ValidateRequest(BaseModel):
    cuts: list[Any] = Field(default_factory=list)


def build_level_source(request: EnvelopeRequest, settings: Settings) -> EnvelopeLevelSource:
    """Check the envelope count against the configured cameras and wrap them."""
    if len(request.envelopes) != settings.camera_count:
        raise ValidationError(
            f"Expected {settings.camera_count} camera envelopes, got {len(request.envelopes)}",
            details={"envelopes": len(request.envelopes)},
        )
    return EnvelopeLevelSource(
        request.envelopes, frame_rate=request.frame_rate, window=settings.level_window
    )


@router.post("/analyze")
async def analyze(
    request: EnvelopeRequest,
    manager: PipelineManager = Depends(get_pipeline_manager),
    settings: Settings = Depends(get_app_settings),
):
    """Sample the envelopes and return the resulting cut list without placing it."""
    source = build_level_source(request, settings)
    duration = request.duration if request.duration is not None else source.duration

    timeline = await manager.run_pipeline(duration, request.options, source.levels_at)
    raw_cuts = manager.synthesize_cuts(timeline, request.options)
    cuts = manager.optimize_cuts(raw_cuts, request.options)

    return {
        "duration": duration,
        "raw_cut_count": len(raw_cuts),
        "cuts": [cut.model_dump() for cut in cuts],
        "statistics": cut_statistics(cuts, settings.camera_count).model_dump(),
        "timeline": timeline_statistics(timeline, settings.camera_count).model_dump(),
        "validation": manager.validator.validate(cuts).model_dump(),
    }


@router.post("/validate")
async def validate(
    request: ValidateRequest,
    manager: PipelineManager = Depends(get_pipeline_manager),
):
    """Report every invariant a submitted cut list breaks."""
    return manager.validator.validate(request.cuts).model_dump()
