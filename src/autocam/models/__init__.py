"""Data models for Auto Camera."""

from autocam.models.cuts import (
    Cut,
    CutStatistics,
    CutSummary,
    TimelineStatistics,
    ValidationReport,
)
from autocam.models.errors import (
    AnalysisError,
    AutocamError,
    ErrorResponse,
    PlacementError,
    ValidationError,
)
from autocam.models.options import CutOptions
from autocam.models.pipeline import PipelineStage, PipelineState
from autocam.models.placement import CameraBinding, PlacedSegment, PlacementResult
from autocam.models.timeline import Reading, Timeline

__all__ = [
    "AnalysisError",
    "AutocamError",
    "CameraBinding",
    "Cut",
    "CutOptions",
    "CutStatistics",
    "CutSummary",
    "ErrorResponse",
    "PipelineStage",
    "PipelineState",
    "PlacedSegment",
    "PlacementError",
    "PlacementResult",
    "Reading",
    "Timeline",
    "TimelineStatistics",
    "ValidationError",
    "ValidationReport",
]
