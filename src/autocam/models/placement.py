"""Camera binding and placement result models."""

from typing import Any

from pydantic import BaseModel, Field


class CameraBinding(BaseModel):
    """Links a camera number to the host-owned media it is cut from."""

    camera: int = Field(..., ge=1)
    media: Any = Field(..., description="Opaque media handle owned by the host")


class PlacedSegment(BaseModel):
    """One trimmed segment inserted on a destination timeline."""

    media: Any
    in_point: float = Field(..., ge=0)
    out_point: float = Field(..., ge=0)
    position: float = Field(..., ge=0)


class PlacementResult(BaseModel):
    """Outcome of materializing a cut list on a destination timeline."""

    success: bool
    cuts_applied: int = Field(default=0, ge=0)
    new_sequence_name: str | None = None
    destination: Any = None
    errors: list[str] = Field(default_factory=list)
