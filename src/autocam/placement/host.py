"""Capabilities the pipeline needs from the host video editor."""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostTimeline(Protocol):
    """Everything the core asks of the editor hosting the multicam recording.

    Implementations hide however the host exposes tracks, clips and sequences;
    the core never probes host objects directly.
    """

    async def get_levels_at(self, cameras: Sequence[int], timestamp: float) -> Sequence[float]:
        """Normalized level of each camera at ``timestamp``, in camera order."""
        ...

    async def create_timeline(self, name: str, settings: dict | None = None) -> Any:
        """Create an empty destination timeline and return its handle."""
        ...

    async def insert_segment(
        self,
        destination: Any,
        media: Any,
        in_point: float,
        out_point: float,
        position: float,
    ) -> None:
        """Place ``media[in_point:out_point]`` at ``position`` on ``destination``."""
        ...

    async def resolve_camera_media(self, camera: int) -> Any:
        """Media handle for a camera, or ``None`` when the camera has none."""
        ...
