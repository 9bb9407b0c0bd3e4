"""In-memory host used when no editor is attached."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from autocam.analysis.levels import EnvelopeLevelSource
from autocam.models.errors import PlacementError
from autocam.models.placement import PlacedSegment

logger = logging.getLogger(__name__)


class InMemoryHost:
    """HostTimeline that records what a real editor would have been asked to do."""

    def __init__(
        self,
        media: Mapping[int, Any],
        levels: EnvelopeLevelSource | None = None,
    ):
        self.media = dict(media)
        self.levels = levels
        self.timelines: dict[str, list[PlacedSegment]] = {}
        self.timeline_settings: dict[str, dict] = {}

    async def get_levels_at(self, cameras: Sequence[int], timestamp: float) -> list[float]:
        if self.levels is None:
            raise PlacementError("No level source attached to this host")
        return [self.levels.level_at(camera, timestamp) for camera in cameras]

    async def create_timeline(self, name: str, settings: dict | None = None) -> str:
        if name in self.timelines:
            raise PlacementError(f"Timeline '{name}' already exists")
        self.timelines[name] = []
        self.timeline_settings[name] = dict(settings or {})
        logger.info("Created timeline %s", name)
        return name

    async def insert_segment(
        self,
        destination: Any,
        media: Any,
        in_point: float,
        out_point: float,
        position: float,
    ) -> None:
        if destination not in self.timelines:
            raise PlacementError(f"Destination timeline '{destination}' not found")
        self.timelines[destination].append(
            PlacedSegment(media=media, in_point=in_point, out_point=out_point, position=position)
        )

    async def resolve_camera_media(self, camera: int) -> Any:
        return self.media.get(camera)

    def segments(self, name: str) -> list[PlacedSegment]:
        return list(self.timelines.get(name, []))
