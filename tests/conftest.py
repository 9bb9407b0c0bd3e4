"""Shared test fixtures and timeline builders."""

from typing import Any

import numpy as np
import pytest

from autocam.models.cuts import Cut
from autocam.models.errors import PlacementError
from autocam.models.placement import CameraBinding
from autocam.models.timeline import Reading, Timeline


def make_timeline(
    active_cameras: list[int], duration: float, interval: float = 1.0, camera_count: int = 3
) -> Timeline:
    """Build a timeline whose samples are dominated by the given cameras."""
    samples = {}
    for i, camera in enumerate(active_cameras):
        levels = tuple(0.8 if c == camera else 0.2 for c in range(1, camera_count + 1))
        samples[round(i * interval, 9)] = Reading(levels=levels, active_camera=camera)
    return Timeline(samples=samples, duration=duration, sample_interval=interval)


def make_cuts(*spans: tuple[float, float, int]) -> list[Cut]:
    return [Cut(start_time=s, end_time=e, camera=c) for s, e, c in spans]


class RecordingHost:
    """HostTimeline double that records calls and can fail on demand."""

    def __init__(
        self,
        media: dict[int, Any] | None = None,
        levels: dict[float, list[float]] | None = None,
        fail_create: bool = False,
        fail_on_insert: int | None = None,
    ):
        self.media = media if media is not None else {c: f"clip-{c}" for c in (1, 2, 3)}
        self.levels = levels or {}
        self.fail_create = fail_create
        self.fail_on_insert = fail_on_insert
        self.created: list[tuple[str, dict | None]] = []
        self.inserted: list[tuple[Any, Any, float, float, float]] = []

    async def get_levels_at(self, cameras, timestamp):
        return self.levels.get(timestamp, [0.0] * len(cameras))

    async def create_timeline(self, name, settings=None):
        if self.fail_create:
            raise PlacementError("Project is read-only")
        self.created.append((name, settings))
        return f"handle:{name}"

    async def insert_segment(self, destination, media, in_point, out_point, position):
        if self.fail_on_insert is not None and len(self.inserted) == self.fail_on_insert:
            raise RuntimeError("Track is locked")
        self.inserted.append((destination, media, in_point, out_point, position))

    async def resolve_camera_media(self, camera):
        return self.media.get(camera)


@pytest.fixture
def three_camera_timeline():
    """Two seconds per camera, cameras 1 → 2 → 3."""
    return make_timeline([1, 1, 2, 2, 3, 3], duration=6.0)


@pytest.fixture
def sample_cuts():
    return make_cuts((0, 2, 1), (2, 4, 2), (4, 6, 3))


@pytest.fixture
def bindings():
    return {c: CameraBinding(camera=c, media=f"clip-{c}") for c in (1, 2, 3)}


@pytest.fixture
def host():
    return RecordingHost()


def make_envelopes(
    active_cameras: list[int], frame_rate: float = 10.0, camera_count: int = 3, seed: int = 0
) -> list[list[float]]:
    """One envelope per camera where the given camera is loud for each second.

    Low-amplitude noise is added so levels are not perfectly flat.
    """
    rng = np.random.default_rng(seed)
    frames_per_second = int(frame_rate)
    envelopes = np.full((camera_count, len(active_cameras) * frames_per_second), 0.15)
    for second, camera in enumerate(active_cameras):
        frames = slice(second * frames_per_second, (second + 1) * frames_per_second)
        envelopes[camera - 1, frames] = 0.8
    envelopes += rng.uniform(-0.05, 0.05, size=envelopes.shape)
    return np.clip(envelopes, 0.0, 1.0).round(4).tolist()
