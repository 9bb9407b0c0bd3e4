"""Level lookup over precomputed per-camera loudness envelopes."""

import logging
from collections.abc import Sequence

import numpy as np

from autocam.models.errors import ValidationError

logger = logging.getLogger(__name__)


class EnvelopeLevelSource:
    """Serves camera levels from one loudness envelope per camera.

    Each envelope holds normalized levels at ``frame_rate`` frames per second.
    The level at ``t`` is the mean over ``[t, t + window)``, clamped to [0, 1].
    """

    def __init__(
        self,
        envelopes: Sequence[Sequence[float]],
        frame_rate: float,
        window: float = 0.1,
    ):
        if not envelopes:
            raise ValidationError("At least one camera envelope is required")
        if frame_rate <= 0:
            raise ValidationError(f"Frame rate must be positive: {frame_rate}")
        if window <= 0:
            raise ValidationError(f"Level window must be positive: {window}")

        self.envelopes = [np.asarray(env, dtype=np.float64) for env in envelopes]
        for i, env in enumerate(self.envelopes):
            if env.ndim != 1:
                raise ValidationError(
                    f"Envelope for camera {i + 1} must be one-dimensional",
                    details={"camera": i + 1, "shape": list(env.shape)},
                )
        self.frame_rate = frame_rate
        self.window = window

    @property
    def camera_count(self) -> int:
        return len(self.envelopes)

    @property
    def duration(self) -> float:
        """Length of the longest envelope in seconds."""
        return max(len(env) for env in self.envelopes) / self.frame_rate

    def level_at(self, camera: int, timestamp: float) -> float:
        """Mean level of one camera (1-indexed) over the window starting at timestamp."""
        env = self.envelopes[camera - 1]
        start = int(np.floor(round(timestamp * self.frame_rate, 9)))
        end = round((timestamp + self.window) * self.frame_rate, 9)
        stop = max(start + 1, int(np.ceil(end)))
        frames = env[max(0, start) : stop]
        if frames.size == 0:
            return 0.0
        return float(np.clip(frames.mean(), 0.0, 1.0))

    async def levels_at(self, timestamp: float) -> list[float]:
        return [self.level_at(camera, timestamp) for camera in range(1, self.camera_count + 1)]
