"""Per-timestamp active camera detection from camera audio levels."""

import logging
import math
from collections.abc import Awaitable, Callable, Sequence

from autocam.models.errors import AnalysisError, ValidationError
from autocam.models.options import CutOptions
from autocam.models.timeline import Reading, Timeline
from autocam.pipeline.progress import ProgressCallback

logger = logging.getLogger(__name__)

LevelsAt = Callable[[float], Awaitable[Sequence[float]]]


def determine_active_camera(levels: Sequence[float], silence_threshold: float = 0.1) -> int:
    """Return the 1-indexed camera with the highest level.

    Below the silence threshold camera 1 wins; exact ties go to the lowest index.
    """
    max_level = max(levels)
    if max_level < silence_threshold:
        return 1
    return list(levels).index(max_level) + 1


class SignalSampler:
    """Samples every camera's level at a fixed interval and labels the loudest."""

    def __init__(self, camera_count: int = 3, silence_threshold: float = 0.1):
        self.camera_count = camera_count
        self.silence_threshold = silence_threshold

    async def sample(
        self,
        duration: float,
        options: CutOptions,
        levels_at: LevelsAt,
        progress: ProgressCallback | None = None,
    ) -> Timeline:
        """Build a timeline of readings covering [0, duration)."""
        interval = options.sample_interval
        if duration < 0:
            raise ValidationError(f"Duration cannot be negative: {duration}")
        if interval <= 0:
            raise ValidationError(f"Sample interval must be positive: {interval}")

        # Rounded so that e.g. 0.9 / 0.3 does not yield a fourth sliver sample
        total_samples = math.ceil(round(duration / interval, 9))
        logger.info(
            "Sampling %d timestamps over %.3fs (interval %.3fs)",
            total_samples,
            duration,
            interval,
        )

        samples: dict[float, Reading] = {}
        for i in range(total_samples):
            timestamp = round(i * interval, 9)
            levels = self._clamp(await levels_at(timestamp), timestamp)
            samples[timestamp] = Reading(
                levels=levels,
                active_camera=determine_active_camera(levels, self.silence_threshold),
            )

            if progress:
                percent = (i + 1) / total_samples * 100
                progress(
                    percent,
                    f"Analyzing audio: {round(percent)}% ({i + 1}/{total_samples})",
                )

        logger.info("Sampling complete: %d readings", len(samples))
        return Timeline(samples=samples, duration=duration, sample_interval=interval)

    def _clamp(self, levels: Sequence[float], timestamp: float) -> tuple[float, ...]:
        if len(levels) != self.camera_count:
            raise AnalysisError(
                f"Expected {self.camera_count} levels at {timestamp}s, got {len(levels)}",
                component="sampler",
                details={"timestamp": timestamp, "levels": list(levels)},
            )
        return tuple(min(1.0, max(0.0, float(level))) for level in levels)
