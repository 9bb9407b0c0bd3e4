"""Cut list post-optimization."""

import logging
from collections.abc import Sequence

from autocam.models.cuts import Cut

logger = logging.getLogger(__name__)

FREQUENCY_THRESHOLDS = {
    "high": 0.6,
    "medium": 0.7,
    "low": 0.8,
}


def frequency_to_threshold(frequency: str) -> float:
    """Map a cut frequency setting to its threshold; unknown settings map to medium."""
    threshold = FREQUENCY_THRESHOLDS.get(frequency, FREQUENCY_THRESHOLDS["medium"])
    logger.debug("Frequency '%s' -> threshold %s", frequency, threshold)
    return threshold


class CutOptimizer:
    """Merges short cuts that interrupt a single camera.

    A cut shorter than ``min_cut_duration`` whose neighbours show the same
    camera is folded, together with both neighbours, into one cut. The scan is
    a single pass: a merged cut is not reconsidered, so long alternating chains
    may only partially collapse per call.
    """

    def optimize(self, cuts: Sequence[Cut], min_cut_duration: float) -> list[Cut]:
        optimized: list[Cut] = []
        i = 0

        while i < len(cuts):
            current = cuts[i]
            if i + 2 < len(cuts):
                middle, after = cuts[i + 1], cuts[i + 2]
                short = round(middle.duration, 9) < min_cut_duration
                if short and current.camera == after.camera:
                    logger.debug(
                        "Merging cuts at %.3fs and %.3fs (dropping %.3fs of camera %d)",
                        current.start_time,
                        after.start_time,
                        middle.duration,
                        middle.camera,
                    )
                    optimized.append(
                        Cut(
                            start_time=current.start_time,
                            end_time=after.end_time,
                            camera=current.camera,
                        )
                    )
                    i += 3
                    continue

            optimized.append(current)
            i += 1

        logger.info("Optimized %d cuts down to %d", len(cuts), len(optimized))
        return optimized
