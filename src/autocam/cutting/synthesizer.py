"""Turns per-sample active camera labels into a gapless cut list."""

import logging

from autocam.models.cuts import Cut
from autocam.models.timeline import Timeline

logger = logging.getLogger(__name__)


class CutSynthesizer:
    """Builds cuts that respect a minimum duration from a sampled timeline.

    A camera change is only honoured once the current cut has lasted
    ``min_cut_duration``; shorter changes are absorbed into the current cut.
    The final cut always ends at ``timeline.duration`` and may be shorter than
    the minimum.
    """

    def synthesize(self, timeline: Timeline, min_cut_duration: float) -> list[Cut]:
        timestamps = timeline.timestamps()
        logger.info("Synthesizing cuts from %d timestamps", len(timestamps))

        cuts: list[Cut] = []
        start: float | None = None
        camera = 0

        for timestamp in timestamps:
            active = timeline.samples[timestamp].active_camera

            if start is None:
                start, camera = timestamp, active
            elif active != camera:
                # Timestamps sit on a 9-decimal grid; compare elapsed time on the same grid
                if round(timestamp - start, 9) >= min_cut_duration:
                    cuts.append(Cut(start_time=start, end_time=timestamp, camera=camera))
                    start, camera = timestamp, active
                else:
                    logger.debug(
                        "Ignoring camera %d at %.3fs: current cut only %.3fs long",
                        active,
                        timestamp,
                        timestamp - start,
                    )

        if start is not None:
            cuts.append(Cut(start_time=start, end_time=timeline.duration, camera=camera))

        logger.info("Generated %d raw cuts", len(cuts))
        return cuts
