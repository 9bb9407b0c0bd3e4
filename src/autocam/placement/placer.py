"""Materializes a cut list on a new destination timeline."""

import logging
from collections.abc import Mapping, Sequence

from autocam.models.cuts import Cut
from autocam.models.errors import PlacementError
from autocam.models.placement import CameraBinding, PlacementResult
from autocam.pipeline.progress import ProgressCallback
from autocam.placement.host import HostTimeline

logger = logging.getLogger(__name__)


class TimelinePlacer:
    """Creates the multicam sequence and inserts one trimmed segment per cut.

    Placement stops at the first failure; the result records how many cuts
    made it onto the destination before that.
    """

    def __init__(self, sequence_suffix: str = "_Multicam"):
        self.sequence_suffix = sequence_suffix

    async def place(
        self,
        host: HostTimeline,
        sequence_name: str,
        cuts: Sequence[Cut],
        bindings: Mapping[int, CameraBinding],
        progress: ProgressCallback | None = None,
        settings: dict | None = None,
    ) -> PlacementResult:
        new_sequence_name = f"{sequence_name}{self.sequence_suffix}"
        total = len(cuts)
        applied = 0
        logger.info("Placing %d cuts on new sequence %s", total, new_sequence_name)

        try:
            destination = await host.create_timeline(new_sequence_name, settings)
        except Exception as e:
            logger.error("Failed to create sequence %s: %s", new_sequence_name, e)
            return PlacementResult(
                success=False,
                cuts_applied=0,
                errors=[f"Failed to create new sequence: {e}"],
            )

        for cut in cuts:
            try:
                binding = bindings.get(cut.camera)
                if binding is None:
                    raise PlacementError(
                        f"No clip found for camera {cut.camera}",
                        details={"camera": cut.camera},
                    )
                logger.debug(
                    "Cut %d/%d: camera %d %.3fs-%.3fs",
                    applied + 1,
                    total,
                    cut.camera,
                    cut.start_time,
                    cut.end_time,
                )
                await host.insert_segment(
                    destination,
                    binding.media,
                    cut.start_time,
                    cut.end_time,
                    cut.start_time,
                )
            except Exception as e:
                logger.error("Failed to apply cut for camera %d: %s", cut.camera, e)
                return PlacementResult(
                    success=False,
                    cuts_applied=applied,
                    new_sequence_name=new_sequence_name,
                    destination=destination,
                    errors=[f"Failed to apply cut for camera {cut.camera}: {e}"],
                )

            applied += 1
            if progress:
                progress(applied / total * 100, f"Applying cuts: {applied}/{total}")

        logger.info("Placement complete: %d cuts applied", applied)
        return PlacementResult(
            success=True,
            cuts_applied=applied,
            new_sequence_name=new_sequence_name,
            destination=destination,
        )
