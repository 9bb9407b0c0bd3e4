"""Summary statistics for cut lists and sampled timelines."""

from collections.abc import Sequence

from autocam.models.cuts import Cut, CutStatistics, CutSummary, TimelineStatistics
from autocam.models.timeline import Timeline


def _summary(cut: Cut) -> CutSummary:
    return CutSummary(
        start_time=cut.start_time,
        end_time=cut.end_time,
        camera=cut.camera,
        duration=cut.duration,
    )


def cut_statistics(cuts: Sequence[Cut], camera_count: int = 3) -> CutStatistics:
    """Total and average cut duration, time per camera and the extreme cuts."""
    camera_usage = {camera: 0.0 for camera in range(1, camera_count + 1)}
    if not cuts:
        return CutStatistics(camera_usage=camera_usage)

    total = 0.0
    shortest = longest = cuts[0]
    for cut in cuts:
        total += cut.duration
        camera_usage[cut.camera] = camera_usage.get(cut.camera, 0.0) + cut.duration
        if cut.duration < shortest.duration:
            shortest = cut
        if cut.duration > longest.duration:
            longest = cut

    return CutStatistics(
        total_cuts=len(cuts),
        total_duration=total,
        average_cut_duration=total / len(cuts),
        camera_usage=camera_usage,
        shortest_cut=_summary(shortest),
        longest_cut=_summary(longest),
    )


def timeline_statistics(
    timeline: Timeline, camera_count: int | None = None
) -> TimelineStatistics:
    """Count how many samples each camera was dominant for.

    The camera count defaults to the number of levels in each reading.
    """
    if camera_count is None:
        camera_count = timeline.camera_count
    activity = {camera: 0 for camera in range(1, camera_count + 1)}
    for reading in timeline.samples.values():
        activity[reading.active_camera] = activity.get(reading.active_camera, 0) + 1

    total = len(timeline.samples)
    percentages = {
        camera: round(count / total * 100, 1) if total else 0.0
        for camera, count in activity.items()
    }
    return TimelineStatistics(
        duration=timeline.duration,
        sample_interval=timeline.sample_interval,
        total_samples=total,
        camera_activity=activity,
        camera_percentages=percentages,
    )
