"""Hypothesis strategies for property-based testing."""

from hypothesis import strategies as st

from autocam.models.cuts import Cut
from tests.conftest import make_timeline


@st.composite
def generate_timeline(draw, camera_count=3, max_samples=40):
    """Generate a timeline with a random active camera per sample."""
    interval = draw(st.sampled_from([0.1, 0.2, 0.25, 0.3, 0.5, 0.7, 1.0, 2.0]))
    cameras = draw(
        st.lists(
            st.integers(min_value=1, max_value=camera_count),
            min_size=0,
            max_size=max_samples,
        )
    )
    return make_timeline(
        cameras,
        duration=round(len(cameras) * interval, 9),
        interval=interval,
        camera_count=camera_count,
    )


@st.composite
def generate_min_cut_duration(draw):
    """Generate a positive minimum cut duration."""
    return draw(st.floats(min_value=0.1, max_value=8.0, allow_nan=False, allow_infinity=False))


@st.composite
def generate_cut_list(draw, camera_count=3, max_cuts=20):
    """Generate a gapless, valid cut list starting at zero."""
    durations = draw(
        st.lists(
            st.sampled_from([0.5, 1.0, 1.5, 2.0, 3.0, 5.0]),
            min_size=0,
            max_size=max_cuts,
        )
    )
    cuts = []
    start = 0.0
    for duration in durations:
        camera = draw(st.integers(min_value=1, max_value=camera_count))
        cuts.append(Cut(start_time=start, end_time=start + duration, camera=camera))
        start += duration
    return cuts


@st.composite
def generate_levels(draw, camera_count=3):
    """Generate raw per-camera levels, possibly outside [0, 1]."""
    return draw(
        st.lists(
            st.floats(min_value=-1.0, max_value=2.0, allow_nan=False),
            min_size=camera_count,
            max_size=camera_count,
        )
    )
