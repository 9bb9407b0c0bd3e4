"""Integration tests for the sampling, cutting and placement pipeline."""

import pytest

from autocam.analysis.levels import EnvelopeLevelSource
from autocam.config import Settings
from autocam.cutting.statistics import cut_statistics
from autocam.models.errors import PlacementError
from autocam.models.options import CutOptions
from autocam.models.pipeline import PipelineStage
from autocam.pipeline.manager import PipelineManager
from autocam.placement.host import HostTimeline
from autocam.placement.memory import InMemoryHost
from tests.conftest import make_envelopes

pytestmark = pytest.mark.integration

MEDIA = {1: "wide.mov", 2: "host.mov", 3: "guest.mov"}


class TestPipeline:
    @pytest.fixture
    def manager(self):
        return PipelineManager(Settings())

    def test_in_memory_host_is_a_host_timeline(self):
        assert isinstance(InMemoryHost(MEDIA), HostTimeline)

    @pytest.mark.asyncio
    async def test_full_pipeline(self, manager):
        """Envelopes → timeline → cuts → segments on a new sequence."""
        source = EnvelopeLevelSource(make_envelopes([2, 2, 2, 1, 1, 1, 3, 3, 3]), frame_rate=10.0)
        host = InMemoryHost(MEDIA, levels=source)
        job = manager.create_job("Podcast")

        state, cuts, result = await manager.process(job.job_id, host, source.duration)

        assert state.stage == PipelineStage.COMPLETE
        assert [c.camera for c in cuts] == [2, 1, 3]
        segments = host.segments("Podcast_Multicam")
        assert [s.media for s in segments] == ["host.mov", "wide.mov", "guest.mov"]
        assert [(s.in_point, s.out_point, s.position) for s in segments] == [
            (0.0, 3.0, 0.0),
            (3.0, 6.0, 3.0),
            (6.0, 9.0, 6.0),
        ]
        stats = cut_statistics(cuts)
        assert stats.total_duration == pytest.approx(9.0)
        assert stats.camera_usage == {1: 3.0, 2: 3.0, 3: 3.0}

    @pytest.mark.asyncio
    async def test_switch_holds_for_minimum_duration(self, manager):
        """A one-second interjection still gets a full minimum-length cut."""
        source = EnvelopeLevelSource(make_envelopes([1, 1, 1, 2, 1, 1, 1]), frame_rate=10.0)
        host = InMemoryHost(MEDIA, levels=source)
        job = manager.create_job("Talk", CutOptions(min_cut_duration=3.0))

        _, cuts, _ = await manager.process(job.job_id, host, source.duration)

        assert [(c.start_time, c.end_time, c.camera) for c in cuts] == [
            (0.0, 3.0, 1),
            (3.0, 6.0, 2),
            (6.0, 7.0, 1),
        ]

    @pytest.mark.asyncio
    async def test_rerun_collides_with_existing_sequence(self, manager):
        source = EnvelopeLevelSource(make_envelopes([1, 1, 2, 2]), frame_rate=10.0)
        host = InMemoryHost(MEDIA, levels=source)
        first = manager.create_job("Talk")
        await manager.process(first.job_id, host, source.duration)

        second = manager.create_job("Talk")
        with pytest.raises(PlacementError, match="already exists"):
            await manager.process(second.job_id, host, source.duration)
        assert manager.get_job_state(second.job_id).stage == PipelineStage.FAILED
