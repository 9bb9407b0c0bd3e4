"""Tests for TimelinePlacer."""

import pytest

from autocam.models.placement import CameraBinding, PlacementResult
from autocam.placement.memory import InMemoryHost
from autocam.placement.placer import TimelinePlacer
from tests.conftest import RecordingHost, make_cuts


class TestTimelinePlacer:
    @pytest.fixture
    def placer(self):
        return TimelinePlacer()

    @pytest.mark.asyncio
    async def test_success_result(self, placer, host, sample_cuts, bindings):
        result = await placer.place(host, "My Video", sample_cuts, bindings)
        assert isinstance(result, PlacementResult)
        assert result.success
        assert result.new_sequence_name == "My Video_Multicam"
        assert result.cuts_applied == 3
        assert result.errors == []
        assert result.destination == "handle:My Video_Multicam"

    @pytest.mark.asyncio
    async def test_creates_destination_once_before_cuts(self, placer, host, sample_cuts, bindings):
        await placer.place(host, "Interview", sample_cuts, bindings, settings={"fps": 25})
        assert host.created == [("Interview_Multicam", {"fps": 25})]

    @pytest.mark.asyncio
    async def test_inserts_trimmed_segments_in_order(self, placer, host, sample_cuts, bindings):
        await placer.place(host, "Interview", sample_cuts, bindings)
        assert host.inserted == [
            ("handle:Interview_Multicam", "clip-1", 0, 2, 0),
            ("handle:Interview_Multicam", "clip-2", 2, 4, 2),
            ("handle:Interview_Multicam", "clip-3", 4, 6, 4),
        ]

    @pytest.mark.asyncio
    async def test_reports_progress(self, placer, host, sample_cuts, bindings):
        updates = []
        await placer.place(
            host, "Interview", sample_cuts, bindings, lambda pct, msg: updates.append((pct, msg))
        )
        assert [msg for _, msg in updates] == [
            "Applying cuts: 1/3",
            "Applying cuts: 2/3",
            "Applying cuts: 3/3",
        ]
        assert updates[-1][0] == 100

    @pytest.mark.asyncio
    async def test_missing_binding_aborts(self, placer, host, sample_cuts, bindings):
        del bindings[2]
        result = await placer.place(host, "Interview", sample_cuts, bindings)
        assert not result.success
        assert result.cuts_applied == 1
        assert len(result.errors) == 1
        assert "No clip found for camera 2" in result.errors[0]
        assert len(host.inserted) == 1

    @pytest.mark.asyncio
    async def test_insert_failure_stops_remaining_cuts(self, placer, sample_cuts, bindings):
        host = RecordingHost(fail_on_insert=1)
        result = await placer.place(host, "Interview", sample_cuts, bindings)
        assert not result.success
        assert result.cuts_applied == 1
        assert result.errors == ["Failed to apply cut for camera 2: Track is locked"]

    @pytest.mark.asyncio
    async def test_create_failure(self, placer, sample_cuts, bindings):
        host = RecordingHost(fail_create=True)
        result = await placer.place(host, "Interview", sample_cuts, bindings)
        assert not result.success
        assert result.cuts_applied == 0
        assert result.new_sequence_name is None
        assert "Project is read-only" in result.errors[0]
        assert host.inserted == []

    @pytest.mark.asyncio
    async def test_empty_cuts(self, placer, host, bindings):
        result = await placer.place(host, "Interview", [], bindings)
        assert result.success
        assert result.cuts_applied == 0
        assert len(host.created) == 1

    @pytest.mark.asyncio
    async def test_custom_suffix(self, host, sample_cuts, bindings):
        result = await TimelinePlacer(sequence_suffix="_Auto").place(
            host, "Panel", sample_cuts, bindings
        )
        assert result.new_sequence_name == "Panel_Auto"

    @pytest.mark.asyncio
    async def test_in_memory_host_records_segments(self, placer):
        host = InMemoryHost({1: "a.mov", 2: "b.mov"})
        bindings = {c: CameraBinding(camera=c, media=m) for c, m in host.media.items()}
        cuts = make_cuts((0, 2.5, 2), (2.5, 4, 1))
        result = await placer.place(host, "Talk", cuts, bindings)
        assert result.success
        segments = host.segments("Talk_Multicam")
        assert [(s.media, s.in_point, s.out_point, s.position) for s in segments] == [
            ("b.mov", 0, 2.5, 0),
            ("a.mov", 2.5, 4, 2.5),
        ]

    @pytest.mark.asyncio
    async def test_in_memory_host_rejects_duplicate_timeline(self, placer, sample_cuts):
        host = InMemoryHost({1: "a.mov", 2: "b.mov", 3: "c.mov"})
        bindings = {c: CameraBinding(camera=c, media=m) for c, m in host.media.items()}
        await placer.place(host, "Talk", sample_cuts, bindings)
        second = await placer.place(host, "Talk", sample_cuts, bindings)
        assert not second.success
        assert "already exists" in second.errors[0]

    @pytest.mark.asyncio
    async def test_settings_passed_to_destination(self, placer, sample_cuts):
        host = InMemoryHost({1: "a.mov", 2: "b.mov", 3: "c.mov"})
        bindings = {c: CameraBinding(camera=c, media=m) for c, m in host.media.items()}
        await placer.place(host, "Talk", sample_cuts, bindings, settings={"frame_rate": 25})
        await placer.place(host, "Panel", sample_cuts, bindings)
        assert host.timeline_settings == {
            "Talk_Multicam": {"frame_rate": 25},
            "Panel_Multicam": {},
        }
