"""Pipeline manager: runs each job from level sampling to cut placement."""

import logging
import uuid
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from functools import partial

from autocam.analysis.sampler import LevelsAt, SignalSampler
from autocam.config import Settings, get_settings
from autocam.cutting.optimizer import CutOptimizer, frequency_to_threshold
from autocam.cutting.synthesizer import CutSynthesizer
from autocam.cutting.validator import CutValidator
from autocam.models.cuts import Cut
from autocam.models.errors import AnalysisError, AutocamError, PlacementError, ValidationError
from autocam.models.options import CutOptions
from autocam.models.pipeline import PipelineStage, PipelineState
from autocam.models.placement import CameraBinding, PlacementResult
from autocam.models.timeline import Timeline
from autocam.pipeline.progress import ProgressCallback, StageProgress
from autocam.placement.host import HostTimeline
from autocam.placement.placer import TimelinePlacer

logger = logging.getLogger(__name__)

FINISHED_STAGES = frozenset(
    {PipelineStage.COMPLETE, PipelineStage.FAILED, PipelineStage.CANCELLED}
)


class PipelineManager:
    """Manages the end-to-end sampling, cutting and placement pipeline."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.sampler = SignalSampler(
            camera_count=self.settings.camera_count,
            silence_threshold=self.settings.silence_threshold,
        )
        self.synthesizer = CutSynthesizer()
        self.optimizer = CutOptimizer()
        self.validator = CutValidator(camera_count=self.settings.camera_count)
        self.placer = TimelinePlacer(sequence_suffix=self.settings.sequence_suffix)
        self._jobs: dict[str, PipelineState] = {}
        self._cancelled: set[str] = set()

    @property
    def cameras(self) -> list[int]:
        return list(range(1, self.settings.camera_count + 1))

    def default_options(self) -> CutOptions:
        return CutOptions.from_settings(self.settings)

    # Stage operations

    async def run_pipeline(
        self,
        duration: float,
        options: CutOptions,
        levels_at: LevelsAt,
        progress: ProgressCallback | None = None,
    ) -> Timeline:
        """Sample camera levels over the whole duration."""
        return await self.sampler.sample(duration, options, levels_at, progress)

    def synthesize_cuts(self, timeline: Timeline, options: CutOptions) -> list[Cut]:
        """Build raw minimum-duration cuts from a sampled timeline."""
        return self.synthesizer.synthesize(timeline, options.min_cut_duration)

    def optimize_cuts(self, cuts: Sequence[Cut], options: CutOptions) -> list[Cut]:
        """Merge isolated short cuts.

        The frequency threshold is reported but merging is governed by
        ``min_cut_duration`` alone.
        """
        threshold = frequency_to_threshold(options.cut_frequency)
        logger.info(
            "Optimizing %d cuts (frequency %s, threshold %s, min duration %.3fs)",
            len(cuts),
            options.cut_frequency,
            threshold,
            options.min_cut_duration,
        )
        return self.optimizer.optimize(cuts, options.min_cut_duration)

    async def place_cuts(
        self,
        host: HostTimeline,
        sequence_name: str,
        cuts: Sequence[Cut],
        bindings: Mapping[int, CameraBinding],
        progress: ProgressCallback | None = None,
    ) -> PlacementResult:
        """Create the multicam sequence and apply every cut to it."""
        return await self.placer.place(host, sequence_name, cuts, bindings, progress)

    async def resolve_bindings(self, host: HostTimeline) -> dict[int, CameraBinding]:
        """Resolve media for every configured camera; all must be present."""
        bindings: dict[int, CameraBinding] = {}
        missing = []
        for camera in self.cameras:
            media = await host.resolve_camera_media(camera)
            if media is None:
                missing.append(camera)
            else:
                bindings[camera] = CameraBinding(camera=camera, media=media)
        if missing:
            raise ValidationError(
                f"Assign all {len(self.cameras)} cameras before analyzing; "
                f"missing: {', '.join(str(c) for c in missing)}",
                details={"missing_cameras": missing},
            )
        return bindings

    # Jobs

    def create_job(self, sequence_name: str, options: CutOptions | None = None) -> PipelineState:
        """Create a new processing job."""
        state = PipelineState(
            job_id=str(uuid.uuid4()),
            stage=PipelineStage.SETUP,
            options=options or self.default_options(),
            sequence_name=sequence_name,
            started_at=datetime.now(UTC),
            updated_at=datetime.now(UTC),
        )
        self._jobs[state.job_id] = state
        return state

    def get_job_state(self, job_id: str) -> PipelineState | None:
        """Get current state of a job."""
        return self._jobs.get(job_id)

    def cancel_job(self, job_id: str) -> bool:
        """Cancel a job; a running job stops at its next timestamp or cut.

        Finished jobs keep their final stage and are not cancelled.
        """
        state = self._jobs.get(job_id)
        if state is not None and state.stage not in FINISHED_STAGES:
            self._cancelled.add(job_id)
            self._update_state(job_id, PipelineStage.CANCELLED, message="Job cancelled")
            return True
        return False

    def delete_job(self, job_id: str) -> bool:
        """Forget a job and its state."""
        self._cancelled.discard(job_id)
        return self._jobs.pop(job_id, None) is not None

    async def process(
        self,
        job_id: str,
        host: HostTimeline,
        duration: float,
        levels_at: LevelsAt | None = None,
    ) -> tuple[PipelineState, list[Cut], PlacementResult]:
        """Run the full pipeline for a job.

        Strict ordering: bind → sample → synthesize → optimize → validate → place
        """
        if job_id not in self._jobs:
            raise ValidationError(f"Job {job_id} not found")

        state = self._jobs[job_id]
        options = state.options
        if levels_at is None:
            levels_at = partial(host.get_levels_at, self.cameras)

        try:
            # Stage 1: Camera bindings
            self._check_cancelled(job_id)
            self._update_state(job_id, PipelineStage.BINDING, 0.0, "Resolving camera media...")
            bindings = await self.resolve_bindings(host)

            # Stage 2: Sampling
            self._check_cancelled(job_id)
            self._update_state(job_id, PipelineStage.SAMPLING, 0.05, "Analyzing audio levels...")
            timeline = await self.run_pipeline(
                duration,
                options,
                levels_at,
                self._stage_progress(job_id, PipelineStage.SAMPLING, 0.05, 0.6, "Step 1/3: "),
            )
            state.total_samples = len(timeline.samples)

            # Stage 3: Synthesis
            self._check_cancelled(job_id)
            self._update_state(
                job_id, PipelineStage.SYNTHESIS, 0.65, "Step 2/3: Generating camera switches..."
            )
            raw_cuts = self.synthesize_cuts(timeline, options)
            state.raw_cut_count = len(raw_cuts)

            # Stage 4: Optimization
            self._check_cancelled(job_id)
            self._update_state(job_id, PipelineStage.OPTIMIZATION, 0.7, "Optimizing cuts...")
            cuts = self.optimize_cuts(raw_cuts, options)
            state.cut_count = len(cuts)

            # Stage 5: Validation
            self._update_state(job_id, PipelineStage.VALIDATION, 0.72, "Validating cuts...")
            report = self.validator.validate(cuts)
            if not report.valid:
                raise AnalysisError(
                    "Generated cuts failed validation",
                    component="validator",
                    details={"errors": report.errors},
                )

            # Stage 6: Placement
            self._check_cancelled(job_id)
            self._update_state(
                job_id, PipelineStage.PLACEMENT, 0.75, "Creating multicam sequence..."
            )
            result = await self.place_cuts(
                host,
                state.sequence_name or "Sequence",
                cuts,
                bindings,
                self._stage_progress(job_id, PipelineStage.PLACEMENT, 0.75, 0.25, "Step 3/3: "),
            )
            if not result.success:
                raise PlacementError(
                    ", ".join(result.errors) or "Timeline editing failed",
                    details={"cuts_applied": result.cuts_applied},
                )

            # Complete
            state.new_sequence_name = result.new_sequence_name
            self._update_state(
                job_id,
                PipelineStage.COMPLETE,
                1.0,
                f'Created "{result.new_sequence_name}" with {result.cuts_applied} cuts',
            )
            state.completed_at = datetime.now(UTC)
            return state, cuts, result

        except AutocamError as e:
            if state.stage != PipelineStage.CANCELLED:
                self._update_state(job_id, PipelineStage.FAILED, message=e.message)
            raise
        except Exception as e:
            logger.exception("Job %s failed", job_id)
            if state.stage != PipelineStage.CANCELLED:
                self._update_state(job_id, PipelineStage.FAILED, message=str(e))
            raise AnalysisError(f"Pipeline failed: {e}", component="pipeline")

    def _stage_progress(
        self, job_id: str, stage: PipelineStage, start: float, span: float, prefix: str
    ) -> StageProgress:
        def on_progress(fraction: float, message: str) -> None:
            self._check_cancelled(job_id)
            self._update_state(job_id, stage, fraction, message)

        return StageProgress(start, span, on_progress, prefix=prefix)

    def _update_state(
        self, job_id: str, stage: PipelineStage, progress: float | None = None, message: str = ""
    ):
        """Update pipeline state."""
        if job_id in self._jobs:
            state = self._jobs[job_id]
            state.stage = stage
            if progress is not None:
                state.progress = min(1.0, max(0.0, progress))
            state.message = message
            state.updated_at = datetime.now(UTC)
            if stage == PipelineStage.FAILED:
                state.error = message

    def _check_cancelled(self, job_id: str):
        """Check if job has been cancelled and raise if so."""
        if job_id in self._cancelled:
            raise AnalysisError("Job was cancelled", component="pipeline")
