"""Processing endpoints."""

from fastapi import APIRouter, Depends
from pydantic import Field

from autocam.api.dependencies import get_app_settings, get_pipeline_manager
from autocam.api.routes.analyze import EnvelopeRequest, build_level_source
from autocam.config import Settings
from autocam.models.errors import ValidationError
from autocam.pipeline.manager import PipelineManager
from autocam.placement.memory import InMemoryHost

router = APIRouter(prefix="/api/v1", tags=["process"])


class ProcessRequest(EnvelopeRequest):
    sequence_name: str = Field(..., min_length=1)
    media: dict[int, str] | None = Field(
        default=None, description="Media name per camera; defaults to '<sequence> Camera N'"
    )


@router.post("/process")
async def start_processing(
    request: ProcessRequest,
    manager: PipelineManager = Depends(get_pipeline_manager),
    settings: Settings = Depends(get_app_settings),
):
    """Run the whole pipeline and place the cuts on an in-memory sequence."""
    source = build_level_source(request, settings)
    duration = request.duration if request.duration is not None else source.duration
    media = request.media
    if media is None:
        media = {
            camera: f"{request.sequence_name} Camera {camera}"
            for camera in range(1, settings.camera_count + 1)
        }
    host = InMemoryHost(media, levels=source)

    job = manager.create_job(request.sequence_name, request.options)
    state, cuts, result = await manager.process(job.job_id, host, duration)

    return {
        "job_id": state.job_id,
        "status": state.stage.value,
        "new_sequence_name": result.new_sequence_name,
        "cuts_applied": result.cuts_applied,
        "cuts": [cut.model_dump() for cut in cuts],
        "segments": [
            segment.model_dump() for segment in host.segments(result.new_sequence_name)
        ],
    }


@router.delete("/process/{job_id}")
async def cancel_processing(
    job_id: str,
    manager: PipelineManager = Depends(get_pipeline_manager),
):
    """Cancel a processing job."""
    state = manager.get_job_state(job_id)
    if state is None:
        raise ValidationError(f"Job {job_id} not found")
    if not manager.cancel_job(job_id):
        raise ValidationError(
            f"Job {job_id} already finished", details={"stage": state.stage.value}
        )
    return {"job_id": job_id, "status": "cancelled"}
