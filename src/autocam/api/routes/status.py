"""Job status endpoint."""

from fastapi import APIRouter, Depends

from autocam.api.dependencies import get_pipeline_manager
from autocam.models.errors import ValidationError
from autocam.pipeline.manager import PipelineManager

router = APIRouter(prefix="/api/v1", tags=["status"])


@router.get("/status/{job_id}")
async def get_status(
    job_id: str,
    manager: PipelineManager = Depends(get_pipeline_manager),
):
    """Current stage, progress and cut counts of a job."""
    state = manager.get_job_state(job_id)
    if state is None:
        raise ValidationError(f"Job {job_id} not found", details={"job_id": job_id})
    return state.model_dump(mode="json")
