"""Error handling middleware."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from autocam.models.errors import (
    AnalysisError,
    AutocamError,
    ErrorResponse,
    PlacementError,
    ValidationError,
)

logger = logging.getLogger(__name__)


async def autocam_error_handler(request: Request, exc: AutocamError) -> JSONResponse:
    """Handle AutocamError exceptions."""
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    response = ErrorResponse.from_exception(
        exc, guidance=_get_guidance(exc), retry=_is_retryable(exc)
    )
    return JSONResponse(status_code=_get_status_code(exc), content=response.model_dump())


def _get_status_code(exc: AutocamError) -> int:
    """Map error type to HTTP status code."""
    if isinstance(exc, ValidationError):
        return 400
    elif isinstance(exc, (AnalysisError, PlacementError)):
        return 500
    return 500


def _get_guidance(exc: AutocamError) -> str:
    """Generate actionable guidance based on error type."""
    if isinstance(exc, ValidationError):
        return "Check the camera assignments and cut settings."
    if isinstance(exc, PlacementError):
        return "Check that the destination sequence can be created, then try again."
    return "Please try again or contact support."


def _is_retryable(exc: AutocamError) -> bool:
    """Determine if the error is retryable."""
    return isinstance(exc, PlacementError)
