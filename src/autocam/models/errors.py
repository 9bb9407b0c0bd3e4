"""Error hierarchy and error response models."""

from pydantic import BaseModel, Field


class AutocamError(Exception):
    """Base error for the Auto Camera pipeline and API."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class ValidationError(AutocamError):
    """Input validation errors (configuration, camera bindings)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="validation", details=details)


class AnalysisError(AutocamError):
    """Errors while sampling levels or building cuts."""

    def __init__(self, message: str, component: str = "analysis", details: dict | None = None):
        super().__init__(message, component=component, details=details)


class PlacementError(AutocamError):
    """Errors while materializing cuts on the destination timeline."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="placement", details=details)


class ErrorResponse(BaseModel):
    """JSON body the API returns when a pipeline stage raises an AutocamError."""

    error_type: str = Field(..., description="Error category")
    component: str = Field(default="", description="Component that raised the error")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict)
    actionable_guidance: str = Field(default="", description="Suggested user action")
    retry_possible: bool = Field(default=False)

    @classmethod
    def from_exception(
        cls, exc: AutocamError, guidance: str = "", retry: bool = False
    ) -> "ErrorResponse":
        return cls(
            error_type=type(exc).__name__,
            component=exc.component,
            message=exc.message,
            details=exc.details,
            actionable_guidance=guidance,
            retry_possible=retry,
        )
