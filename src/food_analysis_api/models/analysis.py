"""Request and response models for the analysis endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """Request body for ``POST /api/analyze``."""

    model_config = ConfigDict(extra="ignore")

    imageBase64: str | None = Field(
        default=None,
        description="Base64-encoded image without the data-URL prefix",
    )


class AnalysisResponse(BaseModel):
    """Successful analysis."""

    success: bool = Field(True, description="Always true on success")
    result: str = Field(..., description="Free-form analysis text from the model")


class ErrorResponse(BaseModel):
    """Error body returned for every failure."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response from health check endpoint."""

    status: str = Field(description="Service status")
    service: str = Field(description="Service name")
    version: str = Field(description="API version")
    api_key_configured: bool = Field(
        description="Whether the inference credential is present"
    )
