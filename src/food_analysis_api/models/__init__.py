"""Pydantic models for API schemas."""

from .analysis import AnalysisRequest, AnalysisResponse, ErrorResponse, HealthResponse

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "ErrorResponse",
    "HealthResponse",
]
