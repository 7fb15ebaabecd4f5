"""Python client mirroring the browser bundle: capture, downscale, analyze."""

from .analysis import AnalysisClient, AnalysisClientError
from .capture import (
    MAX_IMAGE_BYTES,
    CaptureError,
    CaptureIntent,
    CaptureSession,
    UploadedImage,
    View,
)
from .downscale import DownscaleError, downscale_image
from .rendering import strip_markdown

__all__ = [
    "AnalysisClient",
    "AnalysisClientError",
    "CaptureError",
    "CaptureIntent",
    "CaptureSession",
    "DownscaleError",
    "MAX_IMAGE_BYTES",
    "UploadedImage",
    "View",
    "downscale_image",
    "strip_markdown",
]
