"""Business logic services."""

from .analysis import AnalysisService
from .static_assets import MIME_TYPES, StaticAsset, StaticAssetServer

__all__ = [
    "AnalysisService",
    "MIME_TYPES",
    "StaticAsset",
    "StaticAssetServer",
]
