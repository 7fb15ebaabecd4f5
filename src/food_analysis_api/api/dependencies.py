"""FastAPI dependency injection factories."""

from typing import Annotated

from fastapi import Depends

from food_analysis_api.core.config import Settings, get_settings
from food_analysis_api.services.analysis import AnalysisService
from food_analysis_api.services.inference import GroqChatClient, get_inference_client
from food_analysis_api.services.static_assets import StaticAssetServer


# Type aliases for cleaner route signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
InferenceClientDep = Annotated[GroqChatClient, Depends(get_inference_client)]


def get_analysis_service(
    settings: SettingsDep,
    client: InferenceClientDep,
) -> AnalysisService:
    """
    Get AnalysisService instance.

    Args:
        settings: Injected settings
        client: Injected inference client

    Returns:
        AnalysisService bound to the current configuration
    """
    return AnalysisService(settings, client)


def get_static_server(settings: SettingsDep) -> StaticAssetServer:
    """Get a StaticAssetServer rooted at the configured public directory."""
    return StaticAssetServer(settings.public_dir)


# Type aliases for service dependencies
AnalysisServiceDep = Annotated[AnalysisService, Depends(get_analysis_service)]
StaticServerDep = Annotated[StaticAssetServer, Depends(get_static_server)]
