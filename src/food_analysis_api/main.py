"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from food_analysis_api.api.dependencies import SettingsDep
from food_analysis_api.api.middleware import cors_middleware
from food_analysis_api.api.routes import analyze, static
from food_analysis_api.core.config import get_settings
from food_analysis_api.core.exceptions import APIError
from food_analysis_api.models.analysis import HealthResponse
from food_analysis_api.services.inference import get_inference_client

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the startup configuration and closes the inference client on shutdown.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.api_version}")
    logger.info(f"Server running at http://localhost:{settings.port}/")
    logger.info(f"Serving files from {settings.public_dir}")
    logger.info(
        f"API key configured: {'yes' if settings.is_api_key_configured else 'no'}"
    )

    yield

    logger.info("Shutting down...")
    await get_inference_client().close()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        description="AI-powered nutritional analysis of food images",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.middleware("http")(cors_middleware)

    # Exception handlers
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Render API errors as ``{"error": message}``."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message},
        )

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health_check(settings: SettingsDep) -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            service=settings.app_name,
            version=settings.api_version,
            api_key_configured=settings.is_api_key_configured,
        )

    # Include routers; the static catch-all must come last
    app.include_router(analyze.router, prefix="/api", tags=["Analysis"])
    app.include_router(static.router, tags=["Static"])

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "food_analysis_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    run()
