"""Static asset routes for the browser bundle."""

from fastapi import APIRouter, Response
from starlette.concurrency import run_in_threadpool

from food_analysis_api.api.dependencies import StaticServerDep

router = APIRouter()


@router.get("/{path:path}", include_in_schema=False)
async def serve_static(path: str, server: StaticServerDep) -> Response:
    """Serve a file from the public directory; ``/`` maps to index.html."""
    asset = await run_in_threadpool(server.serve, path)
    return Response(
        content=asset.body,
        status_code=asset.status_code,
        media_type=asset.content_type,
    )
