"""Food image analysis API routes."""

import json
import logging

from fastapi import APIRouter, Request

from food_analysis_api.api.dependencies import AnalysisServiceDep
from food_analysis_api.core.exceptions import (
    APIError,
    InternalServerError,
    MethodNotAllowedError,
    PayloadTooLargeError,
)
from food_analysis_api.models.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    ErrorResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Image data missing"},
    413: {"model": ErrorResponse, "description": "Request body too large"},
    500: {"model": ErrorResponse, "description": "Server or inference failure"},
}


async def read_analysis_request(request: Request, max_bytes: int) -> AnalysisRequest:
    """
    Read and parse the JSON body.

    Raises:
        PayloadTooLargeError: If the body exceeds ``max_bytes``
        ValueError: If the body is not valid JSON
    """
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_bytes:
        logger.warning(f"Rejected body of {content_length} bytes (limit {max_bytes})")
        raise PayloadTooLargeError()

    received = 0
    chunks: list[bytes] = []
    async for chunk in request.stream():
        received += len(chunk)
        if received > max_bytes:
            logger.warning(f"Rejected streamed body over {max_bytes} bytes")
            raise PayloadTooLargeError()
        chunks.append(chunk)

    data = json.loads(b"".join(chunks))
    if not isinstance(data, dict):
        # Not an object: nothing to read imageBase64 from.
        return AnalysisRequest()

    image_base64 = data.get("imageBase64")
    return AnalysisRequest(
        imageBase64=image_base64 if isinstance(image_base64, str) else None
    )


@router.post("/analyze", response_model=AnalysisResponse, responses=ERROR_RESPONSES)
async def analyze_image(request: Request, service: AnalysisServiceDep) -> AnalysisResponse:
    """
    Analyze a food image.

    Body: ``{"imageBase64": "<base64 without data-URL prefix>"}``

    Returns the model's nutritional analysis text. Upstream failures keep
    the inference API's status code.
    """
    try:
        payload = await read_analysis_request(request, service.settings.max_request_bytes)
        result = await service.analyze(payload.imageBase64)
    except APIError:
        raise
    except Exception as e:
        logger.exception("Server error")
        raise InternalServerError(str(e)) from e

    return AnalysisResponse(success=True, result=result)


@router.api_route(
    "/analyze",
    methods=["GET", "PUT", "PATCH", "DELETE", "HEAD"],
    include_in_schema=False,
)
async def analyze_method_not_allowed() -> None:
    """Only POST (and OPTIONS, handled by middleware) are accepted."""
    raise MethodNotAllowedError()
