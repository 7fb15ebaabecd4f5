"""HTTP client for the Groq chat-completions API."""

import logging
from functools import lru_cache
from typing import Any

import httpx

from food_analysis_api.core.config import get_settings
from food_analysis_api.core.exceptions import TransportError, UpstreamError

logger = logging.getLogger(__name__)

UPSTREAM_FALLBACK_MESSAGE = "Failed to analyze image"


class GroqChatClient:
    """Client for the OpenAI-compatible chat-completions endpoint."""

    def __init__(
        self,
        api_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the inference client.

        Args:
            api_url: Full chat-completions URL
            timeout: Request timeout in seconds, None disables timeouts
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def create_completion(self, api_key: str, body: dict[str, Any]) -> dict[str, Any]:
        """
        Send one chat-completions request.

        Args:
            api_key: Bearer credential
            body: Request body (model, messages, parameters)

        Returns:
            Parsed JSON response

        Raises:
            UpstreamError: If the API answers with a non-2xx status
            TransportError: If the request could not be sent
        """
        client = await self._get_client()

        try:
            response = await client.post(
                self.api_url,
                json=body,
                headers={"Authorization": f"Bearer {api_key}"},
            )
        except httpx.RequestError as e:
            logger.error(f"Inference request failed: {e!r}")
            raise TransportError(str(e)) from e

        if not response.is_success:
            error_data = _safe_json(response)
            logger.error(f"Inference API error ({response.status_code}): {error_data}")
            raise UpstreamError(
                status_code=response.status_code,
                message=_error_message(error_data),
            )

        return response.json()


def _safe_json(response: httpx.Response) -> Any:
    """Decode a JSON body, falling back to the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(error_data: Any) -> str:
    """Pull ``error.message`` out of an error body."""
    if isinstance(error_data, dict):
        error = error_data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return UPSTREAM_FALLBACK_MESSAGE


@lru_cache
def get_inference_client() -> GroqChatClient:
    """
    Get a cached inference client instance.

    Returns:
        GroqChatClient configured from settings
    """
    settings = get_settings()
    return GroqChatClient(
        api_url=settings.groq_api_url,
        timeout=settings.inference_timeout,
    )
