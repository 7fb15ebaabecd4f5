"""Client for the analysis relay endpoint."""

import logging

import httpx

from .capture import CaptureSession
from .rendering import strip_markdown

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/analyze"
NO_IMAGE_MESSAGE = "Please select an image first"
FAILED_MESSAGE = "Failed to analyze image"
NO_RESPONSE_MESSAGE = "No response from AI"


class AnalysisClientError(Exception):
    """User-visible analysis failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AnalysisClient:
    """Sends the captured image to the relay and renders the answer."""

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Origin serving the relay (e.g. "http://localhost:3000")
            timeout: Request timeout in seconds, None disables timeouts
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def analyze(self, session: CaptureSession) -> str:
        """
        Analyze the image held by ``session``.

        Loading is set for the duration of the call and always cleared.
        On failure the message is recorded on the session and raised.

        Returns:
            Analysis text with markdown stripped

        Raises:
            AnalysisClientError: If nothing is selected or the request fails
        """
        if not session.image_base64:
            session.show_error(NO_IMAGE_MESSAGE)
            raise AnalysisClientError(NO_IMAGE_MESSAGE)

        session.loading = True
        session.clear_error()

        try:
            response = await self._client.post(
                ANALYZE_PATH,
                json={"imageBase64": session.image_base64},
            )
            data = response.json()

            if not response.is_success:
                message = data.get("error") if isinstance(data, dict) else None
                raise AnalysisClientError(message or FAILED_MESSAGE, response.status_code)

            if not isinstance(data, dict) or not data.get("success") or not data.get("result"):
                raise AnalysisClientError(NO_RESPONSE_MESSAGE, response.status_code)

            result = strip_markdown(data["result"])
            session.show_result(result)
            return result

        except AnalysisClientError as e:
            logger.error(f"Analysis failed: {e.message}")
            session.show_error(e.message)
            raise
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Analysis request failed: {e!r}")
            message = str(e) or "Failed to analyze image. Please try again."
            session.show_error(message)
            raise AnalysisClientError(message) from e
        finally:
            session.loading = False
