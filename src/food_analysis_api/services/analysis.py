"""Food image analysis relay.

Validates a request, calls the inference API once with the fixed prompt and
returns the model's text.
"""

import logging
from typing import Any

from food_analysis_api.core.config import Settings
from food_analysis_api.core.exceptions import (
    ConfigurationError,
    EmptyResultError,
    ValidationError,
)
from food_analysis_api.services.inference import GroqChatClient, build_analysis_request

logger = logging.getLogger(__name__)


class AnalysisService:
    """Relay between the browser client and the inference API."""

    def __init__(self, settings: Settings, client: GroqChatClient):
        self.settings = settings
        self.client = client

    async def analyze(self, image_base64: str | None) -> str:
        """
        Analyze a base64-encoded food image.

        Args:
            image_base64: Image payload without the data-URL prefix

        Returns:
            Analysis text produced by the model

        Raises:
            ConfigurationError: If no API key is configured
            ValidationError: If the image payload is missing or empty
            UpstreamError: If the inference API rejects the request
            TransportError: If the inference API cannot be reached
            EmptyResultError: If the response carries no message text
        """
        if not self.settings.is_api_key_configured:
            raise ConfigurationError()

        if not image_base64:
            raise ValidationError("Image data is required")

        body = build_analysis_request(self.settings.groq_model, image_base64)

        logger.info(
            f"Sending analysis request to {self.settings.groq_model} "
            f"(payload: {len(image_base64)} chars)"
        )

        data = await self.client.create_completion(self.settings.groq_api_key, body)

        result = extract_message_text(data)
        if not result:
            logger.error(f"Inference API returned no message text: {data}")
            raise EmptyResultError()

        return result


def extract_message_text(data: Any) -> str | None:
    """Return ``choices[0].message.content`` if it is a non-empty string."""
    if not isinstance(data, dict):
        return None

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None

    if isinstance(content, str) and content:
        return content
    return None
