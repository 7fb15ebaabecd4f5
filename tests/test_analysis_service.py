"""Unit tests for AnalysisService and the inference client."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from food_analysis_api.core.exceptions import (
    ConfigurationError,
    EmptyResultError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from food_analysis_api.services.analysis import AnalysisService, extract_message_text
from food_analysis_api.services.inference import GroqChatClient, build_analysis_request
from tests.conftest import TINY_PNG_BASE64, UPSTREAM_URL, completion


class TestAnalysisService:
    """Tests for AnalysisService."""

    @pytest.fixture
    def mock_client(self):
        client = MagicMock(spec=GroqChatClient)
        client.create_completion = AsyncMock(return_value=completion("Nasi goreng, 450 kkal"))
        return client

    @pytest.mark.asyncio
    async def test_analyze_returns_text(self, settings, mock_client):
        service = AnalysisService(settings, mock_client)

        result = await service.analyze(TINY_PNG_BASE64)

        assert result == "Nasi goreng, 450 kkal"
        mock_client.create_completion.assert_awaited_once_with(
            "test-key",
            build_analysis_request(settings.groq_model, TINY_PNG_BASE64),
        )

    @pytest.mark.asyncio
    async def test_analyze_without_key(self, settings, mock_client):
        service = AnalysisService(settings.model_copy(update={"groq_api_key": ""}), mock_client)

        with pytest.raises(ConfigurationError) as exc_info:
            await service.analyze(TINY_PNG_BASE64)

        assert exc_info.value.status_code == 500
        mock_client.create_completion.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("image", [None, ""])
    async def test_analyze_without_image(self, settings, mock_client, image):
        service = AnalysisService(settings, mock_client)

        with pytest.raises(ValidationError) as exc_info:
            await service.analyze(image)

        assert exc_info.value.status_code == 400
        mock_client.create_completion.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_analyze_empty_result(self, settings, mock_client):
        mock_client.create_completion.return_value = {"choices": []}
        service = AnalysisService(settings, mock_client)

        with pytest.raises(EmptyResultError):
            await service.analyze(TINY_PNG_BASE64)


@pytest.mark.parametrize(
    "data,expected",
    [
        (completion("hello"), "hello"),
        (completion(""), None),
        (completion(["not", "text"]), None),
        ({"choices": "nope"}, None),
        ({"choices": [None]}, None),
        (None, None),
        ([], None),
    ],
)
def test_extract_message_text(data, expected):
    assert extract_message_text(data) == expected


class TestGroqChatClient:
    """Tests for GroqChatClient."""

    @pytest.mark.asyncio
    async def test_create_completion_success(self, inference_client, upstream):
        body = build_analysis_request("some-model", TINY_PNG_BASE64)

        data = await inference_client.create_completion("secret", body)

        assert data == completion("# Food\n**Calories**: 200")
        request = upstream.requests[0]
        assert str(request.url) == UPSTREAM_URL
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_create_completion_upstream_error(self, inference_client, upstream):
        upstream.response = httpx.Response(401, json={"error": {"message": "Invalid API Key"}})

        with pytest.raises(UpstreamError) as exc_info:
            await inference_client.create_completion("bad", {})

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid API Key"

    @pytest.mark.asyncio
    async def test_create_completion_transport_error(self, inference_client, upstream):
        upstream.response = httpx.ReadError("socket closed")

        with pytest.raises(TransportError) as exc_info:
            await inference_client.create_completion("key", {})

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "socket closed"

    @pytest.mark.asyncio
    async def test_close_recreates_client(self, inference_client):
        first = await inference_client._get_client()
        await inference_client.close()

        second = await inference_client._get_client()

        assert first is not second
        assert first.is_closed
        await inference_client.close()

    def test_default_timeout_disabled(self):
        client = GroqChatClient(api_url=UPSTREAM_URL)

        assert client.timeout is None
