"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from food_analysis_api.core.config import Settings, get_settings
from food_analysis_api.main import app
from food_analysis_api.services.inference import GroqChatClient, get_inference_client

# Sample test image (1x1 red pixel PNG)
TINY_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8DwHwAFBQIAX8jx0gAAAABJRU5ErkJggg=="
)

UPSTREAM_URL = "https://upstream.test/openai/v1/chat/completions"


def completion(content) -> dict:
    """Chat-completions response carrying ``content`` as the first choice."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class FakeUpstream:
    """Records outbound requests and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response: httpx.Response | Exception = httpx.Response(
            200, json=completion("# Food\n**Calories**: 200")
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A small asset root."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<html><body>Index page</body></html>")
    (root / "app.js").write_text("console.log('hi');")
    (root / "style.css").write_text("body { color: red; }")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\nfake")
    (root / "data.bin").write_bytes(b"\x00\x01\x02")
    (root / "assets").mkdir()
    (tmp_path / "secret.txt").write_text("do not serve")
    return root


@pytest.fixture
def settings(public_dir: Path) -> Settings:
    """Settings with a credential and the temporary asset root."""
    return Settings(
        _env_file=None,
        groq_api_key="test-key",
        groq_api_url=UPSTREAM_URL,
        public_dir=public_dir,
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def inference_client(upstream: FakeUpstream) -> GroqChatClient:
    return GroqChatClient(api_url=UPSTREAM_URL, transport=httpx.MockTransport(upstream))


@pytest.fixture
def override_settings(settings: Settings, inference_client: GroqChatClient) -> Generator[None, None, None]:
    """Point the app at test settings and the fake upstream."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_inference_client] = lambda: inference_client
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_settings) -> TestClient:
    """
    Create test client.

    Usage:
        def test_endpoint(client: TestClient):
            response = client.get("/health")
            assert response.status_code == 200
    """
    return TestClient(app)
