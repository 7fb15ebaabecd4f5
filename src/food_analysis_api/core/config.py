"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_api_url: str = "https://api.groq.com/openai/v1/chat/completions"
    groq_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    inference_timeout: float | None = None  # None disables httpx timeouts

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    public_dir: Path = PACKAGE_PUBLIC_DIR
    max_request_bytes: int = 16 * 1024 * 1024  # base64 of a 10 MB image fits

    # Logging
    log_level: str = "INFO"

    # App
    app_name: str = "Food Analysis API"
    api_version: str = "1.0.0"

    @property
    def is_api_key_configured(self) -> bool:
        """Check if the inference credential is present."""
        return bool(self.groq_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
