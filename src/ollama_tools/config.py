"""
Configuration settings for ollama-tools.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from ollama_tools.retry.config import RetryConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # "production" switches logs to JSON

    # === Ollama (local API) ===
    OLLAMA_HOST: str = "http://127.0.0.1:11434"
    OLLAMA_TIMEOUT: float = 60.0  # seconds, httpx transport timeout

    # === Ollama Cloud (web API) ===
    OLLAMA_API_KEY: Optional[str] = None  # Required for web search / web fetch
    OLLAMA_WEB_API_URL: str = "https://ollama.com"

    # === Retry & Timeout (web API) ===
    WEB_API_MAX_RETRIES: int = 3  # Retries after the first attempt
    WEB_API_BASE_DELAY: float = 1.0  # seconds
    WEB_API_MAX_DELAY: Optional[float] = 10.0  # seconds, None = unbounded
    WEB_API_TIMEOUT: float = 30.0  # seconds per attempt

    def web_retry_config(self) -> RetryConfig:
        """Retry policy for web API calls built from these settings."""
        return RetryConfig(
            max_retries=self.WEB_API_MAX_RETRIES,
            base_delay=self.WEB_API_BASE_DELAY,
            max_delay=self.WEB_API_MAX_DELAY,
            timeout=self.WEB_API_TIMEOUT,
        )


# Global settings instance
settings = Settings()
