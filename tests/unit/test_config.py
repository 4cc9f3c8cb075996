"""
Unit tests for environment-driven settings.
"""

import pytest

from ollama_tools.config import Settings
from ollama_tools.retry.config import WEB_API_RETRY_CONFIG

ENV_VARS = (
    "OLLAMA_HOST",
    "OLLAMA_TIMEOUT",
    "OLLAMA_API_KEY",
    "OLLAMA_WEB_API_URL",
    "WEB_API_MAX_RETRIES",
    "WEB_API_BASE_DELAY",
    "WEB_API_MAX_DELAY",
    "WEB_API_TIMEOUT",
    "LOG_LEVEL",
    "ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)

    assert settings.OLLAMA_HOST == "http://127.0.0.1:11434"
    assert settings.OLLAMA_API_KEY is None
    assert settings.OLLAMA_WEB_API_URL == "https://ollama.com"
    assert settings.ENVIRONMENT == "development"


def test_default_retry_policy_matches_web_api_config(clean_env):
    assert Settings(_env_file=None).web_retry_config() == WEB_API_RETRY_CONFIG


def test_environment_overrides(clean_env):
    clean_env.setenv("OLLAMA_HOST", "http://gpu-box:11434")
    clean_env.setenv("OLLAMA_API_KEY", "secret")
    clean_env.setenv("WEB_API_MAX_RETRIES", "5")
    clean_env.setenv("WEB_API_TIMEOUT", "12.5")

    settings = Settings(_env_file=None)

    assert settings.OLLAMA_HOST == "http://gpu-box:11434"
    assert settings.OLLAMA_API_KEY == "secret"
    config = settings.web_retry_config()
    assert config.max_retries == 5
    assert config.timeout == 12.5


def test_invalid_retry_settings_rejected(clean_env):
    """Test nonsensical values fail when the policy is built."""
    clean_env.setenv("WEB_API_BASE_DELAY", "-1")

    with pytest.raises(ValueError, match="base_delay"):
        Settings(_env_file=None).web_retry_config()
