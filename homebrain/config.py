"""
Configuration and settings for HomeBrain.
"""

import os

from pydantic import BaseModel, Field


def _env_float(name: str, default: str) -> float:
    return float(os.environ.get(name, default))


def _env_int(name: str, default: str) -> int:
    return int(os.environ.get(name, default))


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_HOST", "0.0.0.0")
    )
    port: int = Field(
        default_factory=lambda: _env_int("HOMEBRAIN_PORT", "8080")
    )
    cors_origins: list[str] = Field(default=["*"])


class LLMConfig(BaseModel):
    """LLM configuration."""

    backend: str = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_LLM_BACKEND", "openai")
    )
    model: str = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_LLM_MODEL", "gpt-4o-mini")
    )
    base_url: str | None = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_LLM_BASE_URL")
    )
    timeout: float = Field(
        default_factory=lambda: _env_float("HOMEBRAIN_LLM_TIMEOUT", "30")
    )
    retries: int = Field(default=1, ge=0, le=5)
    max_tokens: int = Field(default=400)


class STTConfig(BaseModel):
    """STT configuration."""

    backend: str = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_STT_BACKEND", "whisper_api")
    )
    base_url: str = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_STT_BASE_URL", "https://api.openai.com/v1")
    )
    model: str = Field(
        default_factory=lambda: os.environ.get("HOMEBRAIN_STT_MODEL", "whisper-1")
    )
    default_language: str = Field(default="en")
    timeout: float = Field(
        default_factory=lambda: _env_float("HOMEBRAIN_STT_TIMEOUT", "60")
    )
    retries: int = Field(default=1, ge=0, le=5)


class ChatConfig(BaseModel):
    """Chat configuration."""

    assistant_name: str = Field(default="HomeBrain")
    history_limit: int = Field(default=10, ge=1)  # Turns sent to the LLM
    history_display_limit: int = Field(default=50, ge=1)


class Config(BaseModel):
    """Main configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    stt: STTConfig = Field(default_factory=STTConfig)
    chat: ChatConfig = Field(default_factory=ChatConfig)
    retry_jitter: float = Field(default=0.5, ge=0.0)  # Max seconds of random delay before a retry


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration."""
    global _config
    _config = config
