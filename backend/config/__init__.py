import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("news_triage")

from .constants import (
    LLM_CONFIG,
    CONFIDENCE_CONFIG,
    ANALYSIS_LIMITS,
    SIGNAL_PROFILES,
    RECOMMENDATIONS,
)


class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    LLM_API_KEY: Optional[str] = None
    LLM_ENDPOINT: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    LLM_MODEL: str = "google/gemini-2.5-flash"
    LLM_TIMEOUT: float = LLM_CONFIG.REQUEST_TIMEOUT
    LOG_LEVEL: str = "INFO"

    def text_generation_config(self) -> "TextGenerationConfig":
        return TextGenerationConfig(
            endpoint=self.LLM_ENDPOINT,
            api_key=self.LLM_API_KEY,
            model=self.LLM_MODEL,
            timeout=self.LLM_TIMEOUT,
        )


@dataclass(frozen=True)
class TextGenerationConfig:
    """Connection options handed to the normalizer and synthesizer."""
    endpoint: str
    api_key: Optional[str]
    model: str
    timeout: float = LLM_CONFIG.REQUEST_TIMEOUT


@lru_cache
def get_settings() -> Settings:
    return Settings()


def check_api_keys_on_startup(settings: Settings) -> None:
    """Check for the text-generation API key on startup."""
    logger.setLevel(settings.LOG_LEVEL.upper())
    if not settings.LLM_API_KEY:
        logger.warning("Missing LLM_API_KEY. Analysis requests will fail until it is configured.")
    else:
        logger.info("Text-generation API key is configured (model=%s).", settings.LLM_MODEL)


__all__ = [
    "logger",
    "Settings",
    "TextGenerationConfig",
    "get_settings",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "CONFIDENCE_CONFIG",
    "ANALYSIS_LIMITS",
    "SIGNAL_PROFILES",
    "RECOMMENDATIONS",
]
