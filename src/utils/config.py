"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.
"""

from typing import List
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Application Settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Request limits
    MIN_CONTENT_LENGTH: int = 1
    MAX_CONTENT_LENGTH: int = 100_000

    # Hallucination detection
    HALLUCINATION_CONFIDENCE_THRESHOLD: float = 70.0
    HALLUCINATION_STRICT_MODE: bool = False

    # Quality gate thresholds (0-100, higher is better)
    PHRASE_QUALITY_THRESHOLD: float = 70.0
    HALLUCINATION_RISK_THRESHOLD: float = 40.0
    EEAT_THRESHOLD: float = 50.0

    # API key auth (disabled in development)
    REQUIRE_AUTH: bool = False
    API_KEYS: str = ""  # Comma-separated

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase

    @property
    def api_key_list(self) -> List[str]:
        return [key.strip() for key in self.API_KEYS.split(",") if key.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
