"""
Configuration settings for the YouTube segment summarizer application.
"""

import os
from typing import List
from dotenv import load_dotenv

from yt_summarizer.models.schemas import SummaryConfig, TranscriptFetchConfig
from yt_summarizer.utils.error_handling import MissingCredentialsError


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Segment Summarizer"
    APP_VERSION = "0.2.0"

    # API keys
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    RAPID_API_KEY = os.getenv("RAPID_API_KEY")

    # Upstream services
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    TRANSCRIPT_API_URL = os.getenv(
        "TRANSCRIPT_API_URL", "https://youtube-transcript3.p.rapidapi.com/api/transcript"
    )
    TRANSCRIPT_API_HOST = os.getenv("TRANSCRIPT_API_HOST", "youtube-transcript3.p.rapidapi.com")
    VIDEO_INFO_URL = os.getenv("VIDEO_INFO_URL", "https://noembed.com/embed")
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Summarization policy
    CHUNK_SECONDS = float(os.getenv("CHUNK_SECONDS", "300"))
    FULL_SUMMARY_MAX_TOKENS = int(os.getenv("FULL_SUMMARY_MAX_TOKENS", "1000"))
    SEGMENT_SUMMARY_MAX_TOKENS = int(os.getenv("SEGMENT_SUMMARY_MAX_TOKENS", "300"))

    # Web
    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:8501")

    @classmethod
    def missing_credentials(cls) -> List[str]:
        """Names of the required credentials that are not set."""
        required = {
            "OPENAI_API_KEY": cls.OPENAI_API_KEY,
            "RAPID_API_KEY": cls.RAPID_API_KEY,
        }
        return [name for name, value in required.items() if not value]

    @classmethod
    def validate_credentials(cls):
        """Fail fast when a server deployment is missing its API keys."""
        missing = cls.missing_credentials()
        if missing:
            raise MissingCredentialsError(
                f"API keys are not configured. Please set {' and '.join(missing)} "
                "in the .env file or environment variables."
            )

    @classmethod
    def cors_origins(cls) -> List[str]:
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def transcript_fetch_config(cls) -> TranscriptFetchConfig:
        """Build the transcript provider settings."""
        return TranscriptFetchConfig(
            api_key=cls.RAPID_API_KEY or "",
            api_url=cls.TRANSCRIPT_API_URL,
            api_host=cls.TRANSCRIPT_API_HOST,
            timeout=cls.REQUEST_TIMEOUT,
        )

    @classmethod
    def summary_config(cls) -> SummaryConfig:
        """Build the chat-completion settings."""
        return SummaryConfig(
            api_key=cls.OPENAI_API_KEY or "",
            model=cls.OPENAI_MODEL,
            full_max_tokens=cls.FULL_SUMMARY_MAX_TOKENS,
            segment_max_tokens=cls.SEGMENT_SUMMARY_MAX_TOKENS,
            chunk_seconds=cls.CHUNK_SECONDS,
        )


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
