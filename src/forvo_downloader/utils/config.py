"""
Configuration management utilities for Forvo Downloader.
"""

from dataclasses import dataclass


class AppConfig:
    """Fixed settings for the Forvo Downloader application."""

    # Application constants
    APP_NAME = "Forvo Downloader"
    APP_VERSION = "1.0.0"

    # Default file locations (relative to the working directory)
    CONFIG_FILENAME = "forvo.json"
    WORDS_FILENAME = "forvo.txt"
    LOG_FILENAME = "forvo.log"

    # Download settings
    CHUNK_SIZE = 1024  # for file downloads

    # URLs
    FORVO_API_BASE_URL = "https://apifree.forvo.com"

    # Lookup settings
    LOOKUP_ORDER = "rate-desc"
    LOOKUP_LIMIT = 1

    # File patterns
    AUDIO_FILE_EXTENSION = ".mp3"
    NO_RESPONSE_BODY = "[NO RESPONSE BODY]"


class HTTPConfig:
    """HTTP configuration for API requests."""

    # User agent string
    USER_AGENT = f"forvo-downloader/{AppConfig.APP_VERSION}"

    # Request headers
    HEADERS = {
        'User-Agent': USER_AGENT,
        'Accept': 'application/json, audio/mpeg;q=0.9, */*;q=0.8',
    }

    # Request timeouts (in seconds)
    CONNECT_TIMEOUT = 10
    READ_TIMEOUT = 10
    DOWNLOAD_TIMEOUT = 10  # wall clock limit for streaming an audio file

    # Status code signalling the daily API quota is used up
    QUOTA_EXCEEDED_STATUS = 429

    @classmethod
    def get_timeout(cls) -> tuple:
        """Get the (connect, read) timeout pair for requests."""
        return (cls.CONNECT_TIMEOUT, cls.READ_TIMEOUT)


@dataclass(frozen=True)
class ForvoConfig:
    """Settings read from the configuration file."""

    language: str  # see https://forvo.com/languages-codes/
    api_key: str
