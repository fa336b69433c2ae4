"""
Configuration module for the Movie Chat Bridge application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Config:
    """Application configuration class."""

    # Search service
    SEARCH_SERVICE_URL: str = os.getenv(
        "SEARCH_SERVICE_URL",
        "https://ai-powered-movie-search-chat-app-in-db.onrender.com/ai"
    )

    # Where the "Back" action sends the user
    HOME_URL: str = os.getenv("HOME_URL", "https://ai-powered-movie-search-chat-app-in.vercel.app/")

    # Application Settings
    APP_TITLE: str = "Movie Chat Bridge"
    MAX_QUERY_LENGTH: int = 500
    MAX_SESSIONS: int = 200

    # Timeouts (in seconds). First request may hit a cold backend (30-50s).
    SEARCH_TIMEOUT: float = float(os.getenv("SEARCH_TIMEOUT", "60.0"))

    # Connection pool
    MAX_CONNECTIONS: int = 10

    # Drop replies whose request started before the last clear()
    DISCARD_STALE_REPLIES: bool = _env_flag("DISCARD_STALE_REPLIES")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_RAW_RESPONSES: bool = _env_flag("LOG_RAW_RESPONSES")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for unusable settings."""
        if not cls.SEARCH_SERVICE_URL.startswith(("http://", "https://")):
            print(f"   WARNING: SEARCH_SERVICE_URL is not an http(s) URL: {cls.SEARCH_SERVICE_URL!r}")
            print("   Every search will fail with 'Something went wrong.' until it is fixed.")


Config.validate()
