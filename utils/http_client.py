"""
HTTP client utilities with connection pooling.
Provides a reusable httpx client for talking to the movie search service.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages the shared httpx client with connection pooling."""

    _search_client: httpx.AsyncClient | None = None

    @classmethod
    def get_search_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for search requests.

        Features:
        - Connection pooling (reuses TCP connections)
        - Long timeout to survive a cold-starting backend

        Returns:
            Configured httpx.AsyncClient for search operations
        """
        if cls._search_client is None:
            limits = httpx.Limits(
                max_connections=Config.MAX_CONNECTIONS,
                max_keepalive_connections=5,
                keepalive_expiry=30.0
            )

            cls._search_client = httpx.AsyncClient(
                timeout=Config.SEARCH_TIMEOUT,
                headers={"Content-Type": "application/json"},
                limits=limits,
                http2=True
            )

        return cls._search_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close the managed client and clean up connections.
        """
        if cls._search_client is not None:
            await cls._search_client.aclose()
            cls._search_client = None
