"""
Movie search service client.
Sends the user's query to the remote search service and decodes its
route-dependent answer into a SearchResult.
"""
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from config import Config
from models.api_models import SearchRequest
from models.chat_models import MovieRecord, QUERY_MODELS, Route, SearchResult
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class SearchServiceError(Exception):
    """Raised when the search service cannot be reached or answers with something unusable."""


class SearchService:
    """Client for the remote movie search service."""

    def __init__(self, url: Optional[str] = None):
        """
        Initialize SearchService.

        Args:
            url: Search endpoint, defaults to Config.SEARCH_SERVICE_URL
        """
        self.url = url or Config.SEARCH_SERVICE_URL

    async def search(self, query: str) -> SearchResult:
        """
        Send one search request and decode the answer.

        Args:
            query: Trimmed user query

        Returns:
            Decoded SearchResult

        Raises:
            SearchServiceError: on transport failure, non-2xx status, non-JSON body
                or a payload that does not match its route
        """
        client = HTTPClientManager.get_search_client()
        payload = SearchRequest(search=query).model_dump()

        try:
            response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise SearchServiceError(f"Search request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise SearchServiceError(f"Search service returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise SearchServiceError(f"Search service returned invalid JSON: {e}") from e

        if Config.LOG_RAW_RESPONSES:
            app_logger.debug(f"Backend result: {data}")

        return self.decode_result(data)

    @staticmethod
    def decode_result(data: Any) -> SearchResult:
        """
        Decode a raw service payload into a SearchResult.

        Movies are only kept when `data` is a non-empty list; in that case a
        recognized route must also carry a matching `query` object.
        """
        if not isinstance(data, dict):
            raise SearchServiceError(f"Expected a JSON object, got {type(data).__name__}")

        raw_route = data.get("route")
        route = Route.from_wire(raw_route)
        raw_route = None if raw_route is None else str(raw_route)
        records = data.get("data")

        if isinstance(records, list) and records:
            # Unrecognized routes produce no listing, so their records are never read
            if route is Route.UNRECOGNIZED:
                return SearchResult(route=route, listing=True, raw_route=raw_route)

            try:
                movies = tuple(MovieRecord.model_validate(record) for record in records)
                query = SearchService._decode_query(route, data.get("query"))
            except ValidationError as e:
                raise SearchServiceError(f"Malformed {route.value} result: {e}") from e

            return SearchResult(route=route, query=query, movies=movies, listing=True, raw_route=raw_route)

        return SearchResult(
            route=route,
            message=SearchService._text_or_none(data.get("message")),
            error=SearchService._text_or_none(data.get("error")),
            raw_route=raw_route
        )

    @staticmethod
    def _decode_query(route: Route, query: Any):
        """Validate the query object against the model its route expects."""
        model = QUERY_MODELS.get(route)
        if model is None:
            return None
        if not isinstance(query, dict):
            raise SearchServiceError(f"Route {route.value} returned movies without a query object")
        return model.model_validate(query)

    @staticmethod
    def _text_or_none(value: Any) -> Optional[str]:
        """Falsy values count as absent, anything else is shown as text."""
        if not value:
            return None
        return value if isinstance(value, str) else str(value)
