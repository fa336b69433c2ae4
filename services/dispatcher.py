"""
Query dispatcher: runs one user turn against the movie search service.
"""
from typing import Optional

from config import Config
from services.formatter import ReplyFormatter
from services.search import SearchService
from services.session_store import SessionStore
from utils.constants import FALLBACK_REPLY
from utils.logger import app_logger


class QueryDispatcher:
    """Sends user queries to the search service and appends the formatted reply."""

    def __init__(
        self,
        store: SessionStore,
        search_service: Optional[SearchService] = None,
        discard_stale: Optional[bool] = None
    ):
        """
        Initialize QueryDispatcher.

        Args:
            store: Session state the turn reads from and appends to
            search_service: Search client, a default SearchService when omitted
            discard_stale: Drop replies whose request started before the last clear().
                Defaults to Config.DISCARD_STALE_REPLIES.
        """
        self.store = store
        self.search_service = search_service or SearchService()
        self.discard_stale = Config.DISCARD_STALE_REPLIES if discard_stale is None else discard_stale

    async def handle_search(self, raw_input: str) -> None:
        """
        Run one turn: echo the user message, query the service, append the reply.

        Blank input is ignored. Failures never propagate; they become a fixed
        fallback reply. The pending input is cleared only after a successful
        round trip.
        """
        query = raw_input.strip()
        if not query:
            return

        self.store.append_user_message(raw_input)
        generation = self.store.generation
        app_logger.info(f"Dispatching search: '{query}'")

        succeeded = False
        try:
            result = await self.search_service.search(query)
            reply = ReplyFormatter.format_reply(result)
            succeeded = True
            app_logger.info(f"Search answered via route '{result.raw_route}' ({len(result.movies)} movies)")
        except Exception as e:
            app_logger.error(f"Search failed for '{query}': {e}")
            reply = FALLBACK_REPLY

        if self.discard_stale and generation != self.store.generation:
            app_logger.info(f"Discarding stale reply for '{query}' (conversation cleared while in flight)")
            return

        self.store.append_assistant_message(reply)
        if succeeded:
            self.store.clear_pending_input()
