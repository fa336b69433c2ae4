"""
Chat controller: the surface a presentation layer drives.
Bundles a session store, a query dispatcher and a navigate-away callback,
plus a bounded registry of controllers keyed by session id.
"""
import asyncio
from collections import OrderedDict
from typing import Callable, Optional, Set

from config import Config
from services.dispatcher import QueryDispatcher
from services.search import SearchService
from services.session_store import Conversation, SessionStore
from utils.logger import app_logger

Navigate = Callable[[str], None]


class ChatController:
    """Conversation state and user actions for one chat session."""

    def __init__(
        self,
        search_service: Optional[SearchService] = None,
        navigate: Optional[Navigate] = None,
        home_url: Optional[str] = None,
        discard_stale: Optional[bool] = None
    ):
        self.store = SessionStore()
        self.dispatcher = QueryDispatcher(self.store, search_service, discard_stale)
        self.home_url = home_url or Config.HOME_URL
        self._navigate = navigate
        self._in_flight: Set[asyncio.Task] = set()
        self._sending = 0

    def latest(self) -> Conversation:
        return self.store.latest()

    def clear(self) -> Conversation:
        return self.store.clear()

    def submit(self, text: Optional[str] = None) -> Optional[asyncio.Task]:
        """
        Fire-and-forget submission. Must be called from a running event loop.

        Args:
            text: Text to send, defaults to the store's pending input

        Returns:
            The scheduled task, or None when the text is blank
        """
        text = self.store.pending_input if text is None else text
        if not text.strip():
            return None

        task = asyncio.create_task(self.dispatcher.handle_search(text))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def send(self, text: str) -> Conversation:
        """Run one turn to completion and return the resulting conversation."""
        self._sending += 1
        try:
            await self.dispatcher.handle_search(text)
        finally:
            self._sending -= 1
        return self.store.latest()

    async def wait_idle(self) -> None:
        """Wait until every submitted turn has finished."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight))

    @property
    def busy(self) -> bool:
        """True while any submitted or sent turn is still waiting on the search service."""
        return bool(self._in_flight) or self._sending > 0

    def go_back(self) -> str:
        """Leave the chat: hand the home URL to the navigate callback and return it."""
        if self._navigate is not None:
            self._navigate(self.home_url)
        return self.home_url


class SessionRegistry:
    """Keeps one ChatController per session id, evicting the least recently used idle one."""

    def __init__(self, max_sessions: int = Config.MAX_SESSIONS):
        self._max_sessions = max_sessions
        self._controllers: "OrderedDict[str, ChatController]" = OrderedDict()

    def get(self, session_id: str) -> Optional[ChatController]:
        """Look up a session without creating it or refreshing its recency."""
        return self._controllers.get(session_id)

    def get_or_create(self, session_id: str) -> ChatController:
        controller = self._controllers.get(session_id)
        if controller is None:
            controller = ChatController()
            self._controllers[session_id] = controller
            self._evict(keep=session_id)
        else:
            self._controllers.move_to_end(session_id)
        return controller

    def _evict(self, keep: str) -> None:
        # Busy sessions are skipped so an in-flight reply never lands in a dropped store
        overflow = len(self._controllers) - self._max_sessions
        if overflow <= 0:
            return

        idle = [sid for sid, controller in self._controllers.items() if sid != keep and not controller.busy]
        for session_id in idle[:overflow]:
            del self._controllers[session_id]
            app_logger.info(f"Session evicted: {session_id}")

        if len(self._controllers) > self._max_sessions:
            app_logger.warning(
                f"Session registry over capacity ({len(self._controllers)}/{self._max_sessions}): "
                f"remaining sessions are busy"
            )

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)


_session_registry: Optional[SessionRegistry] = None


def get_session_registry() -> SessionRegistry:
    """Get the global session registry instance."""
    global _session_registry
    if _session_registry is None:
        _session_registry = SessionRegistry()
    return _session_registry
