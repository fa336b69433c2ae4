"""
In-memory conversation state for one chat session.
Holds the ordered message history and the pending input text, and notifies
listeners after every change so the presentation layer can re-render and
scroll to the latest message.
"""
from typing import Callable, List, Optional, Tuple

from models.api_models import Message
from utils.constants import Sender
from utils.logger import app_logger

Conversation = Tuple[Message, ...]
Listener = Callable[[Conversation], None]


class SessionStore:
    """Ordered conversation history plus pending input for a single session."""

    def __init__(self):
        self._messages: List[Message] = []
        self._listeners: List[Listener] = []
        self._pending_input: str = ""
        self._generation: int = 0

    @property
    def generation(self) -> int:
        """Incremented on every clear(); lets callers spot replies that outlived a clear."""
        return self._generation

    @property
    def pending_input(self) -> str:
        return self._pending_input

    def set_pending_input(self, text: str) -> None:
        self._pending_input = text

    def clear_pending_input(self) -> None:
        self._pending_input = ""

    def latest(self) -> Conversation:
        """Return the current conversation for rendering."""
        return tuple(self._messages)

    def append_user_message(self, text: str) -> Optional[Conversation]:
        """
        Append a user message.

        Args:
            text: Message text as typed; kept untrimmed for display

        Returns:
            Updated conversation, or None when the text is blank
        """
        if not text.strip():
            return None

        self._messages.append(Message(sender=Sender.USER, text=text))
        return self._changed()

    def append_assistant_message(self, text: str) -> Conversation:
        """Append an assistant message. Empty text is allowed."""
        self._messages.append(Message(sender=Sender.ASSISTANT, text=text))
        return self._changed()

    def clear(self) -> Conversation:
        """Drop the whole conversation."""
        self._messages = []
        self._generation += 1
        app_logger.info(f"Conversation cleared (generation {self._generation})")
        return self._changed()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the conversation after each change.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self) -> Conversation:
        snapshot = self.latest()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def __len__(self) -> int:
        return len(self._messages)
