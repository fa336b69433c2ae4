"""
Pydantic data models for API requests and responses.
"""
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field

from config import Config


class Message(BaseModel):
    """One conversation turn. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    sender: Literal["user", "assistant"]
    text: str


class SearchRequest(BaseModel):
    """Payload sent to the movie search service."""
    search: str


class ChatRequest(BaseModel):
    """Chat request model for one user turn."""
    session_id: str = Field(..., min_length=1, max_length=64)
    text: str = Field(..., max_length=Config.MAX_QUERY_LENGTH)


class ConversationResponse(BaseModel):
    """Conversation snapshot returned to clients."""
    session_id: str
    messages: List[Message]
