"""
Models package exports.
"""
from models.api_models import Message, SearchRequest, ChatRequest, ConversationResponse
from models.chat_models import (
    Route,
    TitleQuery,
    RatingQuery,
    YearQuery,
    GenreQuery,
    MovieRecord,
    SearchResult
)

__all__ = [
    'Message',
    'SearchRequest',
    'ChatRequest',
    'ConversationResponse',
    'Route',
    'TitleQuery',
    'RatingQuery',
    'YearQuery',
    'GenreQuery',
    'MovieRecord',
    'SearchResult'
]
