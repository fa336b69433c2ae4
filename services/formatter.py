"""
Reply formatting for search results.
Turns a decoded SearchResult into the newline-delimited plain text shown in
the assistant's chat bubble.
"""
from models.chat_models import MovieRecord, Route, SearchResult
from utils.constants import DEFAULT_APOLOGY, HEADER_TEMPLATES, MISSING_VALUE, MOVIE_TEMPLATE


class ReplyFormatter:
    """Builds assistant reply text from search results."""

    @staticmethod
    def format_reply(result: SearchResult) -> str:
        """
        Format a search result as reply text.

        Listings get a route header followed by one block per movie.
        Unrecognized routes with movies yield an empty reply.
        Without movies the service's message, then its error, then a
        default apology is used.
        """
        if not result.listing:
            return result.message or result.error or DEFAULT_APOLOGY

        if result.route is Route.UNRECOGNIZED or result.query is None:
            return ""

        header = ReplyFormatter.format_header(result)
        body = "\n".join(ReplyFormatter.format_movie(movie) for movie in result.movies)
        return f"{header}\n\n{body}"

    @staticmethod
    def format_header(result: SearchResult) -> str:
        """Fill the route's header template from its query fields."""
        template = HEADER_TEMPLATES[result.route.value]
        fields = {key: display_value(value) for key, value in result.query.model_dump().items()}
        return template.format(**fields)

    @staticmethod
    def format_movie(movie: MovieRecord) -> str:
        """Render one movie as a title/year/rating/description block."""
        return MOVIE_TEMPLATE.format(
            title=display_value(movie.title),
            year=display_value(movie.year),
            rating=display_value(movie.rating),
            description=movie.description or ""
        )


def display_value(value) -> str:
    """Render a scalar the way the service sent it: 8.0 shows as 8, 8.5 as 8.5."""
    if value is None:
        return MISSING_VALUE
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
