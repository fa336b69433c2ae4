"""
Constants and reply templates for the Movie Chat Bridge application.
"""

# Assistant reply when the request or formatting fails
FALLBACK_REPLY = "Something went wrong."

# Assistant reply when the service returns no movies and no message/error
DEFAULT_APOLOGY = (
    "Jasmin is confused 😕. Please specify your query or give me a hint so I can do better for you."
)

# Listing headers keyed by route, filled from the route's query fields
HEADER_TEMPLATES = {
    "titleSearch": '🎬 Movies found with title "{title}":',
    "searchRating": "⭐ Movies with rating {rating} or above:",
    "yearSearch": "📅 Movies released in {year}:",
    "genreSearch": '🎭 Movies in genre "{genre}":',
}

# One movie block; the trailing newline leaves a blank line between records
MOVIE_TEMPLATE = "🎬 Title: {title}\n📅 Year: {year}\n⭐ Rating: {rating}\n📝 {description}\n"

# Shown in place of a movie field the service left out
MISSING_VALUE = "N/A"


class Sender:
    """Message sender identifiers."""
    USER, ASSISTANT = "user", "assistant"
