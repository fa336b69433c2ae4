import pytest

from services.formatter import ReplyFormatter, display_value
from services.search import SearchService
from utils.constants import DEFAULT_APOLOGY, MISSING_VALUE
from tests.fixtures.responses import (
    TITLE_SEARCH_RESPONSE,
    RATING_SEARCH_RESPONSE,
    YEAR_SEARCH_RESPONSE,
    GENRE_SEARCH_RESPONSE,
    UNKNOWN_ROUTE_RESPONSE,
    NO_MATCH_RESPONSE,
    MATRIX,
)


def format_payload(payload):
    return ReplyFormatter.format_reply(SearchService.decode_result(payload))


def test_title_search_reply_lists_movie_block():
    """Given a titleSearch result, the reply should carry the title header and a full movie block."""
    reply = format_payload(TITLE_SEARCH_RESPONSE)

    assert 'Movies found with title "Matrix"' in reply
    assert "Title: The Matrix" in reply
    assert "Year: 1999" in reply
    assert "Rating: 8.7" in reply
    assert "A hacker discovers reality is a simulation." in reply
    assert reply == (
        '🎬 Movies found with title "Matrix":\n\n'
        "🎬 Title: The Matrix\n"
        "📅 Year: 1999\n"
        "⭐ Rating: 8.7\n"
        "📝 A hacker discovers reality is a simulation.\n"
    )


@pytest.mark.parametrize("payload, expected_header", [
    (RATING_SEARCH_RESPONSE, "⭐ Movies with rating 8.5 or above:"),
    (YEAR_SEARCH_RESPONSE, "📅 Movies released in 2010:"),
    (GENRE_SEARCH_RESPONSE, '🎭 Movies in genre "Sci-Fi":'),
])
def test_route_selects_header(payload, expected_header):
    """Each recognized route should open the reply with its own header followed by a blank line."""
    reply = format_payload(payload)
    assert reply.startswith(expected_header + "\n\n🎬 Title: ")


def test_records_are_separated_by_a_single_blank_line():
    """Multiple movies should be joined so exactly one blank line sits between blocks."""
    reply = format_payload(GENRE_SEARCH_RESPONSE)

    assert "simulation.\n\n🎬 Title: Inception" in reply
    assert "\n\n\n" not in reply
    assert reply.endswith("dream-sharing technology.\n")


def test_unknown_route_with_movies_yields_empty_reply():
    """An unrecognized route with movies should produce an empty reply rather than an error."""
    assert format_payload(UNKNOWN_ROUTE_RESPONSE) == ""


def test_missing_route_with_movies_yields_empty_reply():
    """A payload with movies but no route at all behaves like an unrecognized route."""
    assert format_payload({"data": [MATRIX]}) == ""


def test_empty_data_uses_service_message_verbatim():
    """Given no movies and a message, the reply should be exactly that message."""
    assert format_payload(NO_MATCH_RESPONSE) == "No movies match."


@pytest.mark.parametrize("payload, expected", [
    ({"data": [], "message": "", "error": "Bad query"}, "Bad query"),
    ({"error": "Bad query"}, "Bad query"),
    ({"data": "not a list", "message": "Try again"}, "Try again"),
    ({"route": "titleSearch", "data": []}, DEFAULT_APOLOGY),
    ({}, DEFAULT_APOLOGY),
])
def test_fallback_text_priority(payload, expected):
    """Without movies the reply should be message, then error, then the default apology."""
    assert format_payload(payload) == expected


@pytest.mark.parametrize("value, expected", [
    (8.0, "8"),
    (8.7, "8.7"),
    (1999, "1999"),
    ("PG-13", "PG-13"),
])
def test_display_value_renders_numbers_like_the_service(value, expected):
    """Whole floats should drop their fractional part, other values render unchanged."""
    assert display_value(value) == expected


def test_incomplete_records_still_render_the_listing():
    """A null description renders empty and a missing rating shows a placeholder, keeping every block."""
    reply = format_payload({
        "route": "yearSearch",
        "query": {"year": 1999},
        "data": [
            MATRIX,
            {"title": "eXistenZ", "year": 1999, "rating": 6.8, "description": None},
            {"title": "The Thirteenth Floor", "year": 1999, "description": "Virtual 1937 Los Angeles."},
        ],
    })

    assert reply.startswith("📅 Movies released in 1999:\n\n🎬 Title: The Matrix")
    assert "🎬 Title: eXistenZ\n📅 Year: 1999\n⭐ Rating: 6.8\n📝 \n" in reply
    assert f"⭐ Rating: {MISSING_VALUE}\n📝 Virtual 1937 Los Angeles.\n" in reply
