"""
Data models for search results.
The search service answers with a route-dependent shape; it is decoded into
these types before any formatting happens.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel

Scalar = Union[int, float, str]


class Route(Enum):
    """How the search service interpreted the query."""
    TITLE_SEARCH = "titleSearch"
    SEARCH_RATING = "searchRating"
    YEAR_SEARCH = "yearSearch"
    GENRE_SEARCH = "genreSearch"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def from_wire(cls, value) -> "Route":
        """Map the raw route value, folding anything unknown into UNRECOGNIZED."""
        for route in cls:
            if route is not cls.UNRECOGNIZED and route.value == value:
                return route
        return cls.UNRECOGNIZED


class TitleQuery(BaseModel):
    title: Scalar


class RatingQuery(BaseModel):
    rating: Scalar


class YearQuery(BaseModel):
    year: Scalar


class GenreQuery(BaseModel):
    genre: Scalar


RouteQuery = Union[TitleQuery, RatingQuery, YearQuery, GenreQuery]

QUERY_MODELS = {
    Route.TITLE_SEARCH: TitleQuery,
    Route.SEARCH_RATING: RatingQuery,
    Route.YEAR_SEARCH: YearQuery,
    Route.GENRE_SEARCH: GenreQuery,
}


class MovieRecord(BaseModel):
    """A single movie returned by the search service. Missing fields are tolerated."""
    title: Optional[Scalar] = None
    year: Optional[Scalar] = None
    rating: Optional[Scalar] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class SearchResult:
    """
    Decoded search service response.

    `listing` is True when the service sent a non-empty `data` list, whatever
    the route. `query` and `movies` are only populated for recognized routes.
    `message` and `error` are only consulted when `listing` is False.
    """
    route: Route
    query: Optional[RouteQuery] = None
    movies: tuple[MovieRecord, ...] = field(default_factory=tuple)
    listing: bool = False
    message: Optional[str] = None
    error: Optional[str] = None
    raw_route: Optional[str] = None
