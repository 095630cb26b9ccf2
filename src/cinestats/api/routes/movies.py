"""Movies API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from cinestats.database import MovieStore, get_movie_store
from cinestats.schemas.movie import CountryRatingSummary, MovieResponse, YearCount
from cinestats.services.movie_queries import MovieQueries
from cinestats.utils.numbers import parse_rating

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies")


def get_movie_queries(store: MovieStore = Depends(get_movie_store)) -> MovieQueries:
    return MovieQueries(store)


@router.get("", response_model=list[MovieResponse], response_model_exclude_none=True)
async def get_all_movies(
    queries: MovieQueries = Depends(get_movie_queries),
) -> list[dict[str, Any]]:
    """Get every movie in the collection."""
    return await queries.list_all()


@router.get(
    "/rating/{rating}",
    response_model=list[MovieResponse],
    response_model_exclude_none=True,
)
async def get_movies_with_rating_above(
    rating: str,
    queries: MovieQueries = Depends(get_movie_queries),
) -> list[dict[str, Any]]:
    """
    Get movies with a review rating greater than or equal to `rating`.

    Args:
        rating: Minimum rating; a value that is not a number matches nothing
        queries: Movie query engine

    Returns:
        Matching movies
    """
    threshold = parse_rating(rating)
    return await queries.list_by_minimum_rating(threshold)


@router.get("/top-rated", response_model=list[MovieResponse], response_model_exclude_none=True)
async def get_top_rated_movies(
    queries: MovieQueries = Depends(get_movie_queries),
) -> list[dict[str, Any]]:
    """Get the 10 highest rated movies."""
    return await queries.top_rated()


@router.get("/movies-per-year", response_model=list[YearCount])
async def get_movies_per_year(
    queries: MovieQueries = Depends(get_movie_queries),
) -> list[dict[str, Any]]:
    """Get the number of movies released per year, oldest year first."""
    return await queries.count_by_release_year()


@router.get("/top-countries", response_model=list[CountryRatingSummary])
async def get_top_countries(
    country: str | None = Query(default=None, description="Case-insensitive country name search"),
    queries: MovieQueries = Depends(get_movie_queries),
) -> list[dict[str, Any]]:
    """
    Get countries sorted by average movie rating.

    Only countries with at least 10 rated movies are included. When `country`
    is given and matches nothing, the error handler responds with 404.
    """
    return await queries.top_countries_by_rating(country)
