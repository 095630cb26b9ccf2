"""Predefined read-only queries over the movies collection."""

import logging
import math
import re
from typing import Any

from cinestats.database import MovieStore
from cinestats.exceptions import CountryNotFound

logger = logging.getLogger(__name__)

# Stored document keys
RELEASE_DATE = "Release Date"
RELEASE_COUNTRY = "Release Country"
REVIEW_RATING = "Review Rating"

# DAY-MON-YY, e.g. "5-Jul-98"
RELEASE_DATE_PATTERN = r"^\d{1,2}-[A-Za-z]{3}-\d{2}$"

# Two-digit years are all read as 20YY
CENTURY_OFFSET = 2000

TOP_RATED_LIMIT = 10
MIN_MOVIES_PER_COUNTRY = 10


def build_movies_per_year_pipeline() -> list[dict[str, Any]]:
    """Aggregation counting movies per release year, oldest year first."""
    return [
        # Only well-formed DAY-MON-YY dates
        {"$match": {RELEASE_DATE: {"$regex": RELEASE_DATE_PATTERN}}},
        # Year is the last "-" separated part
        {
            "$addFields": {
                "yearNum": {
                    "$toInt": {"$arrayElemAt": [{"$split": [f"${RELEASE_DATE}", "-"]}, 2]}
                }
            }
        },
        {
            "$group": {
                "_id": {"$add": ["$yearNum", CENTURY_OFFSET]},
                "count": {"$sum": 1},
            }
        },
        {"$sort": {"_id": 1}},
        {"$project": {"_id": 0, "year": "$_id", "count": 1}},
    ]


def build_top_countries_pipeline(country: str | None = None) -> list[dict[str, Any]]:
    """
    Aggregation ranking countries by average review rating.

    Args:
        country: Optional case-insensitive substring the country name must contain

    Returns:
        Pipeline producing {country, averageRating, movieCount} documents
    """
    pipeline: list[dict[str, Any]] = [
        {
            "$match": {
                REVIEW_RATING: {"$exists": True, "$ne": None},
                RELEASE_COUNTRY: {"$exists": True, "$ne": None},
            }
        },
        {
            "$group": {
                "_id": f"${RELEASE_COUNTRY}",
                "averageRating": {"$avg": f"${REVIEW_RATING}"},
                "movieCount": {"$sum": 1},
            }
        },
        {"$match": {"movieCount": {"$gte": MIN_MOVIES_PER_COUNTRY}}},
    ]

    if country:
        # Literal substring, never a user-supplied pattern
        pipeline.append({"$match": {"_id": {"$regex": re.escape(country), "$options": "i"}}})

    pipeline.extend(
        [
            {"$sort": {"averageRating": -1}},
            {"$project": {"_id": 0, "country": "$_id", "averageRating": 1, "movieCount": 1}},
        ]
    )
    return pipeline


class MovieQueries:
    """Query engine over an injected movie store."""

    def __init__(self, store: MovieStore) -> None:
        self.store = store

    async def list_all(self) -> list[dict[str, Any]]:
        """Every movie, in store order."""
        return await self.store.find({})

    async def list_by_minimum_rating(self, rating: float) -> list[dict[str, Any]]:
        """
        Movies rated at or above a threshold.

        A NaN threshold compares false against every rating, so nothing matches.
        """
        if math.isnan(rating):
            logger.info("Rating threshold is not a number, no movies match")
            return []
        return await self.store.find({REVIEW_RATING: {"$gte": rating}})

    async def top_rated(self, limit: int = TOP_RATED_LIMIT) -> list[dict[str, Any]]:
        """Highest rated movies first; ties come back in store order."""
        return await self.store.find({}, sort=[(REVIEW_RATING, -1)], limit=limit)

    async def count_by_release_year(self) -> list[dict[str, Any]]:
        return await self.store.aggregate(build_movies_per_year_pipeline())

    async def top_countries_by_rating(self, country: str | None = None) -> list[dict[str, Any]]:
        """
        Countries with at least MIN_MOVIES_PER_COUNTRY rated movies, best average first.

        Args:
            country: Optional case-insensitive substring filter on the country name

        Returns:
            Country summaries sorted by average rating descending

        Raises:
            CountryNotFound: If a filter was given and no country matched it
        """
        summaries = await self.store.aggregate(build_top_countries_pipeline(country))

        if country and not summaries:
            logger.info(f"No country matching '{country}' with enough movies")
            raise CountryNotFound(country, MIN_MOVIES_PER_COUNTRY)

        return summaries
