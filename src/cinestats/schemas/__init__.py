"""Pydantic schemas for API responses."""

from cinestats.schemas.movie import CountryRatingSummary, MovieResponse, YearCount

__all__ = [
    "CountryRatingSummary",
    "MovieResponse",
    "YearCount",
]
