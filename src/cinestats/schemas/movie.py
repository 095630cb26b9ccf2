"""Pydantic schemas for movie data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MovieResponse(BaseModel):
    """
    Movie document as stored in the collection.

    Field aliases are the stored keys, which are also used in responses.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(alias="_id")
    title: str | None = Field(default=None, alias="Title")
    genres: str | None = Field(default=None, alias="Genres")
    release_date: str | None = Field(default=None, alias="Release Date")
    release_country: str | None = Field(default=None, alias="Release Country")
    review_rating: float | None = Field(default=None, alias="Review Rating")
    movie_run_time: str | None = Field(default=None, alias="Movie Run Time")
    plot: str | None = Field(default=None, alias="Plot")
    cast: str | None = Field(default=None, alias="Cast")
    language: str | None = Field(default=None, alias="Language")
    filming_locations: str | None = Field(default=None, alias="Filming Locations")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, value: Any) -> str:
        return str(value)


class YearCount(BaseModel):
    """Number of movies released in a year."""

    year: int
    count: int


class CountryRatingSummary(BaseModel):
    """Average review rating for a release country."""

    country: str
    averageRating: float
    movieCount: int
