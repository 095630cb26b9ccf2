"""Errors raised by the movie store and query layer."""


class StoreUnavailable(Exception):
    """Reading from the movie store failed (connection, query or timeout)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CountryNotFound(Exception):
    """A country filter matched no country with enough rated movies."""

    def __init__(self, country: str, min_movies: int = 10) -> None:
        self.country = country
        self.message = (
            f'Country "{country}" not found or has fewer than {min_movies} movies.'
        )
        super().__init__(self.message)
