"""Report: print movies per year and the best rated countries from the configured database."""

import argparse
import asyncio
import logging
import sys
from typing import TypedDict

from cinestats.config import settings
from cinestats.database import MovieStore, create_client, get_collection
from cinestats.exceptions import CountryNotFound, StoreUnavailable
from cinestats.services.movie_queries import MovieQueries

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


class MoviesReport(TypedDict):
    years: list[dict]
    countries: list[dict]


async def build_report(queries: MovieQueries, country: str | None = None) -> MoviesReport:
    """Run the aggregation queries and collect their results."""
    years = await queries.count_by_release_year()
    countries = await queries.top_countries_by_rating(country)
    return {"years": years, "countries": countries}


def format_report(report: MoviesReport) -> str:
    lines = ["Movies per year", ""]
    for row in report["years"]:
        lines.append(f"  {row['year']}  {row['count']}")
    if not report["years"]:
        lines.append("  (no movies with a valid release date)")

    lines += ["", "Top countries by average rating", ""]
    for row in report["countries"]:
        lines.append(
            f"  {row['country']:<30} {row['averageRating']:.2f}  ({row['movieCount']} movies)"
        )
    if not report["countries"]:
        lines.append("  (no country has enough rated movies)")
    return "\n".join(lines)


async def report(country: str | None) -> bool:
    """Print the report and return True if the queries succeeded."""
    client = create_client()
    try:
        queries = MovieQueries(MovieStore(get_collection(client)))
        result = await build_report(queries, country)
    except CountryNotFound as e:
        print(e.message)
        return False
    except StoreUnavailable as e:
        logger.error(f"Could not read movies from {settings.mongo_collection}: {e.message}")
        return False
    finally:
        await client.close()

    print(format_report(result))
    return True


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print movies per year and the best rated countries."
    )
    parser.add_argument(
        "--country",
        default=None,
        help="Only include countries whose name contains this text",
    )
    args = parser.parse_args()

    ok = asyncio.run(report(args.country))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
