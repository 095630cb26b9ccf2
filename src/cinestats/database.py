"""MongoDB connection and movie store access."""

import logging
from typing import Any

from bson.errors import BSONError
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from cinestats.config import Settings, settings
from cinestats.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "movies"

# Driver and document decoding failures both mean the read failed
READ_ERRORS = (PyMongoError, BSONError)


def create_client(config: Settings = settings) -> AsyncMongoClient:
    """
    Create the Mongo client.

    The client connects lazily, so this never blocks on the server.
    """
    return AsyncMongoClient(
        config.mongo_uri,
        serverSelectionTimeoutMS=config.mongo_timeout_ms,
    )


def get_collection(
    client: AsyncMongoClient, config: Settings = settings
) -> AsyncCollection:
    """Resolve the movies collection from the configured database."""
    if config.mongo_db_name:
        db = client[config.mongo_db_name]
    else:
        db = client.get_default_database(default=DEFAULT_DB_NAME)
    return db[config.mongo_collection]


async def check_connection(client: AsyncMongoClient) -> bool:
    """Ping the server and log the outcome."""
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error(f"Error connecting to MongoDB: {e}")
        return False
    logger.info("Connected to MongoDB")
    return True


class MovieStore:
    """Read-only access to the movies collection."""

    def __init__(self, collection: AsyncCollection) -> None:
        self.collection = collection

    async def find(
        self,
        filter: dict[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Run a find query and return every matching document.

        Args:
            filter: Mongo query document (matches everything when omitted)
            sort: List of (field, direction) pairs
            limit: Maximum number of documents

        Returns:
            Matching documents in cursor order

        Raises:
            StoreUnavailable: If the driver fails or a document cannot be decoded
        """
        try:
            cursor = self.collection.find(filter or {})
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=None)
        except READ_ERRORS as e:
            raise StoreUnavailable(str(e)) from e

    async def ping(self) -> bool:
        """Check whether the database answers."""
        try:
            await self.collection.database.command("ping")
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
        return True

    async def aggregate(self, pipeline: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Run an aggregation pipeline and return all result documents."""
        try:
            cursor = await self.collection.aggregate(pipeline)
            return await cursor.to_list(length=None)
        except READ_ERRORS as e:
            raise StoreUnavailable(str(e)) from e


def get_movie_store(request: Request) -> MovieStore:
    """
    Dependency for FastAPI to provide the movie store.

    The store is created in the application lifespan and kept on app state.
    """
    return request.app.state.movie_store
