"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from cinestats.api.errors import add_exception_handlers
from cinestats.api.routes import health, movies
from cinestats.config import settings
from cinestats.database import MovieStore, check_connection, create_client, get_collection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: the client connects lazily, requests are served right away
    client = create_client()
    app.state.movie_store = MovieStore(get_collection(client))

    # Report connection status in the background
    connection_check = asyncio.create_task(check_connection(client))
    logger.info("MongoDB connection check triggered in background")

    yield

    # Shutdown
    connection_check.cancel()
    await client.close()
    logger.info("MongoDB client closed")


# Create FastAPI app
app = FastAPI(
    title="CineStats API",
    description="Read-only statistics over a movies collection",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "CineStats API is running"


def run() -> None:
    """Start the API server on the configured host and port."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info(f"Server is running on port {settings.port}")
    uvicorn.run(app, host=settings.api_host, port=settings.port)


if __name__ == "__main__":
    run()
