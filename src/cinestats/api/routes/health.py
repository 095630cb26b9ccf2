"""Health check endpoint."""

from fastapi import APIRouter, Depends

from cinestats.database import MovieStore, get_movie_store

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(store: MovieStore = Depends(get_movie_store)) -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        API status and whether the movie database answers a ping
    """
    database = "ok" if await store.ping() else "unavailable"
    return {"status": "ok", "database": database}
