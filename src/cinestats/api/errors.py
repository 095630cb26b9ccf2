"""Map query errors to JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cinestats.exceptions import CountryNotFound, StoreUnavailable

logger = logging.getLogger(__name__)


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=500, content={"message": exc.message})


async def country_not_found_handler(request: Request, exc: CountryNotFound) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": exc.message})


def add_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on an application."""
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(CountryNotFound, country_not_found_handler)
