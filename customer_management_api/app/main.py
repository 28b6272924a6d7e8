"""
Main entrypoint for the Customer Management API.

This module assembles the FastAPI application, sets up logging, picks
the customer store and installs the error handlers.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app``, e.g.::

    uvicorn customer_management_api.app.main:app --reload

Tests call ``create_app`` with their own store instance so every test
works against a fresh database.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import CustomerStore, create_store
from .core.exceptions import InvalidArgumentError
from .core.logging_config import setup_logging
from .api.router import router as api_router

logger = logging.getLogger(__name__)


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Invalid payloads are a client error; answer 400 rather than FastAPI's 422.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after sending this response, so the
    # server logs the traceback; only the JSON body is produced here.
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(store: Optional[CustomerStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[CustomerStore]
        Store backing the API.  When omitted the store selected by
        ``settings.database_provider`` is created.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that store selection below can log.
    setup_logging(settings)

    if store is None:
        store = create_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store.init_schema()
        logger.info("Using %s", type(app.state.store).__name__)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        """Liveness probe."""
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
