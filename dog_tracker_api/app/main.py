"""
Main entrypoint for the Dog Tracker API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn dog_tracker_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.db import StoreError, init_db
from .core.logging_config import setup_logging
from .core.templating import templates

logger = logging.getLogger(__name__)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Echo a store failure back to the client as HTTP 500."""
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"err": str(exc)})


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render the 404 page for unknown paths; defer other errors to FastAPI."""
    if exc.status_code != 404:
        return await http_exception_handler(request, exc)
    return templates.TemplateResponse(
        request,
        "notFound.html",
        {"page": request.url.path},
        status_code=404,
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the startup
    # hook below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(router)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    @app.on_event("startup")
    async def startup_event() -> None:
        version = init_db()
        logger.info("Dog store ready at schema version %s", version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
