"""FastAPI application factory / entrypoint.

This service exposes the phonebook HTTP API:
- listing, fetching, creating and deleting contacts (`/api/persons`)
- a summary page (`/api/info`)
- a health check (`/health`)

It also serves the prebuilt frontend bundle from `STATIC_DIR` when present.

Run locally with either:

    phonebook-api
    uvicorn --factory services.phonebook.app.main:create_app

Operational notes:
- CORS is open to every origin.
- The database handle is built once in `create_app` and shared by all requests.
"""

import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from common.logging import configure_logging

from .db import build_store
from .errors import ConfigError, PhonebookError, StorageError
from .middleware import log_requests
from .routes import router
from .routes.persons import MISSING_FIELDS_ERROR
from .settings import Settings, load_settings
from .store import ContactStore

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: ContactStore | None = None) -> FastAPI:
    """Build the phonebook application.

    Args:
        settings: Service settings. Loaded from the environment when omitted.
        store: Contact store to serve. Built from `settings.database_url` when
            omitted.

    Returns:
        FastAPI: Configured application.

    Raises:
        ConfigError: If settings are omitted and the environment lacks
            `DATABASE_URL`.
    """
    if settings is None:
        settings = load_settings()
    if store is None:
        store = build_store(settings.database_url)

    app = FastAPI(title="Phonebook API", version="0.1.0")
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    @app.exception_handler(PhonebookError)
    async def phonebook_error_handler(request: Request, exc: PhonebookError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        # Contact creation answers any unusable body with its own 400 payload.
        if request.method == "POST" and request.url.path == "/api/persons":
            return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})
        return await request_validation_exception_handler(request, exc)

    app.include_router(router)

    @app.get("/health")
    def health():
        """Health check endpoint.

        Returns:
            dict: `{"status": "ok", "service": "phonebook"}`.
        """
        return {"status": "ok", "service": "phonebook"}

    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning("static directory %s not found; frontend will not be served", settings.static_dir)

    return app


def main() -> int:
    """Load settings, build the app and serve it with uvicorn.

    Returns:
        int: Process exit code; 1 when configuration is incomplete or the
        database cannot be opened.
    """
    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging("phonebook")
        logger.error("cannot start: %s", exc)
        return 1

    configure_logging("phonebook", settings.log_level)
    try:
        app = create_app(settings)
    except StorageError as exc:
        logger.error("cannot open database: %s", exc)
        return 1
    logger.info("server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
