"""Application factory and startup/shutdown wiring."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from contacts_api.core.config import Settings, get_settings
from contacts_api.db.session import Database
from contacts_api.repositories.sql_repository import ContactRepository
from contacts_api.routers import contacts as contacts_router

logger = logging.getLogger(__name__)

_FAILURE_MESSAGES = {
    "POST": "Failed to create contact",
    "GET": "Failed to get contact",
    "PUT": "Failed to update contact",
    "DELETE": "Failed to delete contact",
}


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable requests (e.g. malformed JSON) fall into the generic failure tier."""
    logger.error("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    message = _FAILURE_MESSAGES.get(request.method, "Request failed")
    return JSONResponse({"error": message}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn and TestClient."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # any failure here aborts startup; the listener never binds
        database = Database(settings.database_url)
        database.connect()
        logger.info("Database connected")
        if settings.create_tables:
            database.create_all()
        app.state.repository = ContactRepository(database)
        logger.info("Server is running on port %s", settings.port)
        try:
            yield
        finally:
            app.state.repository = None
            database.dispose()
            logger.info("Database connection closed")

    app = FastAPI(title="Contacts API", lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.include_router(contacts_router.router)
    return app


app = create_app()
