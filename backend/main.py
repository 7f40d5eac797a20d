from contextlib import asynccontextmanager
from typing import Optional
import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api import contacts
from config.app_config import AppConfig, load_config
from constants import REQUEST_ID_HEADER, SERVICE_NAME, SERVICE_VERSION
from database import build_engine, build_session_factory
from init_db import init_database
from models import build_contact_table
from utils.error_handlers import register_exception_handlers
from utils.logging_utils import clear_logging_context, configure_logging, set_logging_context

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the Contact Manager application.

    The engine, session factory and contact table are created here and
    stored on ``app.state`` for the dependency providers. The table itself
    is created on startup.

    Args:
        config: Configuration to use (loaded from the environment if omitted)

    Returns:
        Configured FastAPI application
    """
    config = config or load_config()
    configure_logging(config)

    engine = build_engine(config.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Contact Manager API...")
        init_database(engine, config.table_name)
        yield
        logger.info("Shutting down Contact Manager API...")
        engine.dispose()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=SERVICE_NAME,
        description="Registers contacts (name and email) in a key-value store",
        version=SERVICE_VERSION,
        lifespan=lifespan
    )

    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.contact_table = build_contact_table(config.table_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=600,
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Tag every log line of a request with its request id."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        set_logging_context(request_id=request_id, route=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_logging_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    register_exception_handlers(app)

    app.include_router(contacts.router, tags=["contacts"])

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION
        }

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
