# Load environment variables before settings are read
from dotenv import load_dotenv
import os
import logging
from typing import Optional
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), '../.env'))

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from .config.settings import settings
from .core.errors import KvdbError
from .routers import kv
from .services.store import KeyValueStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting %s", settings.app_name)
    yield
    entries = await app.state.store.get_all()
    logger.info("Stopping %s (%d entries discarded)", settings.app_name, len(entries))


async def kvdb_error_handler(request: Request, exc: KvdbError) -> PlainTextResponse:
    """Send request errors back as their literal plain-text message."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(store: Optional[KeyValueStore] = None) -> FastAPI:
    """
    Build the application around a store.

    Args:
        store: Store shared by all requests; a new empty one when omitted

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f"{settings.app_name} API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else KeyValueStore()
    app.add_exception_handler(KvdbError, kvdb_error_handler)

    # Registered before the catch-all form route
    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(kv.router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the module-level app with uvicorn."""
    configure_logging(settings.log_level)
    logger.info("Listening on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
