"""
Pastes API - Main FastAPI application.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import PasteStore
from app.errors import register_error_handlers
from app.middleware import RequestLoggingMiddleware
from app.routes import pastes
from app.seed_data import PASTES

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info("Pastes API starting...")
    logger.info(f"In-memory store holds {app.state.store.count} pastes; nothing persists across restarts")
    yield
    logger.info("Pastes API shutting down...")


def create_app(store: Optional[PasteStore] = None) -> FastAPI:
    """
    Build the application around a paste store.

    Args:
        store: Store to serve; a freshly seeded one when omitted

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Pastes API",
        description="Create, list and fetch text pastes held in memory",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else PasteStore(PASTES)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(pastes.router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
