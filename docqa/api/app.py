"""FastAPI application factory and configuration.

Application with lifespan management, middleware, and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docqa import __version__
from docqa.api.documents import router as documents_router
from docqa.api.qa import router as qa_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application startup and shutdown."""
    logger.info("Starting Document Q&A API...")
    yield
    logger.info("Shutting down Document Q&A API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Document Q&A API",
        description=(
            "Answers questions strictly from a user-supplied document. "
            "Extracts text from .txt, .md and .pdf uploads and returns "
            "answers together with the supporting excerpts."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(documents_router)
    application.include_router(qa_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "docqa"}

    return application


app = create_app()
