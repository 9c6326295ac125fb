"""FastAPI app hosting the Arix chat page and its document routes.

The shared Gemini client is closed when the app shuts down.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from arix import __version__
from arix.api.routes import router as documents_router
from arix.client.gemini import close_completion_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    logger.info("Arix chat API ready")
    yield
    logger.info("Closing completion client")
    await close_completion_client()


def create_app() -> FastAPI:
    """Build the app with CORS, the documents router and a health check."""
    application = FastAPI(
        title="Arix Chat API",
        description=(
            "Backend for the Arix chat page. Extracts text from PDF documents "
            "for use as conversation context."
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

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "arix-chat"}

    return application


app = create_app()
