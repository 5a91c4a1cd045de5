"""FastAPI application factory and configuration.

Hosts the chat page (mounted by the entry point), the health check and the
CSV upload router.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cardchat import __version__
from cardchat.api.routes import router as upload_router
from cardchat.client.config import get_client_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown of the application.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info(f"Starting Card Chat, backend at {get_client_config().api_url}")
    yield
    logger.info("Shutting down Card Chat...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Card Chat",
        description=(
            "Chat client for a credit card recommendation service. "
            "Turns uploaded spending history CSV files into recommendation "
            "requests and relays conversations to the recommendation backend."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(upload_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "cardchat"}

    return application


app = create_app()
