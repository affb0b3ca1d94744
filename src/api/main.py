"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures error handlers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.smtp import build_mail_transport
from src.api.errors import install_error_handlers
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "CutLine verification mailer v1 - Send one-time verification codes by email",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Creates the process-wide mail transport on startup. The transport
    lives as long as the process; nothing is torn down on shutdown.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    logger.info("Starting application...")
    app.state.mail_transport = build_mail_transport(settings)
    logger.info("Mail transport ready: %s", settings.mail_transport)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="cutline-mailer",
    description="CutLine verification mailer - Relays one-time verification codes by email",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

install_error_handlers(app)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint. Returns 200 OK while the application is up."""
    return {"status": "healthy"}
