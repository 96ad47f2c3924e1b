from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI

from mushroom_bot.api import webhook
from mushroom_bot.config import get_settings
from mushroom_bot.utils.logging import setup_logging

settings = get_settings()

setup_logging(settings.log_level)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    if not settings.bot_token:
        logger.warning("bot_token_not_configured")
    logger.info("application_startup", port=settings.port)

    yield

    logger.info("application_shutdown")


app = FastAPI(
    title="Mushroom Bot",
    description="Telegram bot that recognises mushrooms in photos and chats via Dialogflow",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(webhook.router, tags=["telegram"])


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Serve the app on the configured host and port."""
    logger.info("listening", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
