"""
Health Inquiry Bot - Telegram questionnaire with language-model follow-up
Main entry point - startup/shutdown wiring
"""
import sys
from pathlib import Path

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from fastapi import FastAPI

# Core imports
from core.config import settings
from core.database import init_database, close_database
from core.exceptions import ConfigMissing
from core.http_client import close_http_client
from core.logging import logger

# Routes
from routes import api_router

# Services
from services.telegram import start_telegram_bot, stop_telegram_bot

# Create the main app
app = FastAPI(title="Health Inquiry Bot API")
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - service info"""
    return {
        "service": "Health Inquiry Bot API",
        "status": "running",
        "docs": "/docs",
        "health": "/api/health"
    }


@app.on_event("startup")
async def startup():
    """Validate config, connect MongoDB, start polling. Any failure aborts startup."""
    logger.info("Starting Health Inquiry Bot...")

    missing = settings.missing_secrets()
    if missing:
        error = ConfigMissing(missing)
        logger.error(str(error))
        raise error

    await init_database()
    await start_telegram_bot()

    logger.info("Health Inquiry Bot started successfully")


@app.on_event("shutdown")
async def shutdown():
    """Runs on SIGINT/SIGTERM via uvicorn"""
    logger.info("Shutting down...")
    await stop_telegram_bot()
    await close_http_client()
    close_database()
    logger.info("Server shutdown complete")


if __name__ == "__main__":
    import os
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8001")))
