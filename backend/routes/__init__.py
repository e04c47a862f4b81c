from fastapi import APIRouter
from .health import router as health_router
from .telegram import router as telegram_router
from .conversations import router as conversations_router

# Create the main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(health_router, tags=["Health"])
api_router.include_router(telegram_router, tags=["Telegram"])
api_router.include_router(conversations_router, tags=["Conversations"])

__all__ = ['api_router']
