"""Health check routes"""
from fastapi import APIRouter
from core.database import get_database
from services.conversations.state import conversation_sessions
from services.telegram import state as telegram_state

router = APIRouter()


@router.get("/")
async def root():
    """API root - health check"""
    return {"message": "Health Inquiry Bot API", "status": "running"}


@router.get("/health")
async def health_check():
    """Detailed health check"""
    health = {
        "status": "healthy",
        "api": True,
        "database": False,
        "telegram_polling": telegram_state.telegram_bot_running,
        "active_sessions": len(conversation_sessions)
    }

    try:
        database = await get_database()
        await database.command('ping')
        health["database"] = True
    except Exception as e:
        health["status"] = "degraded"
        health["database_error"] = str(e)

    if not health["telegram_polling"]:
        health["status"] = "degraded"

    return health
