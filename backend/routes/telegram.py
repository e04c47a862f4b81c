"""Telegram routes"""
from fastapi import APIRouter
from core.config import settings
from core.http_client import get_http_client
from services.telegram import state as telegram_state
from services.telegram.sender import telegram_api_url

router = APIRouter(prefix="/telegram")


@router.get("/status")
async def get_telegram_status():
    """Get Telegram bot status"""
    return {
        "has_token": bool(settings.TELEGRAM_BOT_TOKEN),
        "polling_active": telegram_state.telegram_bot_running,
        "last_update_id": telegram_state.telegram_last_update_id
    }


@router.get("/me")
async def get_bot_identity():
    """Check the bot token against Telegram's getMe"""
    try:
        http_client = await get_http_client()
        response = await http_client.get(telegram_api_url("getMe"), timeout=10.0)
        data = response.json()
    except Exception as e:
        return {"success": False, "error": str(e)}

    if not data.get('ok'):
        return {"success": False, "error": data.get('description', 'Unknown error')}
    bot_info = data.get('result', {})
    return {
        "success": True,
        "bot_name": bot_info.get('first_name'),
        "bot_username": bot_info.get('username')
    }
