"""Telegram message sending functionality"""
from typing import List
from core.config import settings
from core.http_client import get_http_client
from core.logging import logger

# Bot API limit for the text of one sendMessage call
MAX_MESSAGE_LENGTH = 4096


def telegram_api_url(method: str) -> str:
    return f"{settings.TELEGRAM_API_URL}/bot{settings.TELEGRAM_BOT_TOKEN}/{method}"


def split_message(text: str, limit: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """Split text into chunks within the limit, preferring line breaks then spaces"""
    chunks = []
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit)
        if cut <= 0:
            cut = text.rfind(" ", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(text[:cut])
        text = text[cut:].lstrip("\n ")
    if text:
        chunks.append(text)
    return chunks


async def send_telegram_message(chat_id: str, text: str) -> bool:
    """Send a plain-text message via the Telegram bot, split into several
    messages when it exceeds Telegram's length limit. Failures are logged, not raised."""
    if not chat_id:
        return False
    if not text or not text.strip():
        logger.warning(f"Refusing to send empty message to {chat_id}")
        return False
    try:
        http_client = await get_http_client()
        for chunk in split_message(text):
            response = await http_client.post(
                telegram_api_url("sendMessage"),
                json={"chat_id": chat_id, "text": chunk},
                timeout=10.0
            )
            if response.status_code != 200:
                logger.error(f"Telegram send error {response.status_code}: {response.text[:200]}")
                return False
        return True
    except Exception as e:
        logger.error(f"Telegram send error: {e}")
        return False
