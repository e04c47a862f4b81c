"""Telegram bot polling and management"""
import asyncio
from typing import Optional
from core.config import settings
from core.exceptions import TransportFailure
from core.http_client import get_http_client
from core.logging import logger
from models.events import InboundEvent
from . import state
from .sender import telegram_api_url


def parse_update(update: dict) -> Optional[InboundEvent]:
    """Turn a Telegram update into an inbound event; non-text updates give None"""
    message = update.get('message') or {}
    text = message.get('text')
    chat_id = message.get('chat', {}).get('id')
    if text is None or chat_id is None:
        return None

    chat_id = str(chat_id)
    command = text.strip().split(maxsplit=1)[0] if text.strip() else ""
    if command == "/start" or command.startswith("/start@"):
        return InboundEvent(type="start", chat_id=chat_id)
    return InboundEvent(type="text", chat_id=chat_id, text=text)


async def fetch_updates() -> list:
    """One getUpdates long-poll call"""
    http_client = await get_http_client()
    response = await http_client.get(
        telegram_api_url("getUpdates"),
        params={
            "offset": state.telegram_last_update_id + 1,
            "timeout": settings.TELEGRAM_POLL_TIMEOUT
        },
        timeout=settings.TELEGRAM_POLL_TIMEOUT + 5.0
    )
    if response.status_code != 200:
        raise TransportFailure(f"Telegram API error: {response.status_code}")

    data = response.json()
    if not data.get('ok'):
        raise TransportFailure(f"Telegram API returned error: {data}")
    return data.get('result', [])


async def telegram_polling_loop():
    """Long-polling loop for Telegram updates. Events are handled one at a time."""
    # Import here to avoid circular import
    from services.conversations import handle_event

    while state.telegram_bot_running:
        try:
            for update in await fetch_updates():
                state.telegram_last_update_id = update['update_id']
                event = parse_update(update)
                if event is not None:
                    await handle_event(event)
        except asyncio.CancelledError:
            break
        except TransportFailure as e:
            logger.error(str(e))
            await asyncio.sleep(5)
        except Exception as e:
            logger.error(f"Telegram polling error: {e}")
            await asyncio.sleep(5)


async def start_telegram_bot():
    """Start the Telegram bot polling"""
    if state.telegram_polling_task and not state.telegram_polling_task.done():
        return

    state.telegram_bot_running = True
    state.telegram_polling_task = asyncio.create_task(telegram_polling_loop())
    logger.info("Telegram bot polling started")


async def stop_telegram_bot():
    """Stop the Telegram bot polling"""
    state.telegram_bot_running = False
    if state.telegram_polling_task:
        state.telegram_polling_task.cancel()
        try:
            await state.telegram_polling_task
        except asyncio.CancelledError:
            pass
        state.telegram_polling_task = None
    logger.info("Telegram bot polling stopped")
