"""Per-chat session handling for inbound Telegram events"""
from core.config import settings
from core.exceptions import ModelCallFailure, StoreWriteFailure
from core.logging import logger
from models.conversation import Session
from models.events import InboundEvent
from services.telegram.sender import send_telegram_message
from . import sequencer
from .script import QUESTIONS
from .state import get_chat_lock, get_session, set_session
from .store import find_conversation, upsert_conversation


async def get_or_create_session(chat_id: str) -> Session:
    """Return the chat's session, rehydrating it from the store on first contact.

    A failed lookup propagates and registers nothing, so a fresh session never
    overwrites a stored conversation; the next event retries the lookup.
    """
    session = get_session(chat_id)
    if session is not None:
        return session

    if settings.RESUME_SESSIONS:
        record = await find_conversation(chat_id)
        if record is not None:
            session = record.to_session()
            session.question_index = min(session.question_index, len(QUESTIONS))
            logger.info(f"Resumed conversation {chat_id} at question {session.question_index}")

    if session is None:
        session = Session(chat_id=chat_id)
    set_session(chat_id, session)
    return session


async def _send_all(chat_id: str, texts):
    for text in texts:
        if not await send_telegram_message(chat_id, text):
            logger.warning(f"Reply to {chat_id} was not delivered")


async def _persist(session: Session) -> bool:
    try:
        await upsert_conversation(session.chat_id, session.transcript, session.question_index)
        return True
    except StoreWriteFailure as e:
        logger.error(str(e))
        return False


async def on_session_start(chat_id: str):
    """Handle /start. A repeated start re-sends the current prompt only."""
    session = await get_or_create_session(chat_id)
    if session.started:
        logger.info(f"Chat {chat_id} already started, repeating current prompt")
        await _send_all(chat_id, sequencer.repeat_prompt(session, QUESTIONS))
        return

    await _send_all(chat_id, sequencer.start(session, QUESTIONS))
    await _persist(session)


async def on_user_message(chat_id: str, text: str):
    """Handle a plain text message, then persist the transcript"""
    session = await get_or_create_session(chat_id)

    if not session.started:
        # Text before /start begins the flow; the text is kept but not taken as an answer
        outgoing = sequencer.start(session, QUESTIONS)
        session.last_user_input = text
        session.append("user", text)
        await _send_all(chat_id, outgoing)
        await _persist(session)
        return

    try:
        try:
            outgoing = await sequencer.advance(session, text, QUESTIONS)
        except ModelCallFailure as e:
            logger.error(f"Model call failed for chat {chat_id}: {e}")
            outgoing = [settings.FALLBACK_REPLY] if settings.FALLBACK_REPLY else []

        await _send_all(chat_id, outgoing)
    finally:
        await _persist(session)


async def handle_event(event: InboundEvent):
    """Top-level entry point for one inbound event; never raises"""
    async with get_chat_lock(event.chat_id):
        try:
            if event.type == "start":
                await on_session_start(event.chat_id)
            else:
                await on_user_message(event.chat_id, event.text or "")
        except Exception as e:
            logger.error(f"Failed to handle {event.type} event for chat {event.chat_id}: {e}", exc_info=True)
