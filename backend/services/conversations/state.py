"""In-memory session registry"""
import asyncio
from models.conversation import Session

conversation_sessions = {}  # {chat_id: Session}
_chat_locks = {}  # {chat_id: asyncio.Lock}


def get_session(chat_id: str) -> Session:
    """Get session for chat"""
    return conversation_sessions.get(chat_id)


def set_session(chat_id: str, session: Session):
    """Register session for chat"""
    conversation_sessions[chat_id] = session


def get_chat_lock(chat_id: str) -> asyncio.Lock:
    """Lock serializing event handling for one chat"""
    lock = _chat_locks.get(chat_id)
    if lock is None:
        lock = _chat_locks[chat_id] = asyncio.Lock()
    return lock


def clear_sessions():
    """Drop every session and lock"""
    conversation_sessions.clear()
    _chat_locks.clear()
