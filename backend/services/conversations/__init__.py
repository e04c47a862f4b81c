from .controller import handle_event, on_session_start, on_user_message
from .store import upsert_conversation, find_conversation
from .state import conversation_sessions

__all__ = [
    'handle_event', 'on_session_start', 'on_user_message',
    'upsert_conversation', 'find_conversation',
    'conversation_sessions'
]
