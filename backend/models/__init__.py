from .conversation import Turn, Session, ConversationRecord
from .events import InboundEvent

__all__ = ['Turn', 'Session', 'ConversationRecord', 'InboundEvent']
