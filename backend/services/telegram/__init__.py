from .bot import start_telegram_bot, stop_telegram_bot, parse_update
from .sender import send_telegram_message

__all__ = [
    'start_telegram_bot', 'stop_telegram_bot', 'parse_update',
    'send_telegram_message'
]
