"""Custom exceptions for the application"""


class BotError(Exception):
    """Base class for all bot failures"""


class ConfigMissing(BotError):
    def __init__(self, names):
        self.names = list(names)
        super().__init__(f"Missing required configuration: {', '.join(self.names)}")


class StoreConnectionFailure(BotError):
    def __init__(self, detail: str):
        super().__init__(f"Database unavailable: {detail}")


class StoreWriteFailure(BotError):
    def __init__(self, chat_id: str, detail: str):
        self.chat_id = chat_id
        super().__init__(f"Failed to save conversation {chat_id}: {detail}")


class ModelCallFailure(BotError):
    """Language-model API error or timeout"""


class TransportFailure(BotError):
    """Telegram Bot API request failed"""
