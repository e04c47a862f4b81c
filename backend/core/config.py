"""Application configuration and environment variables"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment
ROOT_DIR = Path(__file__).parent.parent
load_dotenv(ROOT_DIR / '.env')


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings"""
    TELEGRAM_BOT_TOKEN: str = os.environ.get('TELEGRAM_BOT_TOKEN', '')
    TELEGRAM_API_URL: str = os.environ.get('TELEGRAM_API_URL', 'https://api.telegram.org')
    TELEGRAM_POLL_TIMEOUT: int = int(os.environ.get('TELEGRAM_POLL_TIMEOUT', '30'))

    MONGO_URI: str = os.environ.get('MONGO_URI', 'mongodb://localhost:27017')
    DB_NAME: str = os.environ.get('DB_NAME', 'health_inquiry_bot')

    OPENAI_API_KEY: str = os.environ.get('OPENAI_API_KEY', '')
    OPENAI_API_URL: str = os.environ.get('OPENAI_API_URL', 'https://api.openai.com/v1')
    OPENAI_MODEL: str = os.environ.get('OPENAI_MODEL', 'gpt-3.5-turbo')
    OPENAI_TIMEOUT: float = float(os.environ.get('OPENAI_TIMEOUT', '30'))
    OPENAI_MAX_RETRIES: int = int(os.environ.get('OPENAI_MAX_RETRIES', '2'))
    LLM_HISTORY_LIMIT: int = int(os.environ.get('LLM_HISTORY_LIMIT', '40'))

    RESUME_SESSIONS: bool = _env_bool('RESUME_SESSIONS', True)
    FALLBACK_REPLY: str = os.environ.get(
        'FALLBACK_REPLY',
        "Sorry, I couldn't come up with a reply just now. Please try again in a moment."
    )

    def missing_secrets(self) -> list:
        """Names of required secrets that are not set"""
        required = ('TELEGRAM_BOT_TOKEN', 'MONGO_URI', 'OPENAI_API_KEY')
        return [name for name in required if not getattr(self, name)]


settings = Settings()
