from .config import settings, ROOT_DIR
from .database import get_database, init_database, close_database
from .logging import logger

__all__ = [
    'settings', 'ROOT_DIR',
    'get_database', 'init_database', 'close_database',
    'logger'
]
