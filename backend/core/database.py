"""MongoDB database connection management"""
import asyncio
from motor.motor_asyncio import AsyncIOMotorClient
from .config import settings
from .exceptions import StoreConnectionFailure
from .logging import logger

# MongoDB connection globals
client = None
db = None
_db_lock = asyncio.Lock()


async def _connect():
    global client, db
    client = AsyncIOMotorClient(settings.MONGO_URI, serverSelectionTimeoutMS=5000)
    await client.admin.command('ping')
    db = client[settings.DB_NAME]
    logger.info(f"Connected to MongoDB database: {settings.DB_NAME}")


async def get_database():
    """Get or create database connection with locking"""
    async with _db_lock:
        if db is None:
            try:
                await _connect()
            except Exception as e:
                logger.error(f"MongoDB connection failed: {e}")
                raise StoreConnectionFailure(str(e)) from e
    return db


async def init_database():
    """Connect at startup and verify indexes. Failure is fatal."""
    async with _db_lock:
        try:
            await _connect()
            await db.conversations.create_index("chatId", unique=True)
            logger.info("Database indexes created/verified")
        except Exception as e:
            logger.error(f"MongoDB not available at startup: {e}")
            raise StoreConnectionFailure(str(e)) from e
    return db


def close_database():
    """Close database connection"""
    global client, db
    if client:
        client.close()
        client = None
        db = None
        logger.info("Database connection closed")
