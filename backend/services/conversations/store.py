"""Conversation persistence in MongoDB, one document per chat"""
from typing import List, Optional
from pymongo.errors import PyMongoError
from core.database import get_database
from core.exceptions import StoreConnectionFailure, StoreWriteFailure
from models.conversation import ConversationRecord, Turn
from utils.datetime_utils import now_utc


async def upsert_conversation(chat_id: str, transcript: List[Turn], question_index: int = 0) -> ConversationRecord:
    """Create or replace the stored conversation for a chat.

    Keyed by ``chatId`` with ``upsert=True``, so repeated saves never create a
    second document for the same chat.
    """
    record = ConversationRecord(
        chat_id=chat_id,
        transcript=list(transcript),
        question_index=question_index,
        updated_at=now_utc(),
    )
    doc = record.model_dump(by_alias=True)
    try:
        database = await get_database()
        await database.conversations.update_one(
            {"chatId": chat_id},
            {"$set": {
                "transcript": doc["transcript"],
                "questionIndex": doc["questionIndex"],
                "updatedAt": doc["updatedAt"],
            }},
            upsert=True
        )
    except (PyMongoError, StoreConnectionFailure) as e:
        raise StoreWriteFailure(chat_id, str(e)) from e
    return record


async def find_conversation(chat_id: str) -> Optional[ConversationRecord]:
    """Load the stored conversation for a chat, or None"""
    database = await get_database()
    doc = await database.conversations.find_one({"chatId": chat_id}, {"_id": 0})
    if not doc:
        return None
    return ConversationRecord.model_validate(doc)
