"""Conversation lookup routes"""
from fastapi import APIRouter, HTTPException
from pymongo.errors import PyMongoError
from core.exceptions import StoreConnectionFailure
from services.conversations import find_conversation

router = APIRouter(prefix="/conversations")


@router.get("/{chat_id}")
async def get_conversation(chat_id: str):
    """Return the stored transcript for a chat"""
    try:
        record = await find_conversation(chat_id)
    except (StoreConnectionFailure, PyMongoError) as e:
        raise HTTPException(status_code=503, detail=f"Database unavailable: {e}")
    if record is None:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return record.model_dump(mode="json", by_alias=True)
