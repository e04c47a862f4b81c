"""Tests for the MongoDB conversation store."""

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from core.exceptions import StoreWriteFailure
from models.conversation import Turn
from services.conversations.store import find_conversation, upsert_conversation

TRANSCRIPT = [
    Turn(role="system", content="Start health insurance inquiry."),
    Turn(role="user", content="yes"),
]


@pytest.mark.asyncio
async def test_upsert_twice_leaves_one_record(fake_db):
    await upsert_conversation("7", TRANSCRIPT, 1)
    await upsert_conversation("7", TRANSCRIPT, 1)

    docs = fake_db.conversations.docs
    assert len(docs) == 1
    assert docs[0]["chatId"] == "7"
    assert docs[0]["transcript"] == [t.model_dump() for t in TRANSCRIPT]
    assert docs[0]["questionIndex"] == 1


@pytest.mark.asyncio
async def test_upsert_replaces_transcript(fake_db):
    await upsert_conversation("7", TRANSCRIPT[:1], 0)
    record = await upsert_conversation("7", TRANSCRIPT, 1)

    assert len(fake_db.conversations.docs) == 1
    assert fake_db.conversations.docs[0]["transcript"][-1] == {"role": "user", "content": "yes"}
    assert record.transcript == TRANSCRIPT
    fake_db.conversations.update_one.assert_awaited_with(
        {"chatId": "7"},
        {"$set": {
            "transcript": [t.model_dump() for t in TRANSCRIPT],
            "questionIndex": 1,
            "updatedAt": record.updated_at,
        }},
        upsert=True
    )


@pytest.mark.asyncio
async def test_find_conversation_round_trip(fake_db):
    await upsert_conversation("7", TRANSCRIPT, 1)

    record = await find_conversation("7")
    assert record.chat_id == "7"
    assert record.transcript == TRANSCRIPT
    assert record.question_index == 1

    session = record.to_session()
    assert session.started is True
    assert session.transcript == TRANSCRIPT


@pytest.mark.asyncio
async def test_find_missing_conversation(fake_db):
    assert await find_conversation("nobody") is None


@pytest.mark.asyncio
async def test_driver_error_becomes_store_write_failure(fake_db):
    fake_db.conversations.update_one.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StoreWriteFailure) as excinfo:
        await upsert_conversation("7", TRANSCRIPT, 1)
    assert excinfo.value.chat_id == "7"
    assert "no servers" in str(excinfo.value)
