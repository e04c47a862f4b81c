"""
Shared test fixtures for the Health Inquiry Bot.

- Environment setup (dummy secrets, set before application imports)
- In-memory stand-in for the MongoDB ``conversations`` collection
- Session registry reset between tests
- Patched Telegram sender and language-model call
"""

import copy
import os
from unittest.mock import AsyncMock, patch

import pytest

# ---------------------------------------------------------------------------
# 1. Environment setup -- must run before any application imports
# ---------------------------------------------------------------------------

os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:test-token")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("OPENAI_API_KEY", "sk-test")

from services.conversations.state import clear_sessions  # noqa: E402


# ---------------------------------------------------------------------------
# 2. Fake MongoDB collection
# ---------------------------------------------------------------------------

class FakeCollection:
    """Just enough of a motor collection for the conversation store"""

    def __init__(self):
        self.docs = []
        self.update_one = AsyncMock(side_effect=self._update_one)
        self.find_one = AsyncMock(side_effect=self._find_one)
        self.create_index = AsyncMock()

    def _match(self, query):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                return doc
        return None

    async def _update_one(self, query, update, upsert=False):
        doc = self._match(query)
        if doc is None:
            if not upsert:
                return None
            doc = {"_id": len(self.docs) + 1, **query}
            self.docs.append(doc)
        doc.update(copy.deepcopy(update.get("$set", {})))

    async def _find_one(self, query, projection=None):
        doc = self._match(query)
        if doc is None:
            return None
        result = copy.deepcopy(doc)
        if projection and projection.get("_id") == 0:
            result.pop("_id", None)
        return result


class FakeDatabase:
    def __init__(self):
        self.conversations = FakeCollection()
        self.command = AsyncMock(return_value={"ok": 1})


@pytest.fixture
def fake_db():
    """Route the conversation store to an in-memory collection"""
    database = FakeDatabase()
    with patch("services.conversations.store.get_database", AsyncMock(return_value=database)):
        yield database


# ---------------------------------------------------------------------------
# 3. Collaborators
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_sessions():
    clear_sessions()
    yield
    clear_sessions()


@pytest.fixture
def sent():
    """Capture outgoing Telegram messages as (chat_id, text) pairs"""
    messages = []

    async def fake_send(chat_id, text):
        messages.append((chat_id, text))
        return True

    with patch("services.conversations.controller.send_telegram_message", AsyncMock(side_effect=fake_send)):
        yield messages


@pytest.fixture
def model():
    """Patch the language-model call; records a snapshot of each transcript it sees"""
    calls = []

    async def fake_complete(transcript, latest_input):
        calls.append(([(t.role, t.content) for t in transcript], latest_input))
        return f"model reply {len(calls)}"

    mock = AsyncMock(side_effect=fake_complete)
    mock.snapshots = calls
    with patch("services.conversations.sequencer.complete", mock):
        yield mock
