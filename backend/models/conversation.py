"""Conversation models"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Literal, Optional
from datetime import datetime
from utils.datetime_utils import now_utc


class Turn(BaseModel):
    """One role-tagged message. Frozen once appended to a transcript."""
    model_config = ConfigDict(frozen=True, extra="ignore")
    role: Literal["system", "user", "assistant"]
    content: str


class Session(BaseModel):
    """In-memory conversation state for a single chat"""
    chat_id: str
    transcript: List[Turn] = Field(default_factory=list)
    question_index: int = 0
    started: bool = False
    last_user_input: Optional[str] = None
    last_model_reply: Optional[str] = None

    def append(self, role: str, content: str) -> Turn:
        turn = Turn(role=role, content=content)
        self.transcript.append(turn)
        return turn


class ConversationRecord(BaseModel):
    """Persisted conversation document, one per chatId"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    chat_id: str = Field(alias="chatId")
    transcript: List[Turn] = Field(default_factory=list)
    question_index: int = Field(default=0, alias="questionIndex")
    updated_at: datetime = Field(default_factory=now_utc, alias="updatedAt")

    def to_session(self) -> Session:
        return Session(
            chat_id=self.chat_id,
            transcript=list(self.transcript),
            question_index=self.question_index,
            started=bool(self.transcript),
        )
