"""Inbound chat event model"""
from pydantic import BaseModel
from typing import Literal, Optional


class InboundEvent(BaseModel):
    type: Literal["start", "text"]
    chat_id: str
    text: Optional[str] = None
