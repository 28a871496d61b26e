"""Assistant conversation records."""

from __future__ import annotations

from enum import Enum

from sqlmodel import Field, SQLModel

from ..utils.datetime_utils import utc_now
from ..utils.ids import generate_id
from .fields import Timestamp


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Message(SQLModel):
    id: str = Field(default_factory=generate_id)
    role: MessageRole
    content: str
    timestamp: Timestamp = Field(default_factory=utc_now)


class Conversation(SQLModel):
    id: str = Field(default_factory=generate_id)
    title: str
    messages: list[Message] = Field(default_factory=list)
    created_at: Timestamp = Field(default_factory=utc_now)
    updated_at: Timestamp = Field(default_factory=utc_now)


__all__ = ["Conversation", "Message", "MessageRole"]
