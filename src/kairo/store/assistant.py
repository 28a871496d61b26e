"""Assistant slice reducers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..models.assistant import Conversation, Message, MessageRole
from ..services.assistant import SYSTEM_GREETING
from ..utils.datetime_utils import utc_now
from .helpers import remove_by_id, update_by_id
from .state import AssistantState


def create_conversation(
    state: AssistantState, title: str, *, now: Optional[datetime] = None
) -> AssistantState:
    """Start a conversation seeded with the system greeting and make it active."""

    stamp = now or utc_now()
    conversation = Conversation(
        title=title,
        messages=[Message(role=MessageRole.SYSTEM, content=SYSTEM_GREETING, timestamp=stamp)],
        created_at=stamp,
        updated_at=stamp,
    )
    return state.model_copy(
        update={
            "conversations": [*state.conversations, conversation],
            "active_conversation_id": conversation.id,
        }
    )


def set_active_conversation(state: AssistantState, conversation_id: Optional[str]) -> AssistantState:
    return state.model_copy(update={"active_conversation_id": conversation_id})


def add_message(
    state: AssistantState,
    conversation_id: str,
    role: MessageRole,
    content: str,
    *,
    now: Optional[datetime] = None,
) -> AssistantState:
    stamp = now or utc_now()

    def append(conversation: Conversation) -> Conversation:
        message = Message(role=role, content=content, timestamp=stamp)
        return conversation.model_copy(
            update={"messages": [*conversation.messages, message], "updated_at": stamp}
        )

    conversations = update_by_id(state.conversations, conversation_id, append)
    if conversations is state.conversations:
        return state
    return state.model_copy(update={"conversations": conversations})


def add_assistant_response(
    state: AssistantState, conversation_id: str, content: str, *, now: Optional[datetime] = None
) -> AssistantState:
    return add_message(state, conversation_id, MessageRole.ASSISTANT, content, now=now)


def delete_conversation(state: AssistantState, conversation_id: str) -> AssistantState:
    """Remove a conversation; an active one hands over to the first remaining."""

    conversations = remove_by_id(state.conversations, conversation_id)
    if conversations is state.conversations:
        return state
    active = state.active_conversation_id
    if active == conversation_id:
        active = conversations[0].id if conversations else None
    return state.model_copy(
        update={"conversations": conversations, "active_conversation_id": active}
    )


def rename_conversation(
    state: AssistantState, conversation_id: str, title: str, *, now: Optional[datetime] = None
) -> AssistantState:
    stamp = now or utc_now()
    conversations = update_by_id(
        state.conversations,
        conversation_id,
        lambda conversation: conversation.model_copy(update={"title": title, "updated_at": stamp}),
    )
    if conversations is state.conversations:
        return state
    return state.model_copy(update={"conversations": conversations})


def set_loading(state: AssistantState, loading: bool) -> AssistantState:
    return state.model_copy(update={"is_loading": loading})


def set_error(state: AssistantState, error: Optional[str]) -> AssistantState:
    return state.model_copy(update={"error": error})


def set_conversations(state: AssistantState, conversations: list[Conversation]) -> AssistantState:
    return state.model_copy(update={"conversations": list(conversations)})
