"""Response items shared by conversation use cases."""

from datetime import datetime

from pydantic import BaseModel

from breakloop.domain.model import PrivateConversation, PrivateMessage


class MessageItem(BaseModel):
    """Message in response."""

    message_id: str
    sender_id: str
    sender_name: str
    text: str
    created_at: datetime

    @classmethod
    def from_domain(cls, message: PrivateMessage) -> "MessageItem":
        return cls(
            message_id=message.id,
            sender_id=message.sender_id,
            sender_name=message.sender_name,
            text=message.text,
            created_at=message.created_at,
        )


class ConversationDetail(BaseModel):
    """Conversation with its full message history."""

    conversation_id: str
    participant_ids: list[str]
    messages: list[MessageItem]
    created_at: datetime
    last_message_at: datetime | None
    last_read_at: datetime | None

    @classmethod
    def from_domain(cls, conversation: PrivateConversation) -> "ConversationDetail":
        return cls(
            conversation_id=conversation.id,
            participant_ids=list(conversation.participant_ids),
            messages=[MessageItem.from_domain(msg) for msg in conversation.messages],
            created_at=conversation.created_at,
            last_message_at=conversation.last_message_at,
            last_read_at=conversation.last_read_at,
        )
