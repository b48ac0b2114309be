"""Send private message use case."""

from pydantic import BaseModel, Field

from breakloop.application.usecase.base import BaseUseCase
from breakloop.application.usecase.conversation.common import MessageItem
from breakloop.domain.error import BusinessRuleViolationError
from breakloop.domain.service import ConversationService
from breakloop.domain.value import UserId


class SendMessageRequest(BaseModel):
    """Send message request."""

    sender_id: str
    sender_name: str
    recipient_id: str
    text: str = Field(min_length=1)


class SendMessageResponse(BaseModel):
    """Send message response.

    ``message`` is None when the message could not be stored.
    """

    conversation_id: str
    message: MessageItem | None
    message_count: int


class SendMessageUseCase(BaseUseCase):
    """Use case for sending a one-to-one message.

    The conversation is created on first contact.
    """

    def __init__(self, conversation_service: ConversationService) -> None:
        """Initialize send message use case.

        Args:
            conversation_service: Conversation domain service
        """
        self.conversation_service = conversation_service

    async def execute(self, request: SendMessageRequest) -> SendMessageResponse:
        """Append the message to the pair's conversation.

        Args:
            request: Send message request

        Returns:
            The stored message and the conversation size

        Raises:
            BusinessRuleViolationError: If a user messages themselves
        """
        sender_id = UserId(request.sender_id)
        recipient_id = UserId(request.recipient_id)
        if sender_id == recipient_id:
            raise BusinessRuleViolationError("Cannot send a message to yourself")

        conversation = await self.conversation_service.get_or_create_conversation(
            sender_id, recipient_id
        )
        updated = await self.conversation_service.add_message_to_conversation(
            conversation.id, sender_id, request.sender_name, request.text
        )

        if updated is None or updated.last_message is None:
            return SendMessageResponse(
                conversation_id=conversation.id,
                message=None,
                message_count=len(conversation.messages),
            )

        return SendMessageResponse(
            conversation_id=updated.id,
            message=MessageItem.from_domain(updated.last_message),
            message_count=len(updated.messages),
        )
