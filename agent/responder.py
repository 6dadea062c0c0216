"""
Responder

Turns one inbound message into one outbound reply:
    completion backend → OutboundEvent(Response) → sender

Propagates failures from either dependency. No retries.
"""

import logging

from inference import CompletionBackend
from transport.messenger.schemas import Message, MessagingType, OutboundEvent, Participant
from transport.messenger.sender import MessengerSender

logger = logging.getLogger(__name__)


class Responder:
    def __init__(self, completion: CompletionBackend, sender: MessengerSender):
        self.completion = completion
        self.sender = sender

    async def respond(self, recipient_id: str, incoming: Message) -> OutboundEvent:
        """
        Generate a reply to `incoming` and send it to `recipient_id`.

        Returns:
            The OutboundEvent that was delivered to the send API
        """
        reply_text = await self.completion.complete(incoming.text)

        event = OutboundEvent(
            recipient=Participant(id=recipient_id),
            messaging_type=MessagingType.RESPONSE,
            message=Message(text=reply_text),
        )
        await self.sender.send(event)

        logger.debug(
            "Reply relayed",
            extra={"recipient_id": recipient_id, "output_length": len(reply_text)},
        )
        return event
