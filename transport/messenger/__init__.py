"""
Messenger Transport Layer - Module Exports

The router lives in transport.messenger.webhook and is imported by main
directly; it depends on the agent layer, these modules do not.
"""

from .schemas import (
    Entry,
    Message,
    MessagingEvent,
    MessagingType,
    OutboundEvent,
    Participant,
    WebhookPayload,
)
from .normalize import decode_body, extract_event, extract_sender_id
from .policy import AckPolicy
from .security import verify_webhook_challenge
from .sender import MessengerSender

__all__ = [
    # Schemas
    "Entry",
    "Message",
    "MessagingEvent",
    "MessagingType",
    "OutboundEvent",
    "Participant",
    "WebhookPayload",
    # Normalization
    "decode_body",
    "extract_event",
    "extract_sender_id",
    # Policy
    "AckPolicy",
    # Security
    "verify_webhook_challenge",
    # Sender
    "MessengerSender",
]
