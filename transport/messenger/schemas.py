"""
Messenger Transport Layer - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Defines the inbound webhook payload and the outbound send API body.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

MAX_TIMESTAMP_MS = 2**53


# ============================================================================
# SHARED
# ============================================================================

class Participant(BaseModel):
    """Page-scoped id of a sender or recipient."""
    id: str

    class Config:
        frozen = True
        extra = "ignore"


class Message(BaseModel):
    """Message body shared by inbound and outbound events."""
    mid: Optional[str] = Field(None, description="Platform message id")
    text: str

    class Config:
        frozen = True
        extra = "ignore"


# ============================================================================
# WEBHOOK PAYLOAD (INPUT)
# ============================================================================

class MessagingEvent(BaseModel):
    """
    One inbound messaging item.

    timestamp is milliseconds since epoch when present; it is bounded to
    integers a float represents exactly.
    """
    sender: Participant
    recipient: Participant
    timestamp: Optional[int] = Field(None, ge=0, le=MAX_TIMESTAMP_MS)
    message: Message

    class Config:
        frozen = True
        extra = "ignore"


class Entry(BaseModel):
    """Webhook entry; only the messaging list is used."""
    id: Optional[str] = None
    time: Optional[int] = None
    messaging: list[MessagingEvent]

    class Config:
        extra = "allow"  # Platform may add fields


class WebhookPayload(BaseModel):
    """
    Full webhook payload.

    ref: https://developers.facebook.com/docs/messenger-platform/webhooks
    """
    object: Optional[str] = Field(None, description="Usually 'page'")
    entry: list[Entry]

    class Config:
        extra = "allow"


# ============================================================================
# SEND API BODY (OUTPUT)
# ============================================================================

class MessagingType(str, Enum):
    RESPONSE = "Response"
    UPDATE = "Update"


class OutboundEvent(BaseModel):
    """Body posted to the send API."""
    recipient: Participant
    messaging_type: MessagingType
    message: Message

    def to_payload(self) -> dict:
        """JSON-ready body; mid is dropped when absent."""
        return self.model_dump(mode="json", exclude_none=True)
