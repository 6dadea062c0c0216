"""
Messenger Input Normalization

PURE CONVERSION - NO LOGIC, NO MODEL CALLS

Pulls the first messaging event out of a webhook payload.
"""

import json
from typing import Union

from pydantic import ValidationError

from errors import ParseError

from .schemas import MessagingEvent, WebhookPayload


def decode_body(body: bytes) -> dict:
    """
    Decode a raw request body into a JSON object.

    Raises:
        ParseError: Body is not valid JSON or not an object
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON payload: {e}")

    if not isinstance(payload, dict):
        raise ParseError("Payload must be a JSON object")

    return payload


def extract_event(payload: Union[dict, WebhookPayload]) -> MessagingEvent:
    """
    Return entry[0].messaging[0] from a webhook payload.

    Only the first item is validated; later items in the batch (delivery
    receipts, reads, postbacks) are ignored.

    Args:
        payload: Raw webhook payload or an already validated WebhookPayload

    Returns:
        The first MessagingEvent

    Raises:
        ParseError: Missing fields, empty entry list or empty messaging list
    """

    if isinstance(payload, WebhookPayload):
        if not payload.entry or not payload.entry[0].messaging:
            raise ParseError("No messaging events in payload")
        return payload.entry[0].messaging[0]

    entries = payload.get("entry")
    if not isinstance(entries, list) or not entries:
        raise ParseError("No entries in payload")

    first_entry = entries[0]
    messaging = first_entry.get("messaging") if isinstance(first_entry, dict) else None
    if not isinstance(messaging, list) or not messaging:
        raise ParseError("No messaging events in first entry")

    try:
        return MessagingEvent.model_validate(messaging[0])
    except ValidationError as e:
        raise ParseError(f"Invalid messaging event: {e.error_count()} validation error(s)")


def extract_sender_id(payload: dict) -> str:
    """
    Extract sender id from a raw payload.

    Useful for logging without full validation.
    """
    try:
        return payload["entry"][0]["messaging"][0]["sender"]["id"]
    except (KeyError, IndexError, TypeError):
        raise ParseError("Cannot extract sender id from payload")
