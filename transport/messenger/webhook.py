"""
Messenger Webhook Receiver

FastAPI router for the subscription handshake and inbound messages.
Translates relay errors into HTTP status codes; the AckPolicy decides
which failures are still acknowledged with 200.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse

from agent.responder import Responder
from config import RelayConfig
from errors import AuthError, EmptyResultError, ParseError, UpstreamError
from infra.bootstrap import get_config, get_responder

from .normalize import decode_body, extract_event, extract_sender_id
from .policy import AckPolicy
from .security import verify_webhook_challenge

logger = logging.getLogger(__name__)

ACK_BODY = "Message received!"


def create_router(policy: AckPolicy) -> APIRouter:
    """
    Build the /webhook router.

    Args:
        policy: Acknowledgment policy applied to POST /webhook
    """

    router = APIRouter(prefix="/webhook", tags=["Messenger Transport"])

    # ========================================================================
    # WEBHOOK CHALLENGE (Setup only)
    # ========================================================================

    @router.get("", response_class=PlainTextResponse)
    async def messenger_webhook_challenge(
        hub_mode: Optional[str] = Query(None, alias="hub.mode"),
        hub_verify_token: Optional[str] = Query(None, alias="hub.verify_token"),
        hub_challenge: Optional[str] = Query(None, alias="hub.challenge"),
        config: RelayConfig = Depends(get_config),
    ) -> str:
        """
        Verify webhook subscription challenge.

        Returns:
            The challenge string (plain text)

        Raises:
            HTTPException(400): Missing parameter
            HTTPException(403): Wrong mode or token
        """
        try:
            return verify_webhook_challenge(
                hub_mode, hub_verify_token, hub_challenge, config.verify_token
            )
        except AuthError as e:
            raise HTTPException(status_code=e.status_code, detail=str(e))

    # ========================================================================
    # WEBHOOK RECEIVER (Message processing)
    # ========================================================================

    @router.post("", response_class=PlainTextResponse)
    async def messenger_webhook_receiver(
        request: Request,
        responder: Responder = Depends(get_responder),
    ) -> PlainTextResponse:
        """
        Receive messages via webhook.

        Flow:
        1. Decode body and extract entry[0].messaging[0] (400 if malformed)
        2. Responder: completion → send API
        3. Acknowledge with "Message received!"

        A failed relay answers 500 unless the event is stale. With
        policy.force_ok every outcome is rewritten to 200.
        """
        try:
            await _relay(request, responder, policy)
        except HTTPException as e:
            if not policy.force_ok:
                raise
            logger.warning(
                f"Forcing 200 for webhook that failed with {e.status_code}: {e.detail}",
                extra={"status_code": e.status_code},
            )
        except Exception as e:
            if not policy.force_ok:
                raise
            logger.error(f"Forcing 200 for webhook that raised: {e}", exc_info=True)

        return PlainTextResponse(ACK_BODY)

    return router


def _sender_hint(payload: Optional[dict]) -> Optional[str]:
    """Best-effort sender id for logging a rejected payload."""
    if payload is None:
        return None
    try:
        return extract_sender_id(payload)
    except ParseError:
        return None


async def _relay(request: Request, responder: Responder, policy: AckPolicy) -> None:
    payload = None
    try:
        payload = decode_body(await request.body())
        event = extract_event(payload)
    except ParseError as e:
        logger.warning(
            f"Rejected malformed webhook payload: {e}",
            extra={"sender_id": _sender_hint(payload)},
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Malformed payload: {e}",
        )

    logger.info(
        f"Webhook received from {event.sender.id} ({len(event.message.text)} chars)",
        extra={"sender_id": event.sender.id, "mid": event.message.mid},
    )
    logger.debug(f"Message text: {event.message.text}")

    try:
        await responder.respond(event.sender.id, event.message)
    except (UpstreamError, EmptyResultError) as e:
        if policy.is_stale(event.timestamp):
            logger.warning(
                f"Relay failed for stale event, acknowledging anyway: {e}",
                extra={"sender_id": event.sender.id, "timestamp": event.timestamp},
            )
            return
        logger.error(
            f"Relay failed: {e}",
            extra={"sender_id": event.sender.id},
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to relay message",
        )
