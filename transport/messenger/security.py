"""
Messenger Webhook Verification

SECURITY BOUNDARY - subscription handshake only.
No agent imports. No retries. No logic.
"""

import hmac
import logging
from typing import Optional

from errors import AuthError

logger = logging.getLogger(__name__)

SUBSCRIBE_MODE = "subscribe"


def verify_webhook_challenge(
    hub_mode: Optional[str],
    hub_verify_token: Optional[str],
    hub_challenge: Optional[str],
    expected_token: str,
) -> str:
    """
    Verify webhook subscription challenge from the platform.

    The platform calls GET /webhook with:
    - hub.mode=subscribe
    - hub.challenge=random_string
    - hub.verify_token=configured_token

    We verify the token and echo back the challenge untouched.

    Args:
        hub_mode: Should be "subscribe"
        hub_verify_token: Token to verify
        hub_challenge: Random string to echo back
        expected_token: VERIFY_TOKEN from configuration

    Returns:
        The challenge string to echo back

    Raises:
        AuthError(400): A handshake parameter is missing
        AuthError(403): Wrong mode or token
    """

    if hub_mode is None or hub_verify_token is None or hub_challenge is None:
        raise AuthError("Missing hub.mode, hub.verify_token or hub.challenge", status_code=400)

    # An unset VERIFY_TOKEN never matches, even an empty hub.verify_token
    token_ok = bool(expected_token) and hmac.compare_digest(
        hub_verify_token.encode("utf-8"), expected_token.encode("utf-8")
    )

    if hub_mode != SUBSCRIBE_MODE or not token_ok:
        logger.warning(
            "Webhook verification rejected",
            extra={"hub_mode": hub_mode},
        )
        raise AuthError("Invalid hub.mode or hub.verify_token", status_code=403)

    logger.info("Webhook verified!")
    return hub_challenge
