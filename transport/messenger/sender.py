"""
Messenger Response Sender

Posts generated replies back through the platform send API.
No formatting intelligence. No retries. No logic.
"""

import logging

import httpx

from errors import UpstreamError

from .schemas import OutboundEvent

logger = logging.getLogger(__name__)

SERVICE_NAME = "send_api"


class MessengerSender:
    """
    Send API client.

    Shares the app-wide httpx.AsyncClient; holds no per-request state.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        page_access_token: str,
        base_url: str = "https://graph.facebook.com",
        api_version: str = "v2.6",
    ):
        self.client = client
        self.page_access_token = page_access_token
        self.endpoint = f"{base_url}/{api_version}/me/messages"

    async def send(self, event: OutboundEvent) -> None:
        """
        POST one OutboundEvent to the send API.

        The response body is not inspected.

        Raises:
            UpstreamError: Network failure or non-2xx status
        """
        recipient_id = event.recipient.id

        try:
            response = await self.client.post(
                self.endpoint,
                params={"access_token": self.page_access_token},
                json=event.to_payload(),
            )
        except httpx.HTTPError as e:
            logger.error(
                f"Send API request failed: {e}",
                extra={"recipient_id": recipient_id},
            )
            raise UpstreamError(f"Send API request failed: {e}", service=SERVICE_NAME)

        if not response.is_success:
            logger.error(
                f"Send API error: {response.status_code} - {response.text}",
                extra={
                    "recipient_id": recipient_id,
                    "status_code": response.status_code,
                },
            )
            raise UpstreamError(
                f"Send API returned {response.status_code}",
                service=SERVICE_NAME,
                status_code=response.status_code,
            )

        logger.info(
            f"Response sent to {recipient_id}",
            extra={"recipient_id": recipient_id},
        )
