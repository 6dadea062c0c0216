import logging

import httpx
from pydantic import ValidationError

from config import DEFAULT_MODEL
from errors import EmptyResultError, UpstreamError

from .base import CompletionBackend
from .types import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "completion_api"

# Health-check bypass: answered locally, never sent upstream
PING_QUERY = "ping"
PING_REPLY = "pong"


class OpenAICompletionBackend(CompletionBackend):
    """
    Chat-completions backend.

    Sends a single user turn and returns the first choice's content.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = "https://api.openai.com/v1",
    ):
        """
        Args:
            client:   Shared httpx.AsyncClient (connection pool)
            api_key:  Bearer credential
            model:    Model identifier sent with every request
            base_url: API root, without the /chat/completions suffix
        """
        self.client = client
        self.api_key = api_key
        self.model = model
        self.endpoint = f"{base_url}/chat/completions"

    async def complete(self, query: str) -> str:
        """
        Generate reply text for a query.

        Raises:
            UpstreamError: Network failure, non-2xx status or unreadable body
            EmptyResultError: The API returned no choices
        """
        if query == PING_QUERY:
            return PING_REPLY

        request = CompletionRequest.single_turn(self.model, query)

        try:
            resp = await self.client.post(
                self.endpoint,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=request.model_dump(),
            )
        except httpx.HTTPError as e:
            logger.error(f"Completion request failed: {e}")
            raise UpstreamError(f"Completion request failed: {e}", service=SERVICE_NAME)

        if not resp.is_success:
            logger.error(
                f"Completion API error: {resp.status_code} - {resp.text}",
                extra={"status_code": resp.status_code},
            )
            raise UpstreamError(
                f"Completion API returned {resp.status_code}",
                service=SERVICE_NAME,
                status_code=resp.status_code,
            )

        try:
            data = CompletionResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamError(f"Unreadable completion response: {e}", service=SERVICE_NAME)

        if not data.choices:
            raise EmptyResultError("Completion API returned no choices")

        return data.choices[0].message.content
