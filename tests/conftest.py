"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import httpx
import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import RelayConfig  # noqa: E402

COMPLETION_URL = "https://api.example.com/v1/chat/completions"
SEND_URL = "https://graph.example.com/v2.6/me/messages"


class FakeUpstream:
    """
    Stand-in for the completion API and the send API.

    Records every request so tests can assert call counts and bodies.
    """

    def __init__(self, reply="Hi there!", completion_status=200, completion_body=None, send_status=200):
        self.completion_status = completion_status
        self.completion_body = completion_body if completion_body is not None else {
            "id": "chatcmpl-1",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": reply}}],
        }
        self.send_status = send_status
        self.completion_calls = []
        self.send_calls = []
        self.fail_with = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        if self.fail_with is not None:
            raise self.fail_with
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        if url == COMPLETION_URL:
            self.completion_calls.append(request)
            return httpx.Response(self.completion_status, json=self.completion_body)
        if url == SEND_URL:
            self.send_calls.append(request)
            return httpx.Response(self.send_status, json={"recipient_id": "U1", "message_id": "m_1"})
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(
        page_access_token="page-token",
        openai_key="sk-test",
        verify_token="verify-me",
        openai_base_url="https://api.example.com/v1",
        graph_api_base_url="https://graph.example.com",
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
