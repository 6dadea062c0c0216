"""
Bootstrap Tests

Shared client timeout and responder wiring.
"""

import pytest

from agent.responder import Responder
from config import RelayConfig
from infra.bootstrap import build_responder, create_http_client


class TestCreateHttpClient:

    @pytest.mark.asyncio
    async def test_client_carries_configured_timeout(self):
        client = create_http_client(RelayConfig(http_timeout=5.0))

        try:
            assert client.timeout.connect == 5.0
            assert client.timeout.read == 5.0
            assert client.timeout.write == 5.0
            assert client.timeout.pool == 5.0
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_default_timeout_is_bounded(self):
        client = create_http_client(RelayConfig())

        try:
            assert client.timeout.read == 30.0
        finally:
            await client.aclose()


class TestBuildResponder:

    def test_wires_shared_client_and_config(self, relay_config, upstream):
        client = upstream.client()

        responder = build_responder(relay_config, client)

        assert isinstance(responder, Responder)
        assert responder.completion.client is client
        assert responder.sender.client is client
        assert responder.completion.endpoint == "https://api.example.com/v1/chat/completions"
        assert responder.completion.api_key == "sk-test"
        assert responder.sender.endpoint == "https://graph.example.com/v2.6/me/messages"
        assert responder.sender.page_access_token == "page-token"
