"""
Infrastructure initialization and bootstrap.

Builds the shared HTTP client and the responder from configuration, and
exposes them to route handlers as FastAPI dependencies.
"""

from typing import Optional

import httpx
from fastapi import Request

from agent.responder import Responder
from config import RelayConfig
from inference import OpenAICompletionBackend
from transport.messenger.sender import MessengerSender


def create_http_client(config: RelayConfig) -> httpx.AsyncClient:
    """
    Create the app-wide outbound connection pool.

    Every outbound call inherits the bounded timeout.
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(config.http_timeout))


def build_responder(config: RelayConfig, client: httpx.AsyncClient) -> Responder:
    """Wire completion backend and sender around one shared client."""
    completion = OpenAICompletionBackend(
        client,
        api_key=config.openai_key,
        model=config.openai_model,
        base_url=config.openai_base_url,
    )
    sender = MessengerSender(
        client,
        page_access_token=config.page_access_token,
        base_url=config.graph_api_base_url,
        api_version=config.graph_api_version,
    )
    return Responder(completion, sender)


# ============================================================================
# DEPENDENCIES
# ============================================================================

def get_config(request: Request) -> RelayConfig:
    """Configuration built once at startup."""
    return request.app.state.config


def get_responder(request: Request) -> Responder:
    """Responder created during app startup."""
    responder: Optional[Responder] = getattr(request.app.state, "responder", None)
    if responder is None:
        raise RuntimeError("Responder not initialized; is the app lifespan running?")
    return responder
