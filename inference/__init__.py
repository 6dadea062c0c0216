"""
Model boundary layer for reply generation.

Supported backends:
- OpenAICompletionBackend: chat-completions API over the shared httpx client

Example usage:
    from inference import OpenAICompletionBackend

    backend = OpenAICompletionBackend(client, api_key="sk-...")
    reply = await backend.complete("Hello, world!")
"""

from .types import ChatMessage, Choice, CompletionRequest, CompletionResponse
from .base import CompletionBackend
from .openai import OpenAICompletionBackend

__all__ = [
    "ChatMessage",
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "CompletionBackend",
    "OpenAICompletionBackend",
]
