"""
Infrastructure module exports.

Shared HTTP client, responder wiring and the optional dev tunnel.
"""

from .bootstrap import build_responder, create_http_client, get_config, get_responder
from .tunnel import open_tunnel

__all__ = [
    "build_responder",
    "create_http_client",
    "get_config",
    "get_responder",
    "open_tunnel",
]
