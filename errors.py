"""
Relay error taxonomy.

Domain code raises these; only the HTTP layer turns them into status codes.
"""

from typing import Optional


class RelayError(Exception):
    """Base class for all relay failures."""
    pass


class ParseError(RelayError):
    """Inbound webhook payload is malformed (missing entry/messaging/message)."""
    pass


class AuthError(RelayError):
    """Webhook handshake rejected."""

    def __init__(self, message: str, status_code: int = 403):
        super().__init__(message)
        self.status_code = status_code


class UpstreamError(RelayError):
    """Network failure or non-2xx answer from the completion or send API."""

    def __init__(self, message: str, service: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.service = service
        self.status_code = status_code


class EmptyResultError(RelayError):
    """Completion API answered without any choices."""
    pass
