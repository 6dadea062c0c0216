"""
Public tunnel for local development.

Only used when ENVIRONMENT=dev; requires the `ngrok` package (tunnel extra).
"""

import logging

from config import RelayConfig

logger = logging.getLogger(__name__)


def open_tunnel(config: RelayConfig):
    """
    Forward a public ngrok endpoint to the local listening port.

    Returns:
        The ngrok listener; keep a reference for as long as the server runs
    """
    import ngrok

    if not config.ngrok_authtoken:
        raise RuntimeError("NGROK_AUTHTOKEN must be set when ENVIRONMENT=dev")

    listener = ngrok.forward(config.port, authtoken=config.ngrok_authtoken)
    logger.info(f"Ngrok tunnel started on URL: {listener.url()}")
    return listener
