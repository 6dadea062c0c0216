"""
FastAPI Application Entry Point

Integrates:
  - Messenger webhook (handshake + inbound messages)
  - Health checks
  - Middleware for logging & error handling

Run: python main.py   (or: uvicorn main:app --host 0.0.0.0 --port 8080)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from config import RelayConfig
from infra.bootstrap import build_responder, create_http_client
from transport.messenger.policy import AckPolicy
from transport.messenger.webhook import create_router

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    config: Optional[RelayConfig] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the relay application.

    Args:
        config: Relay configuration (read from the environment if omitted)
        http_client: Outbound client to share; one is created at startup
            and closed at shutdown when omitted
    """
    config = config or RelayConfig.from_env()
    policy = AckPolicy.from_config(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = http_client is None
        client = create_http_client(config) if owns_client else http_client
        app.state.responder = build_responder(config, client)

        logger.info("=" * 60)
        logger.info("Messenger relay starting up...")
        logger.info(f"Environment: {config.environment}")
        logger.info(f"Completion model: {config.openai_model}")
        logger.info(
            f"Ack policy: stale_after={policy.stale_after}, force_ok={policy.force_ok}"
        )
        for name in config.missing():
            logger.warning(f"Missing required environment variable: {name}")
        logger.info("=" * 60)

        yield

        logger.info("Messenger relay shutting down...")
        if owns_client:
            await client.aclose()

    app = FastAPI(
        title="Messenger Relay",
        description="Relays messenger webhooks to a chat-completion API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests."""
        logger.debug(f"{request.method} {request.url.path}")
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"},
            )

    app.include_router(create_router(policy))

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Hello, World!"

    @app.get("/health/live")
    async def health_live():
        """Liveness probe."""
        return {"status": "alive"}

    @app.get("/health/ready")
    async def health_ready():
        """Readiness probe: all required settings present."""
        missing = config.missing()
        if missing:
            return {"status": "not_ready", "missing": missing}
        return {"status": "ready"}

    return app


app = create_app()
setup_logging(app.state.config.log_level)


if __name__ == "__main__":
    import uvicorn

    config = app.state.config

    if config.is_dev:
        from infra.tunnel import open_tunnel

        tunnel = open_tunnel(config)

    logger.info(f"Serving HTTP traffic on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port)
