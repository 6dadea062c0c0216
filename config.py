"""
Configuration management for the Messenger relay.

Loads environment variables from the .env file and exposes them as one
immutable RelayConfig built at startup.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)

DEFAULT_PORT = 8080
DEFAULT_MODEL = "gpt-3.5-turbo"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RelayConfig:
    """Relay configuration from environment."""

    # Secrets
    page_access_token: str = ""
    openai_key: str = ""
    verify_token: str = ""

    # Server
    environment: str = "production"
    ngrok_authtoken: str = ""
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    # Upstream APIs
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = DEFAULT_MODEL
    graph_api_base_url: str = "https://graph.facebook.com"
    graph_api_version: str = "v2.6"
    http_timeout: float = 30.0

    # Acknowledgment policy
    stale_event_grace: bool = True
    stale_after_seconds: int = 300
    force_ok_responses: bool = False

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """
        Load configuration from environment variables.

        Defaults mirror the hosted APIs; secrets default to empty and are
        reported by missing().
        """
        return cls(
            page_access_token=os.getenv("PAGE_ACCESS_TOKEN", ""),
            openai_key=os.getenv("OPENAI_KEY", ""),
            verify_token=os.getenv("VERIFY_TOKEN", ""),
            environment=os.getenv("ENVIRONMENT", "production"),
            ngrok_authtoken=os.getenv("NGROK_AUTHTOKEN", ""),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
            openai_model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
            graph_api_base_url=os.getenv("GRAPH_API_BASE_URL", "https://graph.facebook.com").rstrip("/"),
            graph_api_version=os.getenv("GRAPH_API_VERSION", "v2.6"),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "30.0")),
            stale_event_grace=_env_bool("STALE_EVENT_GRACE", "true"),
            stale_after_seconds=int(os.getenv("STALE_EVENT_SECONDS", "300")),
            force_ok_responses=_env_bool("FORCE_OK_RESPONSES", "false"),
        )

    @property
    def is_dev(self) -> bool:
        return self.environment == "dev"

    def missing(self) -> List[str]:
        """Names of required environment variables that are not set."""
        required = {
            "PAGE_ACCESS_TOKEN": self.page_access_token,
            "OPENAI_KEY": self.openai_key,
            "VERIFY_TOKEN": self.verify_token,
        }
        if self.is_dev:
            required["NGROK_AUTHTOKEN"] = self.ngrok_authtoken
        return [name for name, value in required.items() if not value]


if __name__ == "__main__":
    config = RelayConfig.from_env()
    print("Configuration loaded:")
    print(f"  Page Access Token: {'✓ Set' if config.page_access_token else '✗ Missing'}")
    print(f"  OpenAI Key: {'✓ Set' if config.openai_key else '✗ Missing'}")
    print(f"  Verify Token: {'✓ Set' if config.verify_token else '✗ Missing'}")
    print(f"  Port: {config.port}")
    print(f"  Environment: {config.environment}")
    missing = config.missing()
    print(f"\n  Validation: {'✓ PASSED' if not missing else '✗ FAILED: ' + ', '.join(missing)}")
