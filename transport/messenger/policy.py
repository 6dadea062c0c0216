"""
Webhook acknowledgment policy.

The platform redelivers any event that is not answered with 200. Two knobs
decide when a failed delivery is still acknowledged:

- stale_after: a downstream failure on an event older than this is
  acknowledged, because a late reply is no longer useful and redelivery
  would only repeat the failure. None disables the grace.
- force_ok: every outcome of the receiver is rewritten to 200. This stops
  redelivery storms for events the relay cannot handle (non-text messages,
  delivery receipts), but it also hides real failures from the platform.
  Those failures are only visible in the logs.
"""

import time
from dataclasses import dataclass
from typing import Optional

from config import RelayConfig


@dataclass(frozen=True)
class AckPolicy:
    stale_after: Optional[float] = 300.0
    force_ok: bool = False

    @classmethod
    def from_config(cls, config: RelayConfig) -> "AckPolicy":
        return cls(
            stale_after=float(config.stale_after_seconds) if config.stale_event_grace else None,
            force_ok=config.force_ok_responses,
        )

    def is_stale(self, timestamp_ms: Optional[int], now: Optional[float] = None) -> bool:
        """True when the event is older than stale_after. Events without a timestamp are never stale."""
        if self.stale_after is None or timestamp_ms is None:
            return False
        now = time.time() if now is None else now
        return (now - timestamp_ms / 1000.0) > self.stale_after
