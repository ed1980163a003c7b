"""
Simulated network latency for the in-memory record stores
"""
import asyncio
import logging
import random
from typing import Dict, Optional


logger = logging.getLogger(__name__)

# Milliseconds per operation, matching what the browser saw from the mock API
DEFAULT_PROFILE: Dict[str, int] = {
    "get_all": 300,
    "get_by_id": 250,
    "create": 400,
    "update": 350,
    "delete": 300,
    "search": 350,
    "get_by_property_id": 300,
    "get_by_user_id": 300,
    "save_property": 250,
    "unsave_property": 250,
    "add_listing": 250,
    "remove_listing": 250,
}

DEFAULT_DELAY_MS = 300


class LatencySimulator:
    """Sleeps before each store operation to emulate a remote API"""
    
    def __init__(self, scale: float = 1.0, jitter_ms: int = 0,
                 profile: Optional[Dict[str, int]] = None, rng: Optional[random.Random] = None):
        if scale < 0:
            raise ValueError("Latency scale must be non-negative")
        self.scale = scale
        self.jitter_ms = max(jitter_ms, 0)
        self.profile = dict(DEFAULT_PROFILE if profile is None else profile)
        self.rng = rng or random.Random()
    
    @classmethod
    def disabled(cls) -> "LatencySimulator":
        return cls(scale=0)
    
    def delay_for(self, operation: str) -> float:
        """Delay in seconds for one operation"""
        if self.scale == 0:
            return 0.0
        delay_ms = self.profile.get(operation, DEFAULT_DELAY_MS)
        if self.jitter_ms:
            delay_ms += self.rng.uniform(-self.jitter_ms, self.jitter_ms)
        return max(delay_ms, 0) * self.scale / 1000.0
    
    async def wait(self, operation: str) -> None:
        delay = self.delay_for(operation)
        if delay <= 0:
            return
        logger.debug(f"Simulating {delay * 1000:.0f}ms latency for {operation}")
        await asyncio.sleep(delay)
