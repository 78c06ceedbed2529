"""Redis cache for simulation results, keyed by the normalized request."""

import hashlib
import json
import logging

import redis.asyncio as redis

from tripsim.config import settings
from tripsim.schemas.simulation import SimulationRequest, SimulationResult, load_simulation_result

logger = logging.getLogger(__name__)


class SimulationCache:
    """Redis-backed result cache. Any Redis failure reads as a miss."""

    def __init__(
        self,
        redis_url: str | None = None,
        ttl: int | None = None,
        client: redis.Redis | None = None,
    ):
        self._redis_url = redis_url or settings.redis_url
        self._ttl = ttl if ttl is not None else settings.simulation_cache_ttl
        self._redis = client
        self._disabled = False

    async def _get_redis(self) -> redis.Redis | None:
        if self._disabled:
            return None
        if self._redis is None:
            try:
                self._redis = redis.from_url(
                    self._redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                )
                await self._redis.ping()
            except Exception as e:
                logger.warning(f"Redis unavailable, simulation cache disabled: {e}")
                self._redis = None
                self._disabled = True
                return None
        return self._redis

    @staticmethod
    def simulation_key(request: SimulationRequest, currency: str) -> str:
        fields = {**request.normalized(), "currency": currency.upper()}
        digest = hashlib.sha256(json.dumps(fields, sort_keys=True).encode()).hexdigest()
        return f"sim:{digest}"

    async def get_result(self, request: SimulationRequest, currency: str) -> SimulationResult | None:
        """Cached result for an equivalent request, or None on miss or error."""
        try:
            r = await self._get_redis()
            if r is None:
                return None
            raw = await r.get(self.simulation_key(request, currency))
            if raw is None:
                return None
            return load_simulation_result(raw)
        except Exception as e:
            logger.warning(f"Simulation cache read failed: {e}")
            return None

    async def set_result(self, request: SimulationRequest, currency: str, result: SimulationResult) -> bool:
        """Store a result with the configured TTL. Returns False on error."""
        try:
            r = await self._get_redis()
            if r is None:
                return False
            await r.set(
                self.simulation_key(request, currency),
                result.model_dump_json(by_alias=True),
                ex=self._ttl,
            )
            return True
        except Exception as e:
            logger.warning(f"Simulation cache write failed: {e}")
            return False

    async def close(self):
        if self._redis:
            await self._redis.aclose()
            self._redis = None
