"""Redis implementation of ResponseCache.

Values are stored as JSON strings under `<prefix>:...` keys, so several
services can share one Redis database. A positive TTL is applied with
SET EX; with TTL 0 entries persist until cleared.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from pokedex_cache.config import get_redis_client, settings

logger = logging.getLogger(__name__)


class RedisResponseCache:
    """Redis implementation of ResponseCache.

    This class satisfies the ResponseCache protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        key_prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis response cache.

        Args:
            redis_client: asyncio Redis client. If None, creates default.
            key_prefix: Namespace used by clear() and count(). Defaults to settings.
            ttl: Entry lifetime in seconds (0 = no expiry). Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._key_prefix = key_prefix or settings.cache_key_prefix
        self._ttl = settings.cache_ttl if ttl is None else ttl

    @classmethod
    def create(
        cls,
        key_prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisResponseCache":
        """Factory method to create RedisResponseCache with defaults.

        Args:
            key_prefix: Key namespace. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisResponseCache
        """
        return cls(key_prefix=key_prefix, ttl=ttl)

    async def get(self, key: str) -> Any | None:
        raw = await self._client.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, key: str, value: Any) -> None:
        payload = json.dumps(value)
        if self._ttl > 0:
            await self._client.set(key, payload, ex=self._ttl)
        else:
            await self._client.set(key, payload)

    async def clear(self) -> int:
        count = 0
        async for key in self._client.scan_iter(match=f"{self._key_prefix}:*"):
            count += await self._client.delete(key)
        logger.info("Cleared %d Redis cache entries", count)
        return count

    async def count(self) -> int:
        count = 0
        async for _ in self._client.scan_iter(match=f"{self._key_prefix}:*"):
            count += 1
        return count

    async def health_check(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    def get_stats(self) -> dict:
        """Get backend configuration.

        Returns:
            Dictionary with backend name, ttl and key prefix
        """
        return {
            "backend": "redis",
            "ttl": self._ttl,
            "key_prefix": self._key_prefix,
        }

    async def close(self) -> None:
        """Close the Redis connection pool."""
        await self._client.aclose()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
