"""
Redis Cache Store

A CacheStore backed by a single long-lived redis.StrictRedis connection pool.
The client is thread-safe, so one instance is shared by every request.
"""
import logging
from typing import Optional

import redis

from shared.modules.cache.cache_store import CacheStore
from shared.modules.user.errors import CacheWriteError


class RedisCacheStore(CacheStore):

    def __init__(self, host: str = "localhost", port: int = 6379, db: int = 0,
                 socket_timeout: float = 5.0, client: Optional[redis.StrictRedis] = None, logger=None):
        """
        Args:
            host (str): The Redis server hostname.
            port (int): The Redis server port.
            db (int): The Redis logical database.
            socket_timeout (float): Seconds before a connect or command gives up,
                so a hung Redis cannot stall a request forever.
            client: An existing client to use instead of building one.
        """
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        # Payloads are raw JSON bytes, so no decode_responses here
        self.redis = client or redis.StrictRedis(
            host=host,
            port=port,
            db=db,
            socket_timeout=socket_timeout,
            socket_connect_timeout=socket_timeout,
        )

    def get(self, cache_key: str) -> Optional[bytes]:
        """
        Fetch a cached payload. A Redis failure is logged and reported as a
        miss so the caller falls back to the record store.
        """
        try:
            return self.redis.get(cache_key)
        except redis.exceptions.RedisError as e:
            self.logger.warning(f"Cache read failed for '{cache_key}', treating as miss: {e}")
            return None

    def set(self, cache_key: str, value: bytes, ttl_seconds: int) -> None:
        try:
            self.redis.set(cache_key, value, ex=ttl_seconds)
        except redis.exceptions.RedisError as e:
            self.logger.error(f"Could not write '{cache_key}' to Redis: {e}")
            raise CacheWriteError(cache_key) from e

    def delete(self, cache_key: str) -> None:
        try:
            self.redis.delete(cache_key)
        except redis.exceptions.RedisError as e:
            self.logger.error(f"Could not delete '{cache_key}' from Redis: {e}")
            raise CacheWriteError(cache_key, "Error invalidating cached user") from e
