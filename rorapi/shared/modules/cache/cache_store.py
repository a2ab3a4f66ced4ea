# Abstract cache interface (implemented for Redis; tests use an in-memory double)
from abc import ABC, abstractmethod
from typing import Optional


class CacheStore(ABC):
    @abstractmethod
    def get(self, cache_key: str) -> Optional[bytes]:
        """Return the stored bytes, or None on a miss."""

    @abstractmethod
    def set(self, cache_key: str, value: bytes, ttl_seconds: int) -> None:
        """Store value under cache_key, expiring after ttl_seconds."""

    @abstractmethod
    def delete(self, cache_key: str) -> None:
        pass
