import logging
from typing import NamedTuple, Optional

from backend.modules.user.services.user_service import UserService
from shared.modules.cache.cache_key_generator import CacheKeyGenerator
from shared.modules.cache.cache_store import CacheStore
from shared.modules.user.identifier import parse_identifier
from shared.modules.user.models.user import User

DEFAULT_TTL_SECONDS = 30


class CachedLookup(NamedTuple):
    user: User
    cache_hit: bool


class UserCacheService:
    """
    Cache-aside reads of single users.

    A cached copy is trusted until Redis expires it, so a write made to the
    store after the entry was populated is not visible through this path
    until the TTL runs out. Writes never populate or refresh an entry; with
    invalidate_on_write they delete it instead.

    Concurrent misses on the same id each go to the store and each write the
    cache; the last write wins.
    """

    def __init__(
        self,
        user_service: UserService,
        cache_store: CacheStore,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        key_generator: Optional[CacheKeyGenerator] = None,
        invalidate_on_write: bool = False,
        logger=None,
    ):
        self.user_service = user_service
        self.cache_store = cache_store
        self.ttl_seconds = ttl_seconds
        self.key_generator = key_generator or CacheKeyGenerator()
        self.invalidate_on_write = invalidate_on_write
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def get_with_cache(self, identifier: str) -> CachedLookup:
        """
        Return the user from the cache if present, else from the store.

        A store hit is written back to the cache; a failure to do so raises
        CacheWriteError even though the user was read. InvalidIdentifier is
        raised before the cache is read; NotFound from the store propagates
        and nothing is cached.
        """
        parse_identifier(identifier)
        key = self.key_generator.generate(identifier)

        cached = self.cache_store.get(key)
        if cached is not None:
            try:
                user = User.model_validate_json(cached)
                self.logger.debug(f"Cache hit for user {identifier}")
                return CachedLookup(user=user, cache_hit=True)
            except ValueError as e:
                # corrupt, partial or non-UTF-8 entry; read through as if missing
                self.logger.warning(f"Discarding unreadable cache entry '{key}': {e}")

        self.logger.debug(f"Cache miss for user {identifier}")
        user = self.user_service.get(identifier)

        self.cache_store.set(key, user.model_dump_json().encode("utf-8"), self.ttl_seconds)
        return CachedLookup(user=user, cache_hit=False)

    def invalidate(self, identifier: str) -> None:
        self.cache_store.delete(self.key_generator.generate(identifier))

    def on_write(self, identifier: str) -> None:
        """Called after an update or delete of identifier has reached the store."""
        if self.invalidate_on_write:
            self.logger.debug(f"Invalidating cached user {identifier}")
            self.invalidate(identifier)
