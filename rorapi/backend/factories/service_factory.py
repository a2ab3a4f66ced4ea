"""
Service Factory for building the user services once per app and handing
them to controllers.
"""
from flask import Flask, current_app

from backend.models.user_model import UserModel
from backend.modules.user.services.user_cache_service import UserCacheService
from backend.modules.user.services.user_service import UserService
from shared.modules.cache.cache_key_generator import CacheKeyGenerator
from shared.modules.cache.cache_store import CacheStore

EXTENSION_KEY = "rorapi"


class ServiceFactory:
    """
    Wires the store handles into the services at startup.

    The services hold no per-request state, so the same instances are used
    by every request thread.
    """

    @staticmethod
    def init_app(app: Flask, user_model: UserModel, cache_store: CacheStore) -> None:
        user_service = UserService(user_model)
        user_cache_service = UserCacheService(
            user_service,
            cache_store,
            ttl_seconds=app.config["CACHE_TTL_SECONDS"],
            key_generator=CacheKeyGenerator(app.config["CACHE_KEY_PREFIX"]),
            invalidate_on_write=app.config["CACHE_INVALIDATE_ON_WRITE"],
        )
        app.extensions[EXTENSION_KEY] = {
            "user_service": user_service,
            "user_cache_service": user_cache_service,
        }

    @staticmethod
    def user_service() -> UserService:
        return current_app.extensions[EXTENSION_KEY]["user_service"]

    @staticmethod
    def user_cache_service() -> UserCacheService:
        return current_app.extensions[EXTENSION_KEY]["user_cache_service"]
