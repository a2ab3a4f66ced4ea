"""
Application configuration read from the environment.

A .env file in the working directory is loaded first, without overriding
variables that are already set.
"""
import os
from typing import Dict

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def parse_basic_auth_users(raw: str) -> Dict[str, str]:
    """Parse "user:password,user2:password2" into a mapping."""
    users = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        username, sep, password = pair.partition(":")
        if not sep or not username:
            raise ValueError(f"Malformed BASIC_AUTH_USERS entry: {pair!r}")
        users[username] = password
    return users


class Config:
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/ror_api")
    # Bounded connect phase; pymongo waits this long to find a server
    MONGO_CONNECT_TIMEOUT_MS = int(os.environ.get("MONGO_CONNECT_TIMEOUT_MS", 30000))
    MONGO_SOCKET_TIMEOUT_MS = int(os.environ.get("MONGO_SOCKET_TIMEOUT_MS", 10000))

    REDIS_HOST = os.environ.get("REDIS_HOST", "localhost")
    REDIS_PORT = int(os.environ.get("REDIS_PORT", 6379))
    REDIS_DB = int(os.environ.get("REDIS_DB", 0))
    REDIS_SOCKET_TIMEOUT = float(os.environ.get("REDIS_SOCKET_TIMEOUT", 5))

    CACHE_TTL_SECONDS = int(os.environ.get("CACHE_TTL_SECONDS", 30))
    CACHE_KEY_PREFIX = os.environ.get("CACHE_KEY_PREFIX", "")
    CACHE_INVALIDATE_ON_WRITE = _env_bool("CACHE_INVALIDATE_ON_WRITE", False)

    BASIC_AUTH_USERS = parse_basic_auth_users(
        os.environ.get("BASIC_AUTH_USERS", "john:doe,admin:123456")
    )

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    PORT = int(os.environ.get("PORT", 8000))
