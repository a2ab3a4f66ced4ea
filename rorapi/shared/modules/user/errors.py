"""
Errors raised by the user record accessor and the cached lookup.

Validation and identifier errors are raised before any store I/O. Store and
cache errors wrap the client exception and carry an opaque message that is
safe to hand back to an HTTP caller.
"""
from typing import Any, Dict, Optional


class UserStoreError(Exception):
    """Base exception for user record operations."""

    status_code = 500

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(UserStoreError, ValueError):
    """Malformed or missing user fields."""

    status_code = 400

    def __init__(self, message: str = "Invalid user data", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_ERROR", message, details)


class InvalidIdentifier(UserStoreError, ValueError):
    status_code = 400

    def __init__(self, identifier: str):
        super().__init__("INVALID_IDENTIFIER", "Error parsing id", {"id": identifier})


class NotFound(UserStoreError):
    status_code = 404

    def __init__(self, identifier: str):
        super().__init__("NOT_FOUND", "Error finding user", {"id": identifier})


class StoreUnavailable(UserStoreError):
    def __init__(self, message: str = "User store unavailable"):
        super().__init__("STORE_UNAVAILABLE", message)


class StoreWriteError(UserStoreError):
    def __init__(self, message: str):
        super().__init__("STORE_WRITE_ERROR", message)


class CacheWriteError(UserStoreError):
    def __init__(self, key: str, message: str = "Error caching user"):
        super().__init__("CACHE_WRITE_ERROR", message, {"key": key})
