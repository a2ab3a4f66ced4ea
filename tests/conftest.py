"""
Shared fixtures: in-memory stand-ins for the Mongo collection and the
Redis cache, plus a Flask app wired to them.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId

from backend.app import create_app
from backend.models.user_model import UserModel
from backend.modules.user.services.user_cache_service import UserCacheService
from backend.modules.user.services.user_service import UserService
from shared.modules.cache.cache_store import CacheStore


class FakeCollection:
    """Just enough of pymongo's Collection for UserModel, with call counts."""

    def __init__(self):
        self.docs = {}
        self.calls = []

    def _record(self, name):
        self.calls.append(name)

    def count_documents(self, filter):
        self._record("count_documents")
        return len(self.docs)

    def insert_one(self, doc):
        self._record("insert_one")
        doc = copy.deepcopy(doc)
        doc["_id"] = ObjectId()
        self.docs[doc["_id"]] = doc
        return SimpleNamespace(inserted_id=doc["_id"], acknowledged=True)

    def find_one(self, filter):
        self._record("find_one")
        doc = self.docs.get(filter["_id"])
        return copy.deepcopy(doc) if doc else None

    def update_one(self, filter, update):
        self._record("update_one")
        doc = self.docs.get(filter["_id"])
        if doc is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        changes = update["$set"]
        modified = any(doc.get(k) != v for k, v in changes.items())
        doc.update(copy.deepcopy(changes))
        return SimpleNamespace(matched_count=1, modified_count=int(modified))

    def delete_one(self, filter):
        self._record("delete_one")
        deleted = self.docs.pop(filter["_id"], None)
        return SimpleNamespace(deleted_count=0 if deleted is None else 1)


class FakeDb:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeCacheStore(CacheStore):
    """In-memory cache with expiry driven by a manual clock."""

    def __init__(self):
        self.now = 0.0
        self.entries = {}
        self.get_calls = 0
        self.set_calls = 0
        self.delete_calls = 0

    def advance(self, seconds):
        self.now += seconds

    def get(self, cache_key):
        self.get_calls += 1
        entry = self.entries.get(cache_key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.now >= expires_at:
            del self.entries[cache_key]
            return None
        return value

    def set(self, cache_key, value, ttl_seconds):
        self.set_calls += 1
        self.entries[cache_key] = (value, self.now + ttl_seconds)

    def delete(self, cache_key):
        self.delete_calls += 1
        self.entries.pop(cache_key, None)


@pytest.fixture
def fake_db():
    return FakeDb()


@pytest.fixture
def users_collection(fake_db):
    return fake_db["users"]


@pytest.fixture
def user_model(fake_db):
    return UserModel(fake_db)


@pytest.fixture
def user_service(user_model):
    return UserService(user_model)


@pytest.fixture
def cache_store():
    return FakeCacheStore()


@pytest.fixture
def user_cache_service(user_service, cache_store):
    return UserCacheService(user_service, cache_store, ttl_seconds=30)


@pytest.fixture
def valid_fields():
    return {"first_name": "sam", "last_name": "chan", "gender": "male", "age": 20}


@pytest.fixture
def app_config():
    return {
        "TESTING": True,
        "BASIC_AUTH_USERS": {"john": "doe", "admin": "123456"},
        "CACHE_TTL_SECONDS": 30,
        "CACHE_KEY_PREFIX": "",
        "CACHE_INVALIDATE_ON_WRITE": False,
    }


@pytest.fixture
def app(app_config, user_model, cache_store):
    return create_app(config=app_config, user_model=user_model, cache_store=cache_store)


@pytest.fixture
def client(app):
    return app.test_client()
