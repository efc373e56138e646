import pytest

from netaccess.core.config import settings
from netaccess.db import session
from netaccess.db.store import InMemoryRecordStore, RedisRecordStore


@pytest.fixture(autouse=True)
def fresh_store():
    session.reset_store()
    yield
    session.reset_store()


def test_memory_store_is_built_once(monkeypatch):
    monkeypatch.setattr(settings, "RECORD_STORE", "memory")
    store = session.get_store()

    assert isinstance(store, InMemoryRecordStore)
    assert session.get_store() is store


def test_redis_store_uses_settings(monkeypatch):
    monkeypatch.setattr(settings, "RECORD_STORE", "redis")
    monkeypatch.setattr(settings, "REDIS_KEY_PREFIX", "acl-test")
    store = session.get_store()

    assert isinstance(store, RedisRecordStore)
    assert store._hash("roles") == "acl-test:roles"


def test_unknown_backend_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "RECORD_STORE", "etcd")
    with pytest.raises(ValueError):
        session.get_store()


def test_reset_store_rebuilds(monkeypatch):
    monkeypatch.setattr(settings, "RECORD_STORE", "memory")
    first = session.get_store()
    session.reset_store()

    assert session.get_store() is not first
