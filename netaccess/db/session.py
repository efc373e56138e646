"""Record store factory for the configured backend."""

from typing import Optional

from netaccess.core.config import settings
from netaccess.db.store import InMemoryRecordStore, RecordStore, RedisRecordStore

_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """Return the process-wide record store, building it on first use."""
    global _store
    if _store is None:
        if settings.RECORD_STORE == "redis":
            _store = RedisRecordStore(settings.REDIS_URL, settings.REDIS_KEY_PREFIX)
        elif settings.RECORD_STORE == "memory":
            _store = InMemoryRecordStore()
        else:
            raise ValueError(f"Unknown RECORD_STORE: {settings.RECORD_STORE!r}")
    return _store


def reset_store() -> None:
    """Drop the cached store so the next ``get_store`` rebuilds it."""
    global _store
    _store = None
