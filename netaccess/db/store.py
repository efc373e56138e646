"""Key/value record stores: one namespace (table) per entity kind."""

import logging
from typing import Dict, List, Optional, Protocol, Union

import redis

from netaccess.core.config import settings
from netaccess.core.exceptions import DecodeError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Operations the registries need from a record store."""

    def insert(self, key: str, value: str, table: str) -> None: ...

    def fetch_one(self, table: str, key: str) -> str: ...

    def fetch_all(self, table: str) -> List[str]: ...

    def delete(self, table: str, key: str) -> None: ...


class InMemoryRecordStore:
    """Process-local store, used for embedding and tests."""

    def __init__(self):
        self._tables: Dict[str, Dict[str, str]] = {}

    def insert(self, key: str, value: str, table: str) -> None:
        self._tables.setdefault(table, {})[key] = value

    def fetch_one(self, table: str, key: str) -> str:
        try:
            return self._tables[table][key]
        except KeyError:
            raise NotFoundError(f"no record {key!r} in {table}")

    def fetch_all(self, table: str) -> List[str]:
        return list(self._tables.get(table, {}).values())

    def delete(self, table: str, key: str) -> None:
        self._tables.get(table, {}).pop(key, None)


class RedisRecordStore:
    """Redis-backed store. Each table is a hash at ``<prefix>:<table>``.

    Values are fetched as raw bytes and decoded one by one, so a single
    non-UTF-8 value only affects its own record.
    """

    def __init__(self, url: Optional[str] = None, prefix: Optional[str] = None,
                 client: Optional[redis.Redis] = None):
        self._url = url or settings.REDIS_URL
        self._prefix = prefix or settings.REDIS_KEY_PREFIX
        self._client = client

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.from_url(
                self._url,
                decode_responses=False,
                max_connections=100,
            )
        return self._client

    def _hash(self, table: str) -> str:
        return f"{self._prefix}:{table}"

    @staticmethod
    def _decode(value: Union[bytes, str], table: str) -> str:
        if isinstance(value, str):
            return value
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"undecodable record in {table}: {e.reason}") from e

    def insert(self, key: str, value: str, table: str) -> None:
        try:
            self.client.hset(self._hash(table), key, value)
        except redis.RedisError as e:
            raise StorageError(f"insert {key!r} into {table} failed: {e}") from e

    def fetch_one(self, table: str, key: str) -> str:
        try:
            value = self.client.hget(self._hash(table), key)
        except redis.RedisError as e:
            raise StorageError(f"fetch {key!r} from {table} failed: {e}") from e
        if value is None:
            raise NotFoundError(f"no record {key!r} in {table}")
        return self._decode(value, table)

    def fetch_all(self, table: str) -> List[str]:
        try:
            raw_values = self.client.hvals(self._hash(table))
        except redis.RedisError as e:
            raise StorageError(f"fetch all from {table} failed: {e}") from e
        values = []
        for raw in raw_values:
            try:
                values.append(self._decode(raw, table))
            except DecodeError as e:
                logger.warning(f"Skipping record: {e.message}")
        return values

    def delete(self, table: str, key: str) -> None:
        try:
            self.client.hdel(self._hash(table), key)
        except redis.RedisError as e:
            raise StorageError(f"delete {key!r} from {table} failed: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is reachable."""
        try:
            return self.client.ping()
        except redis.ConnectionError:
            return False
