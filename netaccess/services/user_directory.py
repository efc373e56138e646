"""User directory — enumeration and upsert of user records."""

import logging
from typing import List, Optional, Protocol

from netaccess.core.config import settings
from netaccess.core.exceptions import DecodeError, InvalidInputError
from netaccess.db.store import RecordStore
from netaccess.models.user import User
from netaccess.services.codec import decode, encode

logger = logging.getLogger(__name__)


class UserDirectory(Protocol):
    def list_all_users(self) -> List[User]: ...

    def upsert_user(self, user: User) -> None: ...


class RecordUserDirectory:
    """Users kept as JSON records in the users table, keyed by username."""

    def __init__(self, store: RecordStore, table: Optional[str] = None):
        self.store = store
        self.table = table or settings.USERS_TABLE

    def list_all_users(self) -> List[User]:
        users = []
        for payload in self.store.fetch_all(self.table):
            try:
                users.append(decode(payload, User))
            except DecodeError as e:
                logger.warning(f"Skipping user record: {e.message}")
        return users

    def upsert_user(self, user: User) -> None:
        if not user.username:
            raise InvalidInputError("username cannot be empty")
        self.store.insert(user.username, encode(user), self.table)
