"""User group registry — CRUD over user groups with membership cascade."""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from netaccess.core.config import settings
from netaccess.core.exceptions import (
    AlreadyExistsError,
    DecodeError,
    InvalidInputError,
    NetAccessError,
    NotFoundError,
)
from netaccess.db.store import RecordStore
from netaccess.models.group import UserGroup
from netaccess.services.codec import decode, encode
from netaccess.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class GroupDeletionReport(BaseModel):
    """Outcome of the membership cascade run by ``GroupService.delete``."""

    group_id: str
    updated_users: List[str] = Field(default_factory=list)
    failed_users: List[str] = Field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failed_users


class GroupService:
    """Manages user groups in the record store."""

    def __init__(self, store: RecordStore, users: UserDirectory, table: Optional[str] = None):
        self.store = store
        self.users = users
        self.table = table or settings.GROUPS_TABLE

    def _exists(self, group_id: str) -> bool:
        try:
            self.store.fetch_one(self.table, group_id)
        except NotFoundError:
            return False
        except DecodeError:
            return True
        return True

    def list(self) -> List[UserGroup]:
        groups = []
        for payload in self.store.fetch_all(self.table):
            try:
                groups.append(decode(payload, UserGroup))
            except DecodeError as e:
                logger.warning(f"Skipping group record: {e.message}")
        return groups

    def create(self, group: UserGroup) -> None:
        if not group.id:
            raise InvalidInputError("group id cannot be empty")
        if self._exists(group.id):
            raise AlreadyExistsError("group already exists")
        self.store.insert(group.id, encode(group), self.table)
        logger.info(f"Created group {group.id}")

    def get(self, group_id: str) -> UserGroup:
        try:
            payload = self.store.fetch_one(self.table, group_id)
        except NotFoundError:
            raise NotFoundError(f"group {group_id} not found")
        return decode(payload, UserGroup)

    def update(self, group: UserGroup) -> None:
        if not group.id:
            raise InvalidInputError("group id cannot be empty")
        if not self._exists(group.id):
            raise NotFoundError(f"group {group.id} not found")
        self.store.insert(group.id, encode(group), self.table)
        logger.info(f"Updated group {group.id}")

    def delete(self, group_id: str) -> GroupDeletionReport:
        """Remove the group from every member, then delete the group record.

        Each member update only drops the reference if present, so a partial
        run can be repeated. A failed member update is recorded in the report
        and does not stop the cascade; the group record is deleted regardless.
        """
        if not group_id:
            raise InvalidInputError("group id cannot be empty")
        report = GroupDeletionReport(group_id=group_id)
        for user in self.users.list_all_users():
            if group_id not in user.user_groups:
                continue
            updated = user.model_copy(update={"user_groups": user.user_groups - {group_id}})
            try:
                self.users.upsert_user(updated)
            except NetAccessError as e:
                logger.warning(f"Could not remove group {group_id} from user {user.username}: {e.message}")
                report.failed_users.append(user.username)
                continue
            report.updated_users.append(user.username)

        self.store.delete(self.table, group_id)
        logger.info(
            f"Deleted group {group_id} ({len(report.updated_users)} members updated, "
            f"{len(report.failed_users)} failed)"
        )
        return report
