"""Role registry — CRUD over role permission templates."""

import logging
from typing import List, Optional

from netaccess.core.config import settings
from netaccess.core.exceptions import (
    AlreadyExistsError,
    DecodeError,
    InvalidInputError,
    NotFoundError,
)
from netaccess.db.seeds.seed_roles import seed_roles
from netaccess.db.store import RecordStore
from netaccess.models.role import UserRolePermissionTemplate
from netaccess.services.codec import decode, encode
from netaccess.services.group_service import GroupService
from netaccess.services.integrity import ensure_role_unused
from netaccess.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class RoleService:
    """Manages role permission templates in the record store."""

    def __init__(
        self,
        store: RecordStore,
        users: UserDirectory,
        groups: Optional[GroupService] = None,
        table: Optional[str] = None,
    ):
        self.store = store
        self.users = users
        self.groups = groups or GroupService(store, users)
        self.table = table or settings.ROLES_TABLE

    def bootstrap_defaults(self) -> None:
        """Write the four default templates, overwriting any stored copies."""
        seed_roles(self.store, self.table)

    def _exists(self, role_id: str) -> bool:
        try:
            self.store.fetch_one(self.table, role_id)
        except NotFoundError:
            return False
        except DecodeError:
            return True
        return True

    def list(self) -> List[UserRolePermissionTemplate]:
        """List stored templates, skipping records that fail to decode."""
        roles = []
        for payload in self.store.fetch_all(self.table):
            try:
                roles.append(decode(payload, UserRolePermissionTemplate))
            except DecodeError as e:
                logger.warning(f"Skipping role record: {e.message}")
        return roles

    def create(self, template: UserRolePermissionTemplate) -> None:
        """Insert a new role.

        Raises:
            InvalidInputError: If the role ID is empty.
            AlreadyExistsError: If a role with this ID is stored.
        """
        if not template.id:
            raise InvalidInputError("role id cannot be empty")
        if self._exists(template.id):
            raise AlreadyExistsError("role already exists")
        self.store.insert(template.id, encode(template), self.table)
        logger.info(f"Created role {template.id}")

    def get(self, role_id: str) -> UserRolePermissionTemplate:
        try:
            payload = self.store.fetch_one(self.table, role_id)
        except NotFoundError:
            raise NotFoundError(f"role {role_id} not found")
        return decode(payload, UserRolePermissionTemplate)

    def update(self, template: UserRolePermissionTemplate) -> None:
        """Replace an existing role. Never creates one."""
        if not template.id:
            raise InvalidInputError("role id cannot be empty")
        if not self._exists(template.id):
            raise NotFoundError(f"role {template.id} not found")
        self.store.insert(template.id, encode(template), self.table)
        logger.info(f"Updated role {template.id}")

    def delete(self, role_id: str) -> None:
        """Delete a role once no user or joined group references it.

        Raises:
            InvalidInputError: If the role ID is empty.
            RoleInUseError: If the role is still referenced.
        """
        if not role_id:
            raise InvalidInputError("role id cannot be empty")
        ensure_role_unused(role_id, self.users.list_all_users(), self.groups.get)
        self.store.delete(self.table, role_id)
        logger.info(f"Deleted role {role_id}")
