"""Referential integrity checks run before a role is deleted."""

import logging
from typing import Callable, Iterable

from netaccess.core.exceptions import DecodeError, NotFoundError, RoleInUseError
from netaccess.models.group import UserGroup
from netaccess.models.user import User

logger = logging.getLogger(__name__)

GROUP_USES_ROLE = "role cannot be deleted as active user groups are using this role"
USER_USES_ROLE = "active roles cannot be deleted.switch existing users to a new role before deleting"


def ensure_role_unused(
    role_id: str,
    users: Iterable[User],
    get_group: Callable[[str], UserGroup],
) -> None:
    """Scan every user (and the groups they joined) for references to ``role_id``.

    Groups that cannot be loaded are skipped; a dangling membership never
    blocks the deletion.

    Raises:
        RoleInUseError: On the first live reference found.
    """
    for user in users:
        for group_id in sorted(user.user_groups):
            try:
                group = get_group(group_id)
            except (NotFoundError, DecodeError):
                logger.debug(f"User {user.username} references unloadable group {group_id}")
                continue
            if role_id in group.role_ids():
                raise RoleInUseError(GROUP_USES_ROLE)

        if user.platform_role_id == role_id:
            raise RoleInUseError(USER_USES_ROLE)
        if role_id in user.network_role_ids():
            raise RoleInUseError(USER_USES_ROLE)
