"""Models package — re-export the domain models."""

from netaccess.models.resource import RsrcPermissionScope
from netaccess.models.role import UserRolePermissionTemplate
from netaccess.models.group import UserGroup
from netaccess.models.user import User

__all__ = [
    "RsrcPermissionScope", "UserRolePermissionTemplate", "UserGroup", "User",
]
