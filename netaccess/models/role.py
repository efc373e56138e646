"""Role permission template model."""

from typing import Dict

from pydantic import BaseModel, Field

from netaccess.models.resource import RsrcPermissionScope

SUPER_ADMIN_ROLE = "super-admin"
ADMIN_ROLE = "admin"
NETWORK_ADMIN_ROLE = "network-admin"
NETWORK_USER_ROLE = "network-user"


class UserRolePermissionTemplate(BaseModel):
    """Assignable permission set, keyed by ``id`` in the role registry.

    ``network_level_access`` maps resource type -> resource instance ID ->
    granted scope. ``full_access`` bypasses the table entirely.
    """

    id: str = ""
    default: bool = False
    full_access: bool = False
    is_network_role: bool = False
    deny_dashboard_access: bool = False
    network_id: str = ""
    network_level_access: Dict[str, Dict[str, RsrcPermissionScope]] = Field(default_factory=dict)
