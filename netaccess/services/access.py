"""Access resolver — does a role template grant an operation on a resource?"""

import logging
from typing import Optional

from netaccess.core.config import settings
from netaccess.models.resource import RsrcPermissionScope, all_resource_id
from netaccess.models.role import UserRolePermissionTemplate

logger = logging.getLogger(__name__)

# Operation name (API verb or HTTP method) -> scope field.
OPERATION_SCOPES = {
    "read": "read",
    "get": "read",
    "head": "read",
    "create": "create",
    "post": "create",
    "update": "update",
    "put": "update",
    "patch": "update",
    "delete": "delete",
}


def scope_allows(scope: RsrcPermissionScope, operation: str) -> bool:
    """Return the scope flag for ``operation``; unknown operations are denied."""
    field = OPERATION_SCOPES.get(operation.lower())
    if field is None:
        return False
    return getattr(scope, field)


def has_network_resource_scope(
    template: UserRolePermissionTemplate,
    network_id: str,
    resource_type: str,
    resource_id: str,
    operation: str,
    enforce_operation_scope: Optional[bool] = None,
) -> bool:
    """Decide whether ``template`` grants ``operation`` on a resource in a network.

    With ``enforce_operation_scope`` off (the default, see
    ``NETACCESS_ENFORCE_OPERATION_SCOPE``) only an entry for the exact resource ID
    counts, and it grants any operation. With it on, the ``all_<type>`` entry
    stands in for IDs without their own entry, and the entry's flag for the
    requested operation decides.
    """
    if template.full_access:
        return True

    if enforce_operation_scope is None:
        enforce_operation_scope = settings.NETACCESS_ENFORCE_OPERATION_SCOPE

    resources = template.network_level_access.get(resource_type)
    if resources is None:
        logger.debug(f"Role {template.id} has no {resource_type} access in {network_id}")
        return False

    scope = resources.get(resource_id)
    if scope is None and enforce_operation_scope:
        scope = resources.get(all_resource_id(resource_type))
    if scope is None:
        logger.debug(f"Role {template.id} has no access to {resource_type}/{resource_id} in {network_id}")
        return False

    if not enforce_operation_scope:
        return True
    return scope_allows(scope, operation)
