"""Seed the four default role templates into the record store."""

import logging
from typing import List, Optional

from netaccess.core.config import settings
from netaccess.db.store import RecordStore
from netaccess.models.resource import ALL_REMOTE_ACCESS_GW_ID, REMOTE_ACCESS_GW, RsrcPermissionScope
from netaccess.models.role import (
    ADMIN_ROLE,
    NETWORK_ADMIN_ROLE,
    NETWORK_USER_ROLE,
    SUPER_ADMIN_ROLE,
    UserRolePermissionTemplate,
)
from netaccess.services.codec import encode

logger = logging.getLogger(__name__)


def default_role_templates() -> List[UserRolePermissionTemplate]:
    """Fresh copies of the built-in templates."""
    return [
        UserRolePermissionTemplate(
            id=SUPER_ADMIN_ROLE,
            default=True,
            full_access=True,
        ),
        UserRolePermissionTemplate(
            id=ADMIN_ROLE,
            default=True,
            full_access=True,
        ),
        UserRolePermissionTemplate(
            id=NETWORK_ADMIN_ROLE,
            default=True,
            is_network_role=True,
            full_access=True,
            network_level_access={},
        ),
        UserRolePermissionTemplate(
            id=NETWORK_USER_ROLE,
            default=True,
            full_access=False,
            deny_dashboard_access=False,
            network_level_access={
                REMOTE_ACCESS_GW: {
                    ALL_REMOTE_ACCESS_GW_ID: RsrcPermissionScope(read=True),
                },
            },
        ),
    ]


def seed_roles(store: RecordStore, table: Optional[str] = None) -> None:
    """Write (or overwrite) the default roles. Safe to repeat."""
    table = table or settings.ROLES_TABLE
    templates = default_role_templates()
    for template in templates:
        store.insert(template.id, encode(template), table)
    logger.info(f"Seeded {len(templates)} default roles")
