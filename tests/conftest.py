"""Shared pytest fixtures for the access control tests."""

import pytest

from netaccess.db.store import InMemoryRecordStore
from netaccess.models.group import UserGroup
from netaccess.models.resource import RsrcPermissionScope
from netaccess.models.role import UserRolePermissionTemplate
from netaccess.models.user import User
from netaccess.services.group_service import GroupService
from netaccess.services.role_service import RoleService
from netaccess.services.user_directory import RecordUserDirectory


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def users(store) -> RecordUserDirectory:
    return RecordUserDirectory(store)


@pytest.fixture
def groups(store, users) -> GroupService:
    return GroupService(store, users)


@pytest.fixture
def roles(store, users, groups) -> RoleService:
    return RoleService(store, users, groups)


@pytest.fixture
def custom_role() -> UserRolePermissionTemplate:
    """A non-default network role with a mixed scope matrix."""
    return UserRolePermissionTemplate(
        id="net1-operator",
        is_network_role=True,
        deny_dashboard_access=True,
        network_id="net1",
        network_level_access={
            "hosts": {
                "host-a": RsrcPermissionScope(read=True, update=True),
                "all_hosts": RsrcPermissionScope(read=True),
            },
            "dns": {"dns-1": RsrcPermissionScope(create=True, delete=True)},
        },
    )


@pytest.fixture
def make_user(users):
    def _make(username, platform_role_id="", network_roles=None, user_groups=()):
        user = User(
            username=username,
            platform_role_id=platform_role_id,
            network_roles=network_roles or {},
            user_groups=set(user_groups),
        )
        users.upsert_user(user)
        return user
    return _make


@pytest.fixture
def make_group(groups):
    def _make(group_id, network_roles=None):
        group = UserGroup(id=group_id, network_roles=network_roles or {})
        groups.create(group)
        return group
    return _make
