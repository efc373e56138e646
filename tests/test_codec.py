import json

import pytest

from netaccess.core.exceptions import DecodeError
from netaccess.models.group import UserGroup
from netaccess.models.role import UserRolePermissionTemplate
from netaccess.models.user import User
from netaccess.services.codec import decode, encode


def test_role_payload_uses_snake_case_fields(custom_role):
    payload = json.loads(encode(custom_role))

    assert payload["id"] == "net1-operator"
    assert payload["deny_dashboard_access"] is True
    assert payload["network_level_access"]["hosts"]["host-a"] == {
        "create": False, "read": True, "update": True, "delete": False,
    }


def test_sets_are_encoded_as_sorted_arrays():
    user = User(username="bob", network_roles={"net1": {"b", "a"}}, user_groups={"g2", "g1"})
    payload = json.loads(encode(user))

    assert payload["user_groups"] == ["g1", "g2"]
    assert payload["network_roles"] == {"net1": ["a", "b"]}


def test_decode_restores_group():
    group = UserGroup(id="ops", network_roles={"net1": {"network-user"}}, meta_data="operators")
    assert decode(encode(group), UserGroup) == group


@pytest.mark.parametrize("payload", ["not json", "[]", '{"id": 5, "full_access": "maybe"}'])
def test_decode_rejects_malformed_payload(payload):
    with pytest.raises(DecodeError):
        decode(payload, UserRolePermissionTemplate)
