"""User model as seen by the access control core."""

from typing import Dict, Set

from pydantic import BaseModel, Field, field_serializer


class User(BaseModel):
    """Principal with a platform role, direct network roles and group memberships."""

    username: str
    platform_role_id: str = ""
    network_roles: Dict[str, Set[str]] = Field(default_factory=dict)
    user_groups: Set[str] = Field(default_factory=set)

    def network_role_ids(self) -> Set[str]:
        return {role_id for roles in self.network_roles.values() for role_id in roles}

    @field_serializer("network_roles")
    def _sorted_network_roles(self, value: Dict[str, Set[str]]):
        return {network: sorted(roles) for network, roles in value.items()}

    @field_serializer("user_groups")
    def _sorted_user_groups(self, value: Set[str]):
        return sorted(value)
