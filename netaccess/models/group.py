"""User group model."""

from typing import Dict, Set

from pydantic import BaseModel, Field, field_serializer


class UserGroup(BaseModel):
    """Named bundle of network roles applied to every member.

    Membership lives on the user record (``User.user_groups``), not here.
    """

    id: str = ""
    network_roles: Dict[str, Set[str]] = Field(default_factory=dict)
    meta_data: str = ""

    def role_ids(self) -> Set[str]:
        """All role IDs referenced by the group, across networks."""
        return {role_id for roles in self.network_roles.values() for role_id in roles}

    @field_serializer("network_roles")
    def _sorted_network_roles(self, value: Dict[str, Set[str]]):
        return {network: sorted(roles) for network, roles in value.items()}
