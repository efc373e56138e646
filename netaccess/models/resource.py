"""Resource types and per-resource permission scopes."""

from pydantic import BaseModel


HOSTS = "hosts"
RELAYS = "relays"
REMOTE_ACCESS_GW = "remote_access_gw"
EXT_CLIENTS = "extclients"
INET_GW = "inet_gw"
EGRESS = "egress"
NETWORKS = "networks"
ENROLLMENT_KEY = "enrollment_key"
USERS = "users"
ACLS = "acls"
DNS = "dns"
FAILOVER = "failover"


def all_resource_id(resource_type: str) -> str:
    """Reserved instance ID standing in for every resource of a type."""
    return f"all_{resource_type}"


ALL_REMOTE_ACCESS_GW_ID = all_resource_id(REMOTE_ACCESS_GW)


class RsrcPermissionScope(BaseModel):
    """Operations granted on a single resource instance."""

    create: bool = False
    read: bool = False
    update: bool = False
    delete: bool = False
