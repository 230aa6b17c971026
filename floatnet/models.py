"""Records decoded from Networking and Compute service responses."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import DecodeError


def _require(data: Any, key: str, resource: str) -> Any:
    if not isinstance(data, Mapping):
        raise DecodeError(resource=resource, details=f"expected an object, got {type(data).__name__}")
    if not data.get(key):
        raise DecodeError(resource=resource, details=f"missing '{key}'")
    return data[key]


@dataclass
class FloatingIP:
    """Floating IP record.

    Attributes:
        id: Floating IP UUID
        status: Service status (e.g., "DOWN", "ACTIVE")
        floating_ip_address: Public address
        floating_network_id: External network the address belongs to
        port_id: Associated internal port, empty when unassociated
    """

    id: str
    status: str = ""
    floating_ip_address: Optional[str] = None
    floating_network_id: Optional[str] = None
    port_id: str = ""

    @property
    def is_associated(self) -> bool:
        return bool(self.port_id)

    @classmethod
    def from_dict(cls, data) -> "FloatingIP":
        fip_id = _require(data, "id", "floating IP")
        return cls(
            id=fip_id,
            status=data.get("status") or "",
            floating_ip_address=data.get("floating_ip_address"),
            floating_network_id=data.get("floating_network_id"),
            port_id=data.get("port_id") or "",
        )


@dataclass
class Interface:
    """Network interface attached to a server."""

    port_id: str
    net_id: str
    mac_addr: Optional[str] = None

    @classmethod
    def from_nova(cls, iface) -> "Interface":
        """Build from a novaclient interface resource."""
        try:
            port_id = iface.port_id
            net_id = iface.net_id
        except AttributeError as e:
            raise DecodeError(resource="instance interface", details=str(e))
        return cls(port_id=port_id, net_id=net_id, mac_addr=getattr(iface, "mac_addr", None))


@dataclass
class ExternalNetwork:
    """Network combined with the external-net extension flag."""

    id: str
    name: str = ""
    external: bool = False

    @classmethod
    def from_dict(cls, data) -> "ExternalNetwork":
        net_id = _require(data, "id", "network")
        external = data.get("router:external", False)
        if not isinstance(external, bool):
            raise DecodeError(resource="network", details=f"invalid router:external value {external!r}")
        return cls(id=net_id, name=data.get("name") or "", external=external)


@dataclass
class Subnet:
    id: str
    network_id: str
    cidr: str

    @classmethod
    def from_dict(cls, data) -> "Subnet":
        subnet_id = _require(data, "id", "subnet")
        return cls(
            id=subnet_id,
            network_id=_require(data, "network_id", "subnet"),
            cidr=data.get("cidr") or "",
        )
