"""Floating IP, port and network lookups.

Each function takes an explicit client handle: a neutronclient
``Client`` for Networking lookups or a novaclient ``Client`` for the
instance interface lookup. None of them modify cloud resources.
"""

import ipaddress
import re
import uuid
from collections.abc import Mapping
from typing import List, Sequence, Union

from neutronclient.common import exceptions as neutron_exceptions
from oslo_log import log as logging

from .exceptions import (
    CIDRParseError,
    DecodeError,
    ExternalNetworkNotFound,
    FloatingIPAlreadyAssociated,
    FloatingIPNotFound,
    NetworkNotExternal,
    NoFreeFloatingIP,
    NoInstanceInterfaces,
    ProvisioningNetworkNotFound,
)
from .models import ExternalNetwork, FloatingIP, Interface, Subnet
from .pagination import iter_pages

LOG = logging.getLogger(__name__)

IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

# Status of floating IPs not bound to any port
FLOATING_IP_DOWN = "DOWN"

_UUID_HYPHENATED = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
_UUID_FORMS = re.compile(
    rf"{_UUID_HYPHENATED}"
    rf"|\{{{_UUID_HYPHENATED}\}}"
    rf"|[uU][rR][nN]:[uU][uU][iI][dD]:{_UUID_HYPHENATED}"
    r"|[0-9a-fA-F]{32}"
)

# Address, one slash, decimal prefix length
_CIDR_FORM = re.compile(r"[^/]+/[0-9]+")


def _extract(response, collection: str) -> list:
    records = response.get(collection) if isinstance(response, Mapping) else None
    if not isinstance(records, list):
        raise DecodeError(resource=collection, details=f"response has no '{collection}' list")
    return records


def _parse_cidr(cidr: str) -> IPNetwork:
    if not isinstance(cidr, str) or not _CIDR_FORM.fullmatch(cidr):
        raise CIDRParseError(cidr=cidr, details="expected ADDRESS/PREFIXLEN")
    try:
        return ipaddress.ip_network(cidr, strict=False)
    except (TypeError, ValueError) as e:
        raise CIDRParseError(cidr=cidr, details=str(e))


def check_floating_ip(client, floating_ip_id: str) -> FloatingIP:
    """Get a floating IP by ID and check that it is not associated.

    Args:
        client: Neutron client
        floating_ip_id: Floating IP UUID

    Returns:
        FloatingIP that can be associated

    Raises:
        FloatingIPNotFound: Floating IP does not exist
        FloatingIPAlreadyAssociated: Floating IP is bound to a port
        DecodeError: Unexpected response shape
    """
    try:
        response = client.show_floatingip(floating_ip_id)
    except neutron_exceptions.NotFound as e:
        raise FloatingIPNotFound(floating_ip_id=floating_ip_id) from e

    if not isinstance(response, Mapping) or "floatingip" not in response:
        raise DecodeError(resource="floating IP", details="response has no 'floatingip' object")
    floating_ip = FloatingIP.from_dict(response["floatingip"])

    if floating_ip.is_associated:
        raise FloatingIPAlreadyAssociated(floating_ip_id=floating_ip_id, port_id=floating_ip.port_id)

    return floating_ip


def find_free_floating_ip(client) -> FloatingIP:
    """Return the first unassociated floating IP in listing order.

    Floating IPs are listed page by page with status DOWN; iteration stops
    at the first candidate without a port.

    Raises:
        NoFreeFloatingIP: Every listed floating IP is associated
        DecodeError: A page could not be decoded
    """
    for page in iter_pages(client.list_floatingips, "floatingips", status=FLOATING_IP_DOWN):
        for record in page:
            candidate = FloatingIP.from_dict(record)
            if candidate.is_associated:
                continue
            LOG.debug("Found free floating IP %s", candidate.id)
            return candidate

    raise NoFreeFloatingIP()


def get_instance_port_id(client, instance_id: str, instance_float_net: str) -> str:
    """Return the instance port to use for floating IP association.

    The first interface is used unless an interface on
    ``instance_float_net`` exists; when several do, the last one wins.

    Args:
        client: Nova client
        instance_id: Server UUID
        instance_float_net: Preferred network UUID

    Returns:
        Port UUID

    Raises:
        NoInstanceInterfaces: Instance has no interfaces
    """
    interfaces: List[Interface] = [Interface.from_nova(i) for i in client.servers.interface_list(instance_id)]
    if not interfaces:
        raise NoInstanceInterfaces(instance_id=instance_id)

    selected_interface = 0
    for i, interface in enumerate(interfaces):
        LOG.debug("Instance interface: %d: %s", i, interface)
        if interface.net_id == instance_float_net:
            LOG.debug("Found preferred interface: %d", i)
            selected_interface = i
            LOG.debug("Using interface value: %d", selected_interface)

    return interfaces[selected_interface].port_id


def _is_uuid(value) -> bool:
    """Return True for hyphenated, braced, urn:uuid: or 32-hex UUID strings."""
    if not isinstance(value, str) or not _UUID_FORMS.fullmatch(value):
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def check_floating_ip_network(client, network_ref: str) -> str:
    """Return a Networking service ID for a network UUID or name."""
    if not _is_uuid(network_ref):
        return get_floating_ip_network_id_by_name(client, network_ref)

    return network_ref


def get_floating_ip_network_id_by_name(client, network_name: str) -> str:
    """Search for an external network ID by name.

    Only the first network with the name is considered.

    Raises:
        ExternalNetworkNotFound: No network has this name
        NetworkNotExternal: First network with this name is not external
        DecodeError: Unexpected response shape
    """
    external_networks = [
        ExternalNetwork.from_dict(record)
        for record in _extract(client.list_networks(name=network_name), "networks")
    ]

    if not external_networks:
        raise ExternalNetworkNotFound(network_name=network_name)
    if len(external_networks) > 1:
        LOG.warning(
            "Found %d networks named %s, using %s",
            len(external_networks), network_name, external_networks[0].id,
        )

    if not external_networks[0].external:
        raise NetworkNotExternal(network_name=network_name)

    return external_networks[0].id


def contains_net(a: IPNetwork, b: IPNetwork) -> bool:
    """Return True whenever network ``a`` contains network ``b``."""
    if a.version != b.version:
        return False
    return b.network_address in a and a.prefixlen <= b.prefixlen


def discover_provisioning_network(client, cidrs: Sequence[str]) -> str:
    """Find the first network whose subnet lies within one of the given ranges.

    Subnets are checked in listing order, candidate ranges in the given
    order. A malformed subnet or candidate CIDR aborts the search.

    Args:
        client: Neutron client
        cidrs: Candidate CIDR strings (e.g., ["10.0.0.0/16"])

    Returns:
        Network UUID

    Raises:
        CIDRParseError: Malformed subnet or candidate CIDR
        ProvisioningNetworkNotFound: No subnet matched
    """
    subnets = [Subnet.from_dict(record) for record in _extract(client.list_subnets(), "subnets")]

    for subnet in subnets:
        try:
            tenant_net = _parse_cidr(subnet.cidr)
        except CIDRParseError:
            LOG.error("Subnet %s has malformed CIDR %r", subnet.id, subnet.cidr)
            raise

        for cidr in cidrs:
            candidate_net = _parse_cidr(cidr)
            if contains_net(candidate_net, tenant_net):
                LOG.info(
                    "Discovered provisioning network %s (subnet %s %s within %s)",
                    subnet.network_id, subnet.id, subnet.cidr, cidr,
                )
                return subnet.network_id

    raise ProvisioningNetworkNotFound()
