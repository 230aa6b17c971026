"""Networking and Compute client construction.

Clients authenticate with keystoneauth1 sessions loaded from the [neutron]
and [nova] config groups, following the standard OpenStack pattern.
"""

from keystoneauth1 import loading as ks_loading
from neutronclient.v2_0 import client as neutron_client
from novaclient import client as nova_client
from oslo_log import log as logging

from .configuration import CONF_GROUP, NEUTRON_GROUP, NOVA_GROUP
from .exceptions import ClientConfigurationError

LOG = logging.getLogger(__name__)


def _load_session(conf, group):
    """Load a keystoneauth1 session from a config group.

    Raises:
        ClientConfigurationError: Authentication not configured for the group
    """
    auth = ks_loading.load_auth_from_conf_options(conf, group)
    if not auth:
        raise ClientConfigurationError(group=group)

    return ks_loading.load_session_from_conf_options(conf, group, auth=auth)


def get_neutron_client(conf):
    """Create Neutron client from the [neutron] section."""
    session = _load_session(conf, NEUTRON_GROUP)
    region_name = conf[CONF_GROUP].region_name
    LOG.debug("Creating Neutron client (region=%s)", region_name)
    return neutron_client.Client(session=session, region_name=region_name)


def get_nova_client(conf):
    """Create Nova client from the [nova] section."""
    session = _load_session(conf, NOVA_GROUP)
    region_name = conf[CONF_GROUP].region_name
    version = conf[CONF_GROUP].nova_api_version
    LOG.debug("Creating Nova client (version=%s, region=%s)", version, region_name)
    return nova_client.Client(version, session=session, region_name=region_name)
