"""Configuration options for floatnet."""

from keystoneauth1 import loading as ks_loading
from oslo_config import cfg
from oslo_log import log as logging

# Configuration group names
CONF_GROUP = "floatnet"
NEUTRON_GROUP = "neutron"
NOVA_GROUP = "nova"

PROJECT = "floatnet"


def _get_floatnet_opts():
    """Get floatnet configuration options.

    Returns:
        List of oslo_config options
    """
    return [
        cfg.StrOpt(
            "floating_ip_network",
            default=None,
            help="External network UUID or name used for floating IPs",
        ),
        cfg.StrOpt(
            "instance_float_net",
            default=None,
            help=(
                "Preferred instance network UUID. The instance port on this "
                "network is used for floating IP association; the first "
                "interface is used when the instance has no port on it."
            ),
        ),
        cfg.ListOpt(
            "provisioning_cidrs",
            default=[],
            help=(
                "Comma-separated CIDRs used to discover the provisioning network "
                "(e.g., 10.0.0.0/16,192.168.0.0/24)"
            ),
        ),
        cfg.StrOpt(
            "region_name",
            default=None,
            help="Region used when building Networking and Compute clients",
        ),
        cfg.StrOpt(
            "nova_api_version",
            default="2.1",
            help="Compute API microversion",
        ),
    ]


def register_opts(conf):
    """Register floatnet, keystoneauth and logging options.

    Args:
        conf: oslo_config.cfg.ConfigOpts instance
    """
    conf.register_opts(_get_floatnet_opts(), group=CONF_GROUP)
    for group in (NEUTRON_GROUP, NOVA_GROUP):
        ks_loading.register_session_conf_options(conf, group)
        ks_loading.register_auth_conf_options(conf, group)
    logging.register_options(conf)


def list_opts():
    """Return a list of floatnet options for oslo-config-generator.

    Returns:
        List of (group_name, options) tuples
    """
    return [
        (CONF_GROUP, _get_floatnet_opts()),
    ]


def load_config(config_files=None, args=None):
    """Build and parse a configuration object.

    Args:
        config_files: Config file paths (default: oslo.config search path
            for the floatnet project)
        args: Command line arguments for oslo.config (default: none)

    Returns:
        Parsed oslo_config.cfg.ConfigOpts
    """
    conf = cfg.ConfigOpts()
    register_opts(conf)
    conf(
        args=args or [],
        project=PROJECT,
        default_config_files=config_files,
    )
    return conf
