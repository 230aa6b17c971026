"""floatnet exceptions."""


class FloatNetException(Exception):
    """Base exception for floatnet errors."""

    message = "An unknown exception occurred."

    def __init__(self, message=None, **kwargs):
        """Initialize exception with optional custom message."""
        self.kwargs = kwargs
        if message:
            self.message = message
        super(FloatNetException, self).__init__(self.message % kwargs)


class ResourceNotFound(FloatNetException):
    """Generic resource not found error.

    Use specific subclasses (FloatingIPNotFound, ExternalNetworkNotFound)
    when the resource type is known.
    """

    message = "Resource %(resource_id)s not found"


class FloatingIPNotFound(ResourceNotFound):
    """Floating IP not found."""

    message = "Floating IP %(floating_ip_id)s not found"


class ExternalNetworkNotFound(ResourceNotFound):
    """No network matches the given name."""

    message = "Can't find external network %(network_name)s"


class FloatingIPAlreadyAssociated(FloatNetException):
    """Floating IP is already bound to a port."""

    message = "Provided floating IP '%(floating_ip_id)s' is already associated with port '%(port_id)s'"

    @property
    def floating_ip_id(self):
        return self.kwargs.get("floating_ip_id")

    @property
    def port_id(self):
        return self.kwargs.get("port_id")


class NoFreeFloatingIP(FloatNetException):
    """No unassociated floating IP is available."""

    message = "No free floating IPs found"


class NoInstanceInterfaces(FloatNetException):
    """Instance has no attached network interfaces."""

    message = "Instance '%(instance_id)s' has no interfaces"


class NetworkNotExternal(FloatNetException):
    """Network found by name is not an external network."""

    message = "Network %(network_name)s is not external"


class DecodeError(FloatNetException):
    """Service response could not be decoded into the expected shape."""

    message = "Failed to decode %(resource)s: %(details)s"


class CIDRParseError(FloatNetException):
    """Malformed CIDR string."""

    message = "Invalid CIDR '%(cidr)s': %(details)s"

    @property
    def cidr(self):
        return self.kwargs.get("cidr")


class ProvisioningNetworkNotFound(FloatNetException):
    """No subnet lies within any of the candidate ranges.

    This is a non-retryable error: the operator must either create a subnet
    inside one of the ranges or change the configured ranges.
    """

    message = "Failed to discover a provisioning network"


class ClientConfigurationError(FloatNetException):
    """Keystone authentication is not configured for a service."""

    message = (
        "Authentication not configured for [%(group)s]. "
        "Please configure auth_url, auth_type, username, password, project_name, etc."
    )
