"""
floatnet - OpenStack helpers for floating IP association.

This package provides lookups used before associating a floating IP with a
server: finding a free floating IP, resolving the instance port, resolving
the external network and discovering the provisioning network.
"""

__version__ = "0.1.0"
