"""
Pytest configuration and fixtures.
"""

import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: CLI tests driven through the typer app")


def _make_pager(pages, fetched=None):
    """Build a list_* side effect yielding ``pages`` when retrieve_all=False.

    Each page handed out is appended to ``fetched`` so tests can check how
    many pages were requested.
    """

    def list_func(retrieve_all=True, **filters):
        assert retrieve_all is False

        def generate():
            for page in pages:
                if fetched is not None:
                    fetched.append(page)
                yield page

        return generate()

    return list_func


def _make_interface(net_id, port_id):
    """Create a novaclient-like interface resource."""
    return SimpleNamespace(net_id=net_id, port_id=port_id, mac_addr="fa:16:3e:00:00:01")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def mock_neutron_client():
    """Create mock Neutron client."""
    client = Mock()

    client.show_floatingip.return_value = {
        "floatingip": {
            "id": "fip-uuid-123",
            "status": "DOWN",
            "floating_ip_address": "203.0.113.10",
            "floating_network_id": "ext-net-uuid",
            "port_id": None,
        }
    }

    client.list_floatingips.side_effect = _make_pager([{"floatingips": []}])

    client.list_networks.return_value = {
        "networks": [
            {
                "id": "ext-net-uuid",
                "name": "public",
                "router:external": True,
            }
        ]
    }

    client.list_subnets.return_value = {
        "subnets": [
            {
                "id": "subnet-uuid-456",
                "network_id": "prov-net-uuid",
                "cidr": "10.0.1.0/24",
            }
        ]
    }

    return client


@pytest.fixture
def mock_nova_client():
    """Create mock Nova client."""
    client = Mock()
    client.servers.interface_list.return_value = [
        _make_interface("net-a", "port-1"),
        _make_interface("net-b", "port-2"),
        _make_interface("net-a", "port-3"),
    ]
    return client


@pytest.fixture
def make_pager():
    """Factory for paginated list_* side effects."""
    return _make_pager


@pytest.fixture
def make_interface():
    """Factory for novaclient-like interface resources."""
    return _make_interface
