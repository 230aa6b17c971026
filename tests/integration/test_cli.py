"""
Integration tests for CLI commands.
"""

from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from floatnet.cli.cli import app
from floatnet.exceptions import NoFreeFloatingIP
from floatnet.models import FloatingIP


@pytest.fixture
def conf():
    conf = Mock()
    conf.floatnet.floating_ip_network = "public"
    conf.floatnet.instance_float_net = "net-a"
    conf.floatnet.provisioning_cidrs = ["10.0.0.0/16"]
    return conf


@pytest.fixture(autouse=True)
def mock_load_config(conf):
    with patch("floatnet.cli.cli.load_config", return_value=conf) as mock_load:
        yield mock_load


@pytest.fixture(autouse=True)
def mock_logging():
    with patch("floatnet.cli.cli.logging") as mock_log:
        yield mock_log


class TestFloatingIPCommands:
    """Tests for floating-ip commands."""

    @pytest.mark.integration
    @patch("floatnet.cli.commands.floating_ip.check_floating_ip")
    @patch("floatnet.cli.commands.floating_ip.get_neutron_client")
    def test_check_success(self, mock_get_client, mock_check, conf):
        mock_check.return_value = FloatingIP(id="fip-1", floating_ip_address="203.0.113.10")

        result = CliRunner().invoke(app, ["floating-ip", "check", "fip-1"])

        assert result.exit_code == 0
        assert "fip-1 203.0.113.10" in result.stdout
        mock_get_client.assert_called_once_with(conf)
        mock_check.assert_called_once_with(mock_get_client.return_value, "fip-1")

    @pytest.mark.integration
    @patch("floatnet.cli.commands.floating_ip.find_free_floating_ip")
    @patch("floatnet.cli.commands.floating_ip.get_neutron_client")
    def test_find_free_none_available(self, mock_get_client, mock_find):
        mock_find.side_effect = NoFreeFloatingIP()

        result = CliRunner().invoke(app, ["floating-ip", "find-free"])

        assert result.exit_code == 1
        assert "No free floating IPs found" in result.output

    @pytest.mark.integration
    @patch("floatnet.cli.commands.floating_ip.find_free_floating_ip")
    @patch("floatnet.cli.commands.floating_ip.get_neutron_client")
    def test_find_free_success(self, mock_get_client, mock_find):
        mock_find.return_value = FloatingIP(id="fip-9")

        result = CliRunner().invoke(app, ["floating-ip", "find-free"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "fip-9"


class TestInstanceCommands:
    """Tests for instance commands."""

    @pytest.mark.integration
    @patch("floatnet.cli.commands.instance.get_instance_port_id", return_value="port-3")
    @patch("floatnet.cli.commands.instance.get_nova_client")
    def test_port_uses_configured_network(self, mock_get_client, mock_get_port):
        result = CliRunner().invoke(app, ["instance", "port", "server-1"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "port-3"
        mock_get_port.assert_called_once_with(mock_get_client.return_value, "server-1", "net-a")

    @pytest.mark.integration
    @patch("floatnet.cli.commands.instance.get_instance_port_id", return_value="port-2")
    @patch("floatnet.cli.commands.instance.get_nova_client")
    def test_port_network_option(self, mock_get_client, mock_get_port):
        result = CliRunner().invoke(app, ["instance", "port", "server-1", "--network", "net-b"])

        assert result.exit_code == 0
        mock_get_port.assert_called_once_with(mock_get_client.return_value, "server-1", "net-b")


class TestNetworkCommands:
    """Tests for network commands."""

    @pytest.mark.integration
    @patch("floatnet.cli.commands.network.check_floating_ip_network", return_value="ext-net-uuid")
    @patch("floatnet.cli.commands.network.get_neutron_client")
    def test_resolve_defaults_to_config(self, mock_get_client, mock_resolve):
        result = CliRunner().invoke(app, ["network", "resolve"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "ext-net-uuid"
        mock_resolve.assert_called_once_with(mock_get_client.return_value, "public")

    @pytest.mark.integration
    @patch("floatnet.cli.commands.network.get_neutron_client")
    def test_resolve_without_reference(self, mock_get_client, conf):
        conf.floatnet.floating_ip_network = None

        result = CliRunner().invoke(app, ["network", "resolve"])

        assert result.exit_code == 1
        assert "floating_ip_network is not configured" in result.output
        mock_get_client.assert_not_called()

    @pytest.mark.integration
    @patch("floatnet.cli.commands.network.discover_provisioning_network", return_value="prov-net-uuid")
    @patch("floatnet.cli.commands.network.get_neutron_client")
    def test_discover_with_cidrs(self, mock_get_client, mock_discover):
        result = CliRunner().invoke(
            app, ["network", "discover", "--cidr", "192.168.0.0/16", "--cidr", "10.0.0.0/8"]
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "prov-net-uuid"
        mock_discover.assert_called_once_with(mock_get_client.return_value, ["192.168.0.0/16", "10.0.0.0/8"])

    @pytest.mark.integration
    @patch("floatnet.cli.commands.network.discover_provisioning_network", return_value="prov-net-uuid")
    @patch("floatnet.cli.commands.network.get_neutron_client")
    def test_discover_defaults_to_config(self, mock_get_client, mock_discover):
        result = CliRunner().invoke(app, ["network", "discover"])

        assert result.exit_code == 0
        mock_discover.assert_called_once_with(mock_get_client.return_value, ["10.0.0.0/16"])


@pytest.mark.integration
def test_config_file_and_debug_passed(mock_load_config, mock_logging, conf):
    with patch("floatnet.cli.commands.network.get_neutron_client"), \
            patch("floatnet.cli.commands.network.check_floating_ip_network", return_value="x"):
        result = CliRunner().invoke(
            app, ["--config-file", "/etc/floatnet/floatnet.conf", "--debug", "network", "resolve", "public"]
        )

    assert result.exit_code == 0
    mock_load_config.assert_called_once_with(
        config_files=["/etc/floatnet/floatnet.conf"], args=["--debug"]
    )
    mock_logging.setup.assert_called_once_with(conf, "floatnet")
