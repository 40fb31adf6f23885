"""
Tests for the NetworkConfig module.
"""
import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ledgertx_sdk.config import KnownAddresses, NetworkConfig

# Sample network configuration
MOCK_NETWORKS = {
    "test-network": {
        "networkId": 123,
        "hrpSuffix": "test",
        "knownAddresses": {
            "faucetComponentAddress": "component_test1faucet",
            "faucetPackageAddress": "package_test1faucet",
            "accountPackageAddress": "package_test1account",
            "xrdResourceAddress": "resource_test1xrd",
        }
    }
}


class TestNetworkConfig:
    """Test NetworkConfig class."""

    def test_load_networks_cached(self):
        """Test that networks are cached after first load."""
        NetworkConfig._networks_cache = MOCK_NETWORKS

        with patch("importlib.resources.files") as mock_files:
            result = NetworkConfig.load_networks()
            mock_files.assert_not_called()

        assert result == MOCK_NETWORKS

    def test_bundled_networks(self):
        """Test that the packaged networks.json loads and includes the simulator."""
        networks = NetworkConfig.load_networks()
        assert networks["simulator"]["networkId"] == 242
        assert NetworkConfig.load_networks() is networks

    def test_networks_file_override(self, tmp_path):
        """Test loading networks from LEDGERTX_NETWORKS_FILE."""
        path = tmp_path / "networks.json"
        path.write_text(json.dumps(MOCK_NETWORKS), encoding="utf-8")

        with patch.dict(os.environ, {"LEDGERTX_NETWORKS_FILE": str(path)}):
            assert NetworkConfig.load_networks() == MOCK_NETWORKS

    def test_get_network_by_name_and_id(self):
        """Test getting a network by name or numeric id."""
        NetworkConfig._networks_cache = MOCK_NETWORKS

        assert NetworkConfig.get_network("test-network") == MOCK_NETWORKS["test-network"]
        assert NetworkConfig.get_network(123) == MOCK_NETWORKS["test-network"]
        assert NetworkConfig.get_network_id("test-network") == 123
        assert NetworkConfig.get_network_name(123) == "test-network"

    def test_get_network_not_found(self):
        """Test getting a non-existent network."""
        NetworkConfig._networks_cache = MOCK_NETWORKS

        with pytest.raises(ValueError) as exc_info:
            NetworkConfig.get_network("non-existent-network")

        assert "test-network" in str(exc_info.value)

        with pytest.raises(ValueError):
            NetworkConfig.get_network(7)

    def test_get_network_bad_type(self):
        NetworkConfig._networks_cache = MOCK_NETWORKS
        with pytest.raises(TypeError):
            NetworkConfig.get_network(True)
        with pytest.raises(TypeError):
            NetworkConfig.get_network(1.5)

    def test_get_known_addresses(self):
        """Test known addresses from network config."""
        NetworkConfig._networks_cache = MOCK_NETWORKS

        addresses = NetworkConfig.get_known_addresses("test-network")

        assert isinstance(addresses, KnownAddresses)
        assert addresses.faucet_component_address == "component_test1faucet"
        assert addresses.xrd_resource_address == "resource_test1xrd"
        assert addresses.clock_component_address is None

    def test_get_known_addresses_env_var(self):
        """Test address override from environment variable."""
        NetworkConfig._networks_cache = MOCK_NETWORKS

        with patch.dict(os.environ, {"TEST_NETWORK_XRD_RESOURCE_ADDRESS": "resource_test1env"}):
            addresses = NetworkConfig.get_known_addresses(123)

        assert addresses.xrd_resource_address == "resource_test1env"
        assert addresses.faucet_component_address == "component_test1faucet"

    def test_missing_required_address(self):
        """Test that a network without a faucet address is rejected."""
        NetworkConfig._networks_cache = {"bare": {"networkId": 9, "knownAddresses": {}}}

        with pytest.raises(ValidationError):
            NetworkConfig.get_known_addresses("bare")
