"""
Configuration defaults and network registry for the ledgertx SDK.
"""
import importlib.resources
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# Transaction construction defaults
DEFAULT_MAX_EPOCH_WINDOW = 100
DEFAULT_EXPIRES_AFTER_EPOCHS = 2
DEFAULT_LOCK_FEE = 5
DEFAULT_COST_UNIT_LIMIT = 100_000_000
DEFAULT_TIP_PERCENTAGE = 0
TRANSACTION_VERSION = 1

# Faucet transaction
FAUCET_LOCK_FEE = 10
FAUCET_AMOUNT = 10_000
FAUCET_EXPIRES_AFTER_EPOCHS = 10

NETWORKS_FILE_ENV = "LEDGERTX_NETWORKS_FILE"


class KnownAddresses(BaseModel):
    """Well-known entity addresses of a network"""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    faucet_component_address: str
    faucet_package_address: str
    account_package_address: str
    xrd_resource_address: str
    system_token_resource_address: Optional[str] = None
    ecdsa_secp256k1_token_resource_address: Optional[str] = None
    eddsa_ed25519_token_resource_address: Optional[str] = None
    package_token_resource_address: Optional[str] = None
    epoch_manager_component_address: Optional[str] = None
    clock_component_address: Optional[str] = None


class NetworkConfig:
    """Network configuration manager"""

    _networks_cache = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load network configurations.

        Reads the file named by ``LEDGERTX_NETWORKS_FILE`` if set, otherwise
        the ``networks.json`` bundled with the package. The result is cached
        on the class.

        Returns:
            Dictionary of network configurations keyed by network name
        """
        if cls._networks_cache is not None:
            return cls._networks_cache

        override_path = os.environ.get(NETWORKS_FILE_ENV)
        if override_path:
            logger.debug(f"Loading networks from {override_path}")
            with Path(override_path).open("r", encoding="utf-8") as f:
                networks = json.load(f)
        else:
            resource = importlib.resources.files("ledgertx_sdk").joinpath("networks.json")
            networks = json.loads(resource.read_text(encoding="utf-8"))

        cls._networks_cache = networks
        return networks

    @classmethod
    def clear_cache(cls) -> None:
        cls._networks_cache = None

    @classmethod
    def _resolve_name(cls, network: Union[str, int]) -> str:
        networks = cls.load_networks()
        if isinstance(network, bool):
            raise TypeError("Network must be a name or a numeric id, got bool")
        if isinstance(network, int):
            for name, config in networks.items():
                if config.get("networkId") == network:
                    return name
        elif isinstance(network, str):
            if network in networks:
                return network
        else:
            raise TypeError(f"Network must be a name or a numeric id, got {type(network).__name__}")

        available = ", ".join(
            f"{name} ({config.get('networkId')})" for name, config in networks.items()
        )
        raise ValueError(f"Network '{network}' not found. Available networks: {available}")

    @classmethod
    def get_network(cls, network: Union[str, int]) -> Dict[str, Any]:
        """
        Get configuration for a specific network.

        Args:
            network: Network name (e.g. "simulator") or numeric network id

        Returns:
            Network configuration dictionary

        Raises:
            ValueError: If the network is not found
        """
        return cls.load_networks()[cls._resolve_name(network)]

    @classmethod
    def get_network_id(cls, network: Union[str, int]) -> int:
        return int(cls.get_network(network)["networkId"])

    @classmethod
    def get_network_name(cls, network_id: int) -> str:
        return cls._resolve_name(network_id)

    @classmethod
    def get_known_addresses(cls, network: Union[str, int]) -> KnownAddresses:
        """
        Get the well-known addresses of a network.

        Each address can be overridden with an environment variable named
        ``<NETWORK_NAME>_<FIELD>`` in upper case, for example
        ``SIMULATOR_FAUCET_COMPONENT_ADDRESS``.

        Args:
            network: Network name or numeric network id

        Returns:
            KnownAddresses for the network

        Raises:
            ValueError: If the network is not found or lacks required addresses
        """
        name = cls._resolve_name(network)
        addresses = dict(cls.load_networks()[name].get("knownAddresses", {}))
        env_prefix = name.upper().replace("-", "_")

        for field_name, field in KnownAddresses.model_fields.items():
            env_value = os.environ.get(f"{env_prefix}_{field_name.upper()}")
            if env_value:
                logger.debug(f"Using {field_name} for {name} from environment")
                addresses.pop(field.alias, None)
                addresses[field_name] = env_value

        return KnownAddresses.model_validate(addresses)
