"""
Pytest fixtures for the ledgertx SDK tests.
"""
import pytest

from ledgertx_sdk.builders import ManifestBuilder
from ledgertx_sdk.compiler import CanonicalJsonCompiler
from ledgertx_sdk.config import KnownAddresses, NetworkConfig
from ledgertx_sdk.crypto import Ed25519Key, Secp256k1Key
from ledgertx_sdk.transaction import TransactionHeader

NETWORK_ID = 242

ACCOUNT_A = "account_sim1qwskd4q5jdywfw6f7jlwmcyp2xxq48uuwruc003x2kcskxh3na"
ACCOUNT_B = "account_sim1qdxy5sh7lgwmp5ycmssmxqr5sq0hqkm7vz7e76h3pf3q0xvk3w"
ACCOUNT_C = "account_sim1q0egd2wpyslhkd28yuwpzq0qdg4aq73kl4urcnc3qsxsk6kug3"
XRD = "resource_sim1qzkcyv5dwq3r6kawy6pxpvcythx8rh8ntum6ws62p95sqjjpwr"
TOKEN = "resource_sim1qqw9095s39kq2vxnzymaecvtpywpkughkcltw4pzd4pse7dvr0"
FAUCET = "component_sim1qftacppvmr9ezmekxqpq58en0nk954x0a7jv2zz0hc7q8utaxr"

ED25519_PRIVATE_KEY = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
ED25519_PUBLIC_KEY = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
NOTARY_PRIVATE_KEY = "4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb"
SECP256K1_PRIVATE_KEY = "0000000000000000000000000000000000000000000000000000000000000001"


@pytest.fixture(autouse=True)
def _reset_network_cache():
    """Every test starts with an empty NetworkConfig cache."""
    NetworkConfig.clear_cache()
    yield
    NetworkConfig.clear_cache()


@pytest.fixture
def compiler():
    return CanonicalJsonCompiler()


@pytest.fixture
def ed25519_key():
    return Ed25519Key(ED25519_PRIVATE_KEY)


@pytest.fixture
def notary_key():
    return Ed25519Key(NOTARY_PRIVATE_KEY)


@pytest.fixture
def secp256k1_key():
    return Secp256k1Key(SECP256K1_PRIVATE_KEY)


@pytest.fixture
def header(notary_key):
    return TransactionHeader.new(
        network_id=NETWORK_ID,
        start_epoch_inclusive=10,
        end_epoch_exclusive=12,
        nonce=42,
        notary_public_key=notary_key.public_key(),
        notary_is_signatory=False,
        cost_unit_limit=100_000_000,
        tip_percentage=0,
    )


@pytest.fixture
def manifest():
    return (
        ManifestBuilder()
        .call_method(ACCOUNT_A, "lock_fee", [])
        .drop_all_proofs()
        .build()
    )


@pytest.fixture
def known_addresses():
    return KnownAddresses(
        faucet_component_address=FAUCET,
        faucet_package_address="package_sim1qyqzcexvnyg60z7lnlwauh66nhzg3m8tch2j8wc0e70qkydk8r",
        account_package_address="package_sim1qyhhcrm4ln6fdkhw4hxrp6gatdpwnsw5kvtsulcpey7qn3a6hm",
        xrd_resource_address=XRD,
    )
