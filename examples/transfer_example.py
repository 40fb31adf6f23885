#!/usr/bin/env python3
"""
Example of building, signing and notarizing a fungible transfer.
"""
import logging
import os

from ledgertx_sdk import NetworkConfig
from ledgertx_sdk.builders import SimpleTransactionBuilder
from ledgertx_sdk.compiler import CanonicalJsonCompiler
from ledgertx_sdk.crypto import Ed25519Key

logging.basicConfig(level=logging.DEBUG)


def main():
    """
    Demonstrate a two-recipient transfer on the simulator network.

    This example shows how to:
    1. Look up network addresses from the bundled configuration
    2. Build a transfer with SimpleTransactionBuilder
    3. Notarize it with the same key that owns the account
    """
    PRIVATE_KEY = os.environ.get("PRIVATE_KEY")
    FROM_ACCOUNT = os.environ.get("FROM_ACCOUNT", "account_sim1qwskd4q5jdywfw6f7jlwmcyp2xxq48uuwruc003x2kcskxh3na")
    EPOCH = int(os.environ.get("CURRENT_EPOCH", "10"))

    key = Ed25519Key(PRIVATE_KEY) if PRIVATE_KEY else Ed25519Key.generate()
    network_id = NetworkConfig.get_network_id("simulator")
    xrd = NetworkConfig.get_known_addresses("simulator").xrd_resource_address

    compiled_intent = (
        SimpleTransactionBuilder(CanonicalJsonCompiler(), network_id, EPOCH, FROM_ACCOUNT, key.public_key())
        .locked_fee("7.5")
        .permanently_reject_after_epochs(5)
        .transfer_fungible("account_sim1qdxy5sh7lgwmp5ycmssmxqr5sq0hqkm7vz7e76h3pf3q0xvk3w", xrd, 100)
        .transfer_fungible("account_sim1q0egd2wpyslhkd28yuwpzq0qdg4aq73kl4urcnc3qsxsk6kug3", xrd, "12.25")
        .compile_intent()
    )
    print(f"Transaction id: {compiled_intent.intent_hash_hex()}")

    notarized = compiled_intent.compile_notarized(key)
    print(f"Notarized payload hash: {notarized.notarized_payload_hash_hex()}")
    print(f"Payload ({len(notarized.to_bytes())} bytes):")
    print(notarized.to_bytes().decode("utf-8"))


if __name__ == "__main__":
    main()
