#!/usr/bin/env python3
"""
Example of requesting free XRD from a network faucet, plus a manually
assembled manifest signed by two different keys.
"""
import logging
import sys

from ledgertx_sdk import NetworkConfig
from ledgertx_sdk.builders import ManifestBuilder, TransactionBuilder, free_xrd_from_faucet
from ledgertx_sdk.compiler import CanonicalJsonCompiler
from ledgertx_sdk.crypto import Ed25519Key, Secp256k1Key
from ledgertx_sdk.transaction import TransactionHeader
from ledgertx_sdk.values import address, decimal

logging.basicConfig(level=logging.INFO)


def main():
    network = sys.argv[1] if len(sys.argv) > 1 else "simulator"
    account = "account_sim1qwskd4q5jdywfw6f7jlwmcyp2xxq48uuwruc003x2kcskxh3na"
    compiler = CanonicalJsonCompiler()

    print("Available networks:")
    for network_name in NetworkConfig.load_networks().keys():
        print(f"  - {network_name}")

    network_id = NetworkConfig.get_network_id(network)
    faucet_tx = free_xrd_from_faucet(compiler, account, network_id, valid_from_epoch=10)
    print(f"Faucet transaction id: {faucet_tx.transaction_id_hex()}")

    # Multi-signer flow: the account owner signs the intent, a separate key notarizes
    addresses = NetworkConfig.get_known_addresses(network)
    owner = Secp256k1Key.generate()
    notary = Ed25519Key.generate()

    manifest = (
        ManifestBuilder()
        .call_method(account, "lock_fee", [decimal(5)])
        .call_method(account, "withdraw", [address(addresses.xrd_resource_address), decimal(1)])
        .take_from_worktop(
            addresses.xrd_resource_address,
            lambda builder, bucket: builder.call_method(account, "deposit", [bucket]),
        )
        .build()
    )
    header = TransactionHeader.new(
        network_id=network_id,
        start_epoch_inclusive=10,
        end_epoch_exclusive=12,
        nonce=7,
        notary_public_key=notary.public_key(),
    )
    notarized = (
        TransactionBuilder(compiler)
        .header(header)
        .manifest(manifest)
        .sign(owner)
        .compile_notarized(notary)
    )
    print(f"Signed transaction id: {notarized.transaction_id_hex()}")


if __name__ == "__main__":
    main()
