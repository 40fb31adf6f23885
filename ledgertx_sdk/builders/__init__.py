"""
Manifest and transaction builders.
"""
from .allocator import SequentialIdAllocator
from .compiled import (
    CompiledNotarizedTransaction,
    CompiledSignedTransactionIntent,
    CompiledTransactionIntent,
)
from .manifest import ManifestBuilder
from .simple import SimpleTransactionBuilder, free_xrd_from_faucet
from .transaction import (
    TransactionBuilder,
    TransactionBuilderIntentSignaturesStep,
    TransactionBuilderManifestStep,
)
from .transfers import (
    FungibleTransfer,
    TransferAggregation,
    aggregate_transfers,
    build_transfer_manifest,
)

__all__ = [
    "SequentialIdAllocator",
    "CompiledNotarizedTransaction",
    "CompiledSignedTransactionIntent",
    "CompiledTransactionIntent",
    "ManifestBuilder",
    "SimpleTransactionBuilder",
    "free_xrd_from_faucet",
    "TransactionBuilder",
    "TransactionBuilderIntentSignaturesStep",
    "TransactionBuilderManifestStep",
    "FungibleTransfer",
    "TransferAggregation",
    "aggregate_transfers",
    "build_transfer_manifest",
]
