"""
ledgertx SDK: build, sign and notarize ledger transactions.
"""
from .builders import (
    CompiledNotarizedTransaction,
    CompiledSignedTransactionIntent,
    CompiledTransactionIntent,
    FungibleTransfer,
    ManifestBuilder,
    SequentialIdAllocator,
    SimpleTransactionBuilder,
    TransactionBuilder,
    TransactionBuilderIntentSignaturesStep,
    TransactionBuilderManifestStep,
    TransferAggregation,
    aggregate_transfers,
    build_transfer_manifest,
    free_xrd_from_faucet,
)
from .compiler import CanonicalJsonCompiler, TransactionCompiler
from .config import KnownAddresses, NetworkConfig
from .crypto import (
    Ed25519Key,
    Ed25519PublicKey,
    Ed25519Signature,
    Ed25519SignatureWithPublicKey,
    PrivateKey,
    Secp256k1Key,
    Secp256k1PublicKey,
    Secp256k1Signature,
    Secp256k1SignatureWithPublicKey,
)
from .exceptions import CompilationError, EpochRangeError, LedgerTxError, SignatureSourceError
from .signing import Callback, KeyBacked, Precomputed, Signer, as_signature_source
from .transaction import (
    NotarizedTransaction,
    SignedTransactionIntent,
    TransactionHeader,
    TransactionIntent,
    TransactionManifest,
)
from .version import __version__

__all__ = [
    "CompiledNotarizedTransaction",
    "CompiledSignedTransactionIntent",
    "CompiledTransactionIntent",
    "FungibleTransfer",
    "ManifestBuilder",
    "SequentialIdAllocator",
    "SimpleTransactionBuilder",
    "TransactionBuilder",
    "TransactionBuilderIntentSignaturesStep",
    "TransactionBuilderManifestStep",
    "TransferAggregation",
    "aggregate_transfers",
    "build_transfer_manifest",
    "free_xrd_from_faucet",
    "CanonicalJsonCompiler",
    "TransactionCompiler",
    "KnownAddresses",
    "NetworkConfig",
    "Ed25519Key",
    "Ed25519PublicKey",
    "Ed25519Signature",
    "Ed25519SignatureWithPublicKey",
    "PrivateKey",
    "Secp256k1Key",
    "Secp256k1PublicKey",
    "Secp256k1Signature",
    "Secp256k1SignatureWithPublicKey",
    "CompilationError",
    "EpochRangeError",
    "LedgerTxError",
    "SignatureSourceError",
    "Callback",
    "KeyBacked",
    "Precomputed",
    "Signer",
    "as_signature_source",
    "NotarizedTransaction",
    "SignedTransactionIntent",
    "TransactionHeader",
    "TransactionIntent",
    "TransactionManifest",
    "__version__",
]
