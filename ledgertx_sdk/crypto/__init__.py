"""
Keys and signatures for the ledgertx SDK.
"""
from .keys import (
    PUBLIC_KEY_TYPES,
    SIGNATURE_TYPES,
    SIGNATURE_WITH_PUBLIC_KEY_TYPES,
    Ed25519Key,
    Ed25519PublicKey,
    Ed25519Signature,
    Ed25519SignatureWithPublicKey,
    PrivateKey,
    PublicKey,
    Secp256k1Key,
    Secp256k1PublicKey,
    Secp256k1Signature,
    Secp256k1SignatureWithPublicKey,
    Signature,
    SignatureWithPublicKey,
)

__all__ = [
    "PUBLIC_KEY_TYPES",
    "SIGNATURE_TYPES",
    "SIGNATURE_WITH_PUBLIC_KEY_TYPES",
    "Ed25519Key",
    "Ed25519PublicKey",
    "Ed25519Signature",
    "Ed25519SignatureWithPublicKey",
    "PrivateKey",
    "PublicKey",
    "Secp256k1Key",
    "Secp256k1PublicKey",
    "Secp256k1Signature",
    "Secp256k1SignatureWithPublicKey",
    "Signature",
    "SignatureWithPublicKey",
]
