"""
Public keys, signatures and private keys for the supported curves.

Ed25519 operations use ``cryptography``; secp256k1 operations use ``eth-keys``.
Secp256k1 signatures are 65 bytes laid out as ``recovery_id || r || s``.
"""
import logging
import secrets
from abc import ABC, abstractmethod
from typing import Annotated, Literal, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as _CryptoEd25519PrivateKey,
    Ed25519PublicKey as _CryptoEd25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding, PrivateFormat, PublicFormat, NoEncryption
)
from eth_keys import keys as eth_keys
from eth_keys.exceptions import BadSignature, ValidationError as EthKeysValidationError
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils import Bytes, resolve_bytes
from .constants import (
    ED25519_PRIVATE_KEY_LENGTH,
    ED25519_PUBLIC_KEY_LENGTH,
    ED25519_SIGNATURE_LENGTH,
    SECP256K1_MAX,
    SECP256K1_MIN,
    SECP256K1_N,
    SECP256K1_PRIVATE_KEY_LENGTH,
    SECP256K1_PUBLIC_KEY_LENGTH,
    SECP256K1_SIGNATURE_LENGTH,
)

logger = logging.getLogger(__name__)


def _checked_bytes(value, length: int) -> bytes:
    # pydantic only turns ValueError into a ValidationError
    try:
        return resolve_bytes(value, length)
    except TypeError as e:
        raise ValueError(str(e))


def _signature_bytes(signature) -> bytes:
    return bytes(getattr(signature, "signature", signature))


class _CryptoModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ─────────────────────────────────────────────────────────────────────────
#  Public keys
# ─────────────────────────────────────────────────────────────────────────

class Ed25519PublicKey(_CryptoModel):
    """Raw 32-byte Ed25519 public key"""
    curve: Literal["Ed25519"] = "Ed25519"
    public_key: bytes

    @field_validator("public_key", mode="before")
    @classmethod
    def _resolve_public_key(cls, value):
        return _checked_bytes(value, ED25519_PUBLIC_KEY_LENGTH)

    def hex(self) -> str:
        return self.public_key.hex()

    def verify(self, message_hash: bytes, signature) -> bool:
        """
        Check an Ed25519 signature over message_hash.

        Args:
            message_hash: The signed bytes
            signature: Raw signature bytes or any signature model

        Returns:
            True if the signature is valid for this key
        """
        key = _CryptoEd25519PublicKey.from_public_bytes(self.public_key)
        try:
            key.verify(_signature_bytes(signature), message_hash)
            return True
        except InvalidSignature:
            return False


class Secp256k1PublicKey(_CryptoModel):
    """Compressed 33-byte secp256k1 public key"""
    curve: Literal["Secp256k1"] = "Secp256k1"
    public_key: bytes

    @field_validator("public_key", mode="before")
    @classmethod
    def _resolve_public_key(cls, value):
        return _checked_bytes(value, SECP256K1_PUBLIC_KEY_LENGTH)

    def hex(self) -> str:
        return self.public_key.hex()

    def verify(self, message_hash: bytes, signature) -> bool:
        """Check a recoverable secp256k1 signature over message_hash"""
        raw = _signature_bytes(signature)
        if len(raw) != SECP256K1_SIGNATURE_LENGTH:
            return False
        # eth-keys expects r || s || v
        try:
            sig = eth_keys.Signature(signature_bytes=raw[1:] + raw[:1])
            key = eth_keys.PublicKey.from_compressed_bytes(self.public_key)
            return key.verify_msg_hash(message_hash, sig)
        except (BadSignature, EthKeysValidationError, ValueError):
            return False


PublicKey = Annotated[
    Union[Ed25519PublicKey, Secp256k1PublicKey],
    Field(discriminator="curve"),
]
PUBLIC_KEY_TYPES = (Ed25519PublicKey, Secp256k1PublicKey)


# ─────────────────────────────────────────────────────────────────────────
#  Signatures
# ─────────────────────────────────────────────────────────────────────────

class Ed25519Signature(_CryptoModel):
    curve: Literal["Ed25519"] = "Ed25519"
    signature: bytes

    @field_validator("signature", mode="before")
    @classmethod
    def _resolve_signature(cls, value):
        return _checked_bytes(value, ED25519_SIGNATURE_LENGTH)


class Secp256k1Signature(_CryptoModel):
    curve: Literal["Secp256k1"] = "Secp256k1"
    signature: bytes

    @field_validator("signature", mode="before")
    @classmethod
    def _resolve_signature(cls, value):
        return _checked_bytes(value, SECP256K1_SIGNATURE_LENGTH)


Signature = Annotated[
    Union[Ed25519Signature, Secp256k1Signature],
    Field(discriminator="curve"),
]
SIGNATURE_TYPES = (Ed25519Signature, Secp256k1Signature)


class Ed25519SignatureWithPublicKey(_CryptoModel):
    """Ed25519 intent signature; the verifying key travels with it"""
    curve: Literal["Ed25519"] = "Ed25519"
    signature: bytes
    public_key: bytes

    @field_validator("signature", mode="before")
    @classmethod
    def _resolve_signature(cls, value):
        return _checked_bytes(value, ED25519_SIGNATURE_LENGTH)

    @field_validator("public_key", mode="before")
    @classmethod
    def _resolve_public_key(cls, value):
        return _checked_bytes(value, ED25519_PUBLIC_KEY_LENGTH)


class Secp256k1SignatureWithPublicKey(_CryptoModel):
    """Secp256k1 intent signature; the key is recovered from the signature"""
    curve: Literal["Secp256k1"] = "Secp256k1"
    signature: bytes

    @field_validator("signature", mode="before")
    @classmethod
    def _resolve_signature(cls, value):
        return _checked_bytes(value, SECP256K1_SIGNATURE_LENGTH)


SignatureWithPublicKey = Annotated[
    Union[Ed25519SignatureWithPublicKey, Secp256k1SignatureWithPublicKey],
    Field(discriminator="curve"),
]
SIGNATURE_WITH_PUBLIC_KEY_TYPES = (Ed25519SignatureWithPublicKey, Secp256k1SignatureWithPublicKey)


# ─────────────────────────────────────────────────────────────────────────
#  Private keys
# ─────────────────────────────────────────────────────────────────────────

class PrivateKey(ABC):
    """
    A local private key that can sign transaction hashes.

    Implements the ``Signer`` protocol used by the transaction builders.
    """
    curve: str

    def __repr__(self) -> str:
        return f"{type(self).__name__}(public_key={self.public_key_hex()})"

    @classmethod
    @abstractmethod
    def generate(cls) -> "PrivateKey":
        """Create a key from a cryptographically secure random source"""

    @abstractmethod
    def public_key(self) -> Union[Ed25519PublicKey, Secp256k1PublicKey]:
        """Public key model for this private key"""

    @abstractmethod
    def sign(self, message_hash: bytes) -> bytes:
        """Sign message_hash and return the raw signature bytes"""

    @abstractmethod
    def sign_to_signature(self, message_hash: bytes):
        """Sign message_hash and return a notary ``Signature``"""

    @abstractmethod
    def sign_to_signature_with_public_key(self, message_hash: bytes):
        """Sign message_hash and return an intent ``SignatureWithPublicKey``"""

    def public_key_bytes(self) -> bytes:
        return self.public_key().public_key

    def public_key_hex(self) -> str:
        return self.public_key_bytes().hex()


class Ed25519Key(PrivateKey):
    """Ed25519 private key backed by ``cryptography``"""
    curve = "Ed25519"

    def __init__(self, private_key: Bytes):
        raw = resolve_bytes(private_key, ED25519_PRIVATE_KEY_LENGTH)
        self._key = _CryptoEd25519PrivateKey.from_private_bytes(raw)

    @classmethod
    def generate(cls) -> "Ed25519Key":
        private_key = _CryptoEd25519PrivateKey.generate()
        return cls(private_key.private_bytes(
            encoding=Encoding.Raw,
            format=PrivateFormat.Raw,
            encryption_algorithm=NoEncryption()
        ))

    def public_key(self) -> Ed25519PublicKey:
        return Ed25519PublicKey(
            public_key=self._key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        )

    def sign(self, message_hash: bytes) -> bytes:
        return self._key.sign(message_hash)

    def sign_to_signature(self, message_hash: bytes) -> Ed25519Signature:
        return Ed25519Signature(signature=self.sign(message_hash))

    def sign_to_signature_with_public_key(self, message_hash: bytes) -> Ed25519SignatureWithPublicKey:
        return Ed25519SignatureWithPublicKey(
            signature=self.sign(message_hash),
            public_key=self.public_key_bytes()
        )


class Secp256k1Key(PrivateKey):
    """secp256k1 private key backed by ``eth-keys``"""
    curve = "Secp256k1"

    def __init__(self, private_key: Bytes):
        raw = resolve_bytes(private_key, SECP256K1_PRIVATE_KEY_LENGTH)
        scalar = int.from_bytes(raw, byteorder="big")
        if not SECP256K1_MIN <= scalar <= SECP256K1_MAX:
            raise ValueError("Secp256k1 private key must be between 1 and the curve order - 1")
        self._key = eth_keys.PrivateKey(raw)

    @classmethod
    def generate(cls) -> "Secp256k1Key":
        scalar = secrets.randbelow(SECP256K1_N - 1) + 1
        return cls(scalar.to_bytes(SECP256K1_PRIVATE_KEY_LENGTH, byteorder="big"))

    def public_key(self) -> Secp256k1PublicKey:
        return Secp256k1PublicKey(public_key=self._key.public_key.to_compressed_bytes())

    def sign(self, message_hash: bytes) -> bytes:
        sig = self._key.sign_msg_hash(message_hash)
        return (
            bytes([sig.v])
            + sig.r.to_bytes(32, byteorder="big")
            + sig.s.to_bytes(32, byteorder="big")
        )

    def sign_to_signature(self, message_hash: bytes) -> Secp256k1Signature:
        return Secp256k1Signature(signature=self.sign(message_hash))

    def sign_to_signature_with_public_key(self, message_hash: bytes) -> Secp256k1SignatureWithPublicKey:
        return Secp256k1SignatureWithPublicKey(signature=self.sign(message_hash))
