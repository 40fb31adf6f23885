"""
Signature sources.

A signature source is anything the transaction builders can obtain a
signature from:

- ``KeyBacked``: an object implementing the ``Signer`` protocol (such as
  ``Ed25519Key``) that signs the hash itself
- ``Callback``: a function ``fn(hash) -> signature``, possibly async, for
  remote signers, hardware wallets and the like
- ``Precomputed``: a signature produced earlier, used as-is

Intent signatures must be ``SignatureWithPublicKey`` values; notary
signatures must be ``Signature`` values. Any other result raises
``SignatureSourceError``.
"""
import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

from .crypto import (
    PUBLIC_KEY_TYPES,
    SIGNATURE_TYPES,
    SIGNATURE_WITH_PUBLIC_KEY_TYPES,
)
from .exceptions import SignatureSourceError

logger = logging.getLogger(__name__)


@runtime_checkable
class Signer(Protocol):
    """Protocol for custom signers"""

    def public_key(self) -> Any:
        """Public key model of the signer"""
        ...

    def sign_to_signature(self, message_hash: bytes) -> Any:
        """Sign message_hash and return a notary signature"""
        ...

    def sign_to_signature_with_public_key(self, message_hash: bytes) -> Any:
        """Sign message_hash and return an intent signature"""
        ...


@dataclass(frozen=True)
class KeyBacked:
    signer: Signer


@dataclass(frozen=True)
class Callback:
    fn: Callable[[bytes], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class Precomputed:
    value: Any


SignatureSource = Union[KeyBacked, Callback, Precomputed]


def as_signature_source(obj) -> SignatureSource:
    """
    Coerce obj into a signature source.

    Signers become ``KeyBacked``, signature values become ``Precomputed`` and
    other callables become ``Callback``. Existing sources are returned as-is.

    Raises:
        SignatureSourceError: If obj cannot produce a signature
    """
    if isinstance(obj, (KeyBacked, Callback, Precomputed)):
        return obj
    if isinstance(obj, SIGNATURE_TYPES + SIGNATURE_WITH_PUBLIC_KEY_TYPES):
        return Precomputed(obj)
    if isinstance(obj, Signer):
        return KeyBacked(obj)
    if callable(obj):
        return Callback(obj)
    raise SignatureSourceError(
        f"Cannot use {type(obj).__name__} as a signature source; expected a Signer, "
        "a callable or a signature"
    )


def _produce(source: SignatureSource, message_hash: bytes, notary: bool):
    if isinstance(source, KeyBacked):
        if notary:
            return source.signer.sign_to_signature(message_hash)
        return source.signer.sign_to_signature_with_public_key(message_hash)
    if isinstance(source, Callback):
        return source.fn(message_hash)
    if isinstance(source, Precomputed):
        return source.value
    raise SignatureSourceError(f"Unknown signature source: {type(source).__name__}")


def _check(result, notary: bool):
    expected = SIGNATURE_TYPES if notary else SIGNATURE_WITH_PUBLIC_KEY_TYPES
    if not isinstance(result, expected):
        kind = "notary signature" if notary else "intent signature"
        raise SignatureSourceError(
            f"Signature source produced {type(result).__name__}, expected a {kind} "
            f"({', '.join(t.__name__ for t in expected)})"
        )
    return result


def _resolve(source, message_hash: bytes, notary: bool):
    result = _produce(as_signature_source(source), message_hash, notary)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise SignatureSourceError(
            "Signature source is asynchronous; use the *_async variant to await it"
        )
    return _check(result, notary)


async def _resolve_async(source, message_hash: bytes, notary: bool):
    result = _produce(as_signature_source(source), message_hash, notary)
    if inspect.isawaitable(result):
        result = await result
    return _check(result, notary)


def resolve_signature(source, message_hash: bytes):
    """
    Obtain an intent signature over message_hash.

    Args:
        source: A signature source or anything ``as_signature_source`` accepts
        message_hash: The intent hash

    Returns:
        A ``SignatureWithPublicKey`` value

    Raises:
        SignatureSourceError: If the source is unusable or produces the wrong type
    """
    return _resolve(source, message_hash, notary=False)


def resolve_notary_signature(source, message_hash: bytes):
    """
    Obtain a notary signature over message_hash.

    Returns:
        A ``Signature`` value

    Raises:
        SignatureSourceError: If the source is unusable or produces the wrong type
    """
    return _resolve(source, message_hash, notary=True)


async def resolve_signature_async(source, message_hash: bytes):
    """Async variant of resolve_signature; awaits asynchronous sources"""
    return await _resolve_async(source, message_hash, notary=False)


async def resolve_notary_signature_async(source, message_hash: bytes):
    """Async variant of resolve_notary_signature; awaits asynchronous sources"""
    return await _resolve_async(source, message_hash, notary=True)


def public_key_of(source):
    """
    Public key model behind a source, if it can be determined.

    Returns None for callbacks and for signatures that do not carry a key.
    """
    source = as_signature_source(source)
    if isinstance(source, KeyBacked):
        key = source.signer.public_key()
        if isinstance(key, PUBLIC_KEY_TYPES):
            return key
        logger.debug(f"Signer returned a {type(key).__name__} public key; ignoring")
    return None
