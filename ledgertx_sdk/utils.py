"""
Utility functions for the ledgertx SDK.
"""
import hashlib
import secrets
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

HASH_LENGTH = 32

Bytes = Union[bytes, bytearray, str]
Amount = Union[Decimal, int, float, str]


def hash_bytes(data: bytes) -> bytes:
    """
    Hash data with the ledger's content hash (Blake2b, 32 byte digest).

    Args:
        data: Bytes to hash

    Returns:
        32-byte digest
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    return hashlib.blake2b(bytes(data), digest_size=HASH_LENGTH).digest()


def hash_hex(data: bytes) -> str:
    """Hex encoded Blake2b-256 digest of data"""
    return hash_bytes(data).hex()


def random_nonce() -> int:
    """Random u32 suitable for a transaction header nonce"""
    return secrets.randbits(32)


def resolve_bytes(value: Bytes, expected_length: Optional[int] = None) -> bytes:
    """
    Resolve a bytes-like value or hex string into bytes.

    Args:
        value: Raw bytes or a hex string (with or without 0x prefix)
        expected_length: If given, the exact number of bytes required

    Returns:
        The resolved bytes

    Raises:
        TypeError: If value is neither bytes nor str
        ValueError: If the hex string is malformed or the length is wrong
    """
    if isinstance(value, (bytes, bytearray)):
        resolved = bytes(value)
    elif isinstance(value, str):
        hex_str = value[2:] if value.startswith("0x") else value
        try:
            resolved = bytes.fromhex(hex_str)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {str(e)}")
    else:
        raise TypeError(f"Expected bytes or hex string, got {type(value).__name__}")

    if expected_length is not None and len(resolved) != expected_length:
        raise ValueError(
            f"Expected bytes of length {expected_length} but was actually: {len(resolved)}"
        )
    return resolved


def resolve_decimal(amount: Amount) -> Decimal:
    """
    Resolve an amount into a finite Decimal.

    Floats go through their shortest repr so 0.1 becomes Decimal("0.1").

    Raises:
        TypeError: If the amount is not a Decimal, int, float or str
        ValueError: If the amount cannot be parsed or is not finite
    """
    if isinstance(amount, bool):
        raise TypeError("Invalid type passed in for decimal: bool")
    if isinstance(amount, Decimal):
        resolved = amount
    elif isinstance(amount, int):
        resolved = Decimal(amount)
    elif isinstance(amount, float):
        resolved = Decimal(repr(amount))
    elif isinstance(amount, str):
        try:
            resolved = Decimal(amount.strip())
        except InvalidOperation:
            raise ValueError(f"Invalid decimal string: {amount!r}")
    else:
        raise TypeError(f"Invalid type passed in for decimal: {type(amount).__name__}")

    if not resolved.is_finite():
        raise ValueError(f"Decimal must be finite, got {amount!r}")
    return resolved


def canonical_decimal(value: Decimal) -> str:
    """
    Plain-notation string for a finite Decimal with trailing fractional zeros
    removed, so Decimal("8"), Decimal("8.00") and Decimal("0.8E1") all give "8".
    Negative zero is written as "0".
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def decimal_places(value: Decimal) -> int:
    """Number of significant fractional digits of a finite Decimal"""
    text = canonical_decimal(value)
    return len(text.split(".", 1)[1]) if "." in text else 0


def resolve_address(address) -> str:
    """
    Resolve an address argument into its string form.

    Accepts plain strings and any object with a string ``address`` attribute
    (such as the ``Address`` manifest value).

    Raises:
        TypeError: If the argument is not an address
        ValueError: If the address is empty or contains whitespace
    """
    if not isinstance(address, str):
        inner = getattr(address, "address", None)
        if not isinstance(inner, str):
            raise TypeError(f"Invalid type passed in as an address: {type(address).__name__}")
        address = inner
    if not address or any(c.isspace() for c in address):
        raise ValueError(f"Malformed address: {address!r}")
    return address
