"""
Typed values used as instruction operands in a transaction manifest.

Every value is a frozen pydantic model tagged by its ``kind`` field; the
``Value`` alias is the discriminated union over all of them. Containers
(``Array``, ``Tuple``, ``Map``, ``Enum``, ``Some``, ``Ok``, ``Err``) hold
other values, so arbitrarily nested arguments can be expressed.

The lower-case helpers at the bottom build values from plain Python objects::

    tuple_(address("account_sim1..."), decimal("10.5"), enum(0))
"""
import re
from decimal import Decimal as PyDecimal
from typing import Annotated, ClassVar, Iterable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator

from .utils import (
    HASH_LENGTH,
    canonical_decimal,
    decimal_places,
    resolve_address,
    resolve_bytes,
    resolve_decimal,
)

DECIMAL_PLACES = 18
PRECISE_DECIMAL_PLACES = 36


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True)


def _value_error(exc: Exception) -> ValueError:
    # pydantic only turns ValueError into a ValidationError
    return exc if isinstance(exc, ValueError) else ValueError(str(exc))


# ─────────────────────────────────────────────────────────────────────────
#  Primitives
# ─────────────────────────────────────────────────────────────────────────

class Bool(_Value):
    kind: Literal["Bool"] = "Bool"
    value: StrictBool


class _Integer(_Value):
    min_value: ClassVar[int]
    max_value: ClassVar[int]

    value: StrictInt

    @field_validator("value")
    @classmethod
    def _check_range(cls, value: int) -> int:
        if not cls.min_value <= value <= cls.max_value:
            raise ValueError(
                f"{cls.__name__} must be between {cls.min_value} and {cls.max_value}, got {value}"
            )
        return value


class U8(_Integer):
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2 ** 8 - 1
    kind: Literal["U8"] = "U8"


class U16(_Integer):
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2 ** 16 - 1
    kind: Literal["U16"] = "U16"


class U32(_Integer):
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2 ** 32 - 1
    kind: Literal["U32"] = "U32"


class U64(_Integer):
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2 ** 64 - 1
    kind: Literal["U64"] = "U64"


class U128(_Integer):
    min_value: ClassVar[int] = 0
    max_value: ClassVar[int] = 2 ** 128 - 1
    kind: Literal["U128"] = "U128"


class I8(_Integer):
    min_value: ClassVar[int] = -(2 ** 7)
    max_value: ClassVar[int] = 2 ** 7 - 1
    kind: Literal["I8"] = "I8"


class I16(_Integer):
    min_value: ClassVar[int] = -(2 ** 15)
    max_value: ClassVar[int] = 2 ** 15 - 1
    kind: Literal["I16"] = "I16"


class I32(_Integer):
    min_value: ClassVar[int] = -(2 ** 31)
    max_value: ClassVar[int] = 2 ** 31 - 1
    kind: Literal["I32"] = "I32"


class I64(_Integer):
    min_value: ClassVar[int] = -(2 ** 63)
    max_value: ClassVar[int] = 2 ** 63 - 1
    kind: Literal["I64"] = "I64"


class I128(_Integer):
    min_value: ClassVar[int] = -(2 ** 127)
    max_value: ClassVar[int] = 2 ** 127 - 1
    kind: Literal["I128"] = "I128"


class String(_Value):
    kind: Literal["String"] = "String"
    value: StrictStr


class _FixedPoint(_Value):
    places: ClassVar[int]
    value: PyDecimal

    @field_validator("value", mode="before")
    @classmethod
    def _resolve_value(cls, value):
        try:
            resolved = resolve_decimal(value)
        except TypeError as e:
            raise _value_error(e)
        if decimal_places(resolved) > cls.places:
            raise ValueError(
                f"{cls.__name__} supports at most {cls.places} decimal places, got {canonical_decimal(resolved)}"
            )
        return resolved


class Decimal(_FixedPoint):
    """Fixed-point ledger decimal with 18 decimal places; always finite"""
    places: ClassVar[int] = DECIMAL_PLACES
    kind: Literal["Decimal"] = "Decimal"


class PreciseDecimal(_FixedPoint):
    places: ClassVar[int] = PRECISE_DECIMAL_PLACES
    kind: Literal["PreciseDecimal"] = "PreciseDecimal"


# ─────────────────────────────────────────────────────────────────────────
#  Ledger references
# ─────────────────────────────────────────────────────────────────────────

class Address(_Value):
    """
    A bech32m-encoded entity address.

    The SDK never decodes addresses; it only checks they are non-empty and
    free of whitespace.
    """
    kind: Literal["Address"] = "Address"
    address: str

    @field_validator("address", mode="before")
    @classmethod
    def _resolve_address(cls, value):
        if not isinstance(value, str):
            raise ValueError(f"Address must be a string, got {type(value).__name__}")
        return resolve_address(value)


class Bucket(_Value):
    """Named handle to a bucket created earlier in the same manifest"""
    kind: Literal["Bucket"] = "Bucket"
    identifier: StrictStr


class Proof(_Value):
    """Named handle to a proof created earlier in the same manifest"""
    kind: Literal["Proof"] = "Proof"
    identifier: StrictStr


class Expression(_Value):
    kind: Literal["Expression"] = "Expression"
    value: Literal["ENTIRE_WORKTOP", "ENTIRE_AUTH_ZONE"]


class Blob(_Value):
    """Reference to a blob by its 32-byte content hash"""
    kind: Literal["Blob"] = "Blob"
    hash: bytes

    @field_validator("hash", mode="before")
    @classmethod
    def _resolve_hash(cls, value):
        try:
            return resolve_bytes(value, HASH_LENGTH)
        except TypeError as e:
            raise _value_error(e)


class Bytes(_Value):
    kind: Literal["Bytes"] = "Bytes"
    value: bytes

    @field_validator("value", mode="before")
    @classmethod
    def _resolve_value(cls, value):
        try:
            return resolve_bytes(value)
        except TypeError as e:
            raise _value_error(e)


_LOCAL_ID_PATTERN = re.compile(
    r"^(<[A-Za-z0-9_]{1,64}>"
    r"|#[0-9]+#"
    r"|\[[0-9a-fA-F]{2,128}\]"
    r"|\{[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\})$"
)


class NonFungibleLocalId(_Value):
    """
    Local id of a non-fungible in its textual form.

    One of ``<string>``, ``#integer#``, ``[hex bytes]`` or ``{uuid}``.
    """
    kind: Literal["NonFungibleLocalId"] = "NonFungibleLocalId"
    value: StrictStr

    @field_validator("value")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if not _LOCAL_ID_PATTERN.match(value):
            raise ValueError(f"Malformed non-fungible local id: {value!r}")
        return value


class NonFungibleGlobalId(_Value):
    kind: Literal["NonFungibleGlobalId"] = "NonFungibleGlobalId"
    resource_address: Address
    local_id: NonFungibleLocalId


# ─────────────────────────────────────────────────────────────────────────
#  Containers
# ─────────────────────────────────────────────────────────────────────────

class Enum(_Value):
    kind: Literal["Enum"] = "Enum"
    variant: Union[StrictInt, StrictStr]
    fields: "tuple[Value, ...]" = ()


class Some(_Value):
    kind: Literal["Some"] = "Some"
    value: "Value"


class NoneValue(_Value):
    kind: Literal["None"] = "None"


class Ok(_Value):
    kind: Literal["Ok"] = "Ok"
    value: "Value"


class Err(_Value):
    kind: Literal["Err"] = "Err"
    value: "Value"


class Array(_Value):
    """Homogeneous sequence; every element must have ``element_kind``"""
    kind: Literal["Array"] = "Array"
    element_kind: StrictStr
    elements: "tuple[Value, ...]" = ()

    @field_validator("elements")
    @classmethod
    def _check_elements(cls, elements, info):
        element_kind = info.data.get("element_kind")
        for element in elements:
            if element.kind != element_kind:
                raise ValueError(
                    f"Array of {element_kind} cannot hold a {element.kind} element"
                )
        return elements


class Tuple(_Value):
    kind: Literal["Tuple"] = "Tuple"
    elements: "tuple[Value, ...]" = ()


class Map(_Value):
    kind: Literal["Map"] = "Map"
    key_kind: StrictStr
    value_kind: StrictStr
    entries: "tuple[tuple[Value, Value], ...]" = ()

    @field_validator("entries")
    @classmethod
    def _check_entries(cls, entries, info):
        key_kind = info.data.get("key_kind")
        value_kind = info.data.get("value_kind")
        for key, value in entries:
            if key.kind != key_kind or value.kind != value_kind:
                raise ValueError(
                    f"Map of {key_kind} to {value_kind} cannot hold a "
                    f"{key.kind} to {value.kind} entry"
                )
        return entries


Value = Annotated[
    Union[
        Bool, U8, U16, U32, U64, U128, I8, I16, I32, I64, I128,
        String, Decimal, PreciseDecimal,
        Address, Bucket, Proof, Expression, Blob, Bytes,
        NonFungibleLocalId, NonFungibleGlobalId,
        Enum, Some, NoneValue, Ok, Err, Array, Tuple, Map,
    ],
    Field(discriminator="kind"),
]

for _model in (Enum, Some, Ok, Err, Array, Tuple, Map):
    _model.model_rebuild()
del _model


# ─────────────────────────────────────────────────────────────────────────
#  Constructors
# ─────────────────────────────────────────────────────────────────────────

def bool_(value: bool) -> Bool:
    return Bool(value=value)


def u8(value: int) -> U8:
    return U8(value=value)


def u16(value: int) -> U16:
    return U16(value=value)


def u32(value: int) -> U32:
    return U32(value=value)


def u64(value: int) -> U64:
    return U64(value=value)


def u128(value: int) -> U128:
    return U128(value=value)


def i8(value: int) -> I8:
    return I8(value=value)


def i16(value: int) -> I16:
    return I16(value=value)


def i32(value: int) -> I32:
    return I32(value=value)


def i64(value: int) -> I64:
    return I64(value=value)


def i128(value: int) -> I128:
    return I128(value=value)


def string(value: str) -> String:
    return String(value=value)


def decimal(value) -> Decimal:
    """
    Build a Decimal value from a Decimal, int, float or numeric string.

    Raises:
        TypeError: If value is not numeric
        ValueError: If value cannot be parsed or is not finite
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(value=resolve_decimal(value))


def precise_decimal(value) -> PreciseDecimal:
    return PreciseDecimal(value=resolve_decimal(value))


def address(value) -> Address:
    """
    Build an Address value from a string or an existing Address.

    Raises:
        TypeError: If value is not an address
        ValueError: If the address is malformed
    """
    if isinstance(value, Address):
        return value
    return Address(address=resolve_address(value))


def bucket(identifier: str) -> Bucket:
    return Bucket(identifier=identifier)


def proof(identifier: str) -> Proof:
    return Proof(identifier=identifier)


def expression(value: str) -> Expression:
    return Expression(value=value)


def entire_worktop() -> Expression:
    return Expression(value="ENTIRE_WORKTOP")


def entire_auth_zone() -> Expression:
    return Expression(value="ENTIRE_AUTH_ZONE")


def blob(blob_hash) -> Blob:
    return Blob(hash=blob_hash)


def bytes_(value) -> Bytes:
    return Bytes(value=value)


def non_fungible_local_id(value) -> NonFungibleLocalId:
    """
    Build a non-fungible local id.

    Integers become ``#n#``, bytes become ``[hex]``; strings already in one of
    the textual forms are kept, other strings become ``<string>``.
    """
    if isinstance(value, NonFungibleLocalId):
        return value
    if isinstance(value, bool):
        raise TypeError("Invalid type passed in for non-fungible local id: bool")
    if isinstance(value, int):
        return NonFungibleLocalId(value=f"#{value}#")
    if isinstance(value, (bytes, bytearray)):
        return NonFungibleLocalId(value=f"[{bytes(value).hex()}]")
    if isinstance(value, str):
        if _LOCAL_ID_PATTERN.match(value):
            return NonFungibleLocalId(value=value)
        return NonFungibleLocalId(value=f"<{value}>")
    raise TypeError(f"Invalid type passed in for non-fungible local id: {type(value).__name__}")


def non_fungible_global_id(resource_address, local_id) -> NonFungibleGlobalId:
    return NonFungibleGlobalId(
        resource_address=address(resource_address),
        local_id=non_fungible_local_id(local_id)
    )


def enum(variant: Union[int, str], *fields) -> Enum:
    return Enum(variant=variant, fields=tuple(fields))


def some(value) -> Some:
    return Some(value=value)


def none() -> NoneValue:
    return NoneValue()


def ok(value) -> Ok:
    return Ok(value=value)


def err(value) -> Err:
    return Err(value=value)


def array(element_kind: str, *elements) -> Array:
    return Array(element_kind=element_kind, elements=tuple(elements))


def tuple_(*elements) -> Tuple:
    return Tuple(elements=tuple(elements))


def map_(key_kind: str, value_kind: str, entries: Optional[Iterable] = None) -> Map:
    """
    Build a Map value.

    Args:
        key_kind: Kind tag every key must have
        value_kind: Kind tag every value must have
        entries: Iterable of (key, value) pairs, or a dict
    """
    if entries is None:
        entries = ()
    elif isinstance(entries, dict):
        entries = entries.items()
    return Map(
        key_kind=key_kind,
        value_kind=value_kind,
        entries=tuple((key, value) for key, value in entries)
    )


def ids_array(ids: Iterable) -> "tuple[NonFungibleLocalId, ...]":
    """Resolve an iterable of local ids into a tuple of NonFungibleLocalId values"""
    return tuple(non_fungible_local_id(i) for i in ids)
