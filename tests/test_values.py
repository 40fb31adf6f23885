"""
Tests for manifest values.
"""
from decimal import Decimal as PyDecimal

import pytest
from pydantic import TypeAdapter, ValidationError

from ledgertx_sdk.values import (
    Address,
    Array,
    Decimal,
    NonFungibleLocalId,
    U8,
    I8,
    U128,
    Value,
    address,
    array,
    bucket,
    decimal,
    enum,
    map_,
    non_fungible_global_id,
    non_fungible_local_id,
    precise_decimal,
    some,
    string,
    tuple_,
    u8,
    u32,
)
from conftest import XRD


class TestIntegers:
    """Integer values are range-checked."""

    def test_u8_bounds(self):
        assert u8(0).value == 0
        assert u8(255).value == 255
        with pytest.raises(ValidationError):
            u8(256)
        with pytest.raises(ValidationError):
            u8(-1)

    def test_i8_bounds(self):
        assert I8(value=-128).value == -128
        with pytest.raises(ValidationError):
            I8(value=128)

    def test_u128_accepts_large_values(self):
        assert U128(value=2 ** 128 - 1).value == 2 ** 128 - 1

    def test_bool_is_not_an_integer(self):
        with pytest.raises(ValidationError):
            U8(value=True)

    def test_strings_are_not_coerced(self):
        with pytest.raises(ValidationError):
            u32("5")


class TestDecimal:
    """Decimal values are finite and built from numeric natives."""

    @pytest.mark.parametrize("raw, expected", [
        (10, PyDecimal("10")),
        ("2.5", PyDecimal("2.5")),
        (0.1, PyDecimal("0.1")),
        (PyDecimal("1.000"), PyDecimal("1.000")),
    ])
    def test_decimal_from_natives(self, raw, expected):
        assert decimal(raw).value == expected

    def test_decimal_value_passes_through(self):
        value = decimal(3)
        assert decimal(value) is value

    def test_bad_type_raises_type_error(self):
        with pytest.raises(TypeError):
            decimal([1])
        with pytest.raises(TypeError):
            decimal(True)

    @pytest.mark.parametrize("raw", ["abc", "NaN", "Infinity", float("inf")])
    def test_unparsable_or_infinite_raises_value_error(self, raw):
        with pytest.raises(ValueError):
            decimal(raw)

    def test_model_rejects_non_finite(self):
        with pytest.raises(ValidationError):
            Decimal(value=PyDecimal("NaN"))

    def test_eighteen_decimal_places_accepted(self):
        assert decimal("0.000000000000000001").value == PyDecimal("1E-18")
        assert decimal("1.000000000000000000000").value == PyDecimal("1")

    def test_more_than_eighteen_decimal_places_rejected(self):
        with pytest.raises(ValueError, match="at most 18 decimal places"):
            decimal("0.0000000000000000001")
        with pytest.raises(ValidationError):
            Decimal(value="1.0000000000000000001")

    def test_precise_decimal_allows_thirty_six_places(self):
        assert precise_decimal("0." + "0" * 35 + "1").kind == "PreciseDecimal"
        with pytest.raises(ValueError):
            precise_decimal("0." + "0" * 36 + "1")


class TestAddress:
    def test_address_from_string(self):
        value = address(XRD)
        assert isinstance(value, Address)
        assert value.address == XRD

    def test_address_passes_through(self):
        value = address(XRD)
        assert address(value) is value

    def test_bad_type_raises_type_error(self):
        with pytest.raises(TypeError):
            address(42)

    @pytest.mark.parametrize("raw", ["", "resource sim1", " resource_sim1"])
    def test_malformed_raises_value_error(self, raw):
        with pytest.raises(ValueError):
            address(raw)


class TestNonFungibleIds:
    @pytest.mark.parametrize("raw, expected", [
        (1, "#1#"),
        ("ticket", "<ticket>"),
        ("#7#", "#7#"),
        (b"\x01\x02", "[0102]"),
        ("{8f1d3b2a-1c2b-4d5e-9f00-112233445566}", "{8f1d3b2a-1c2b-4d5e-9f00-112233445566}"),
    ])
    def test_local_id_forms(self, raw, expected):
        assert non_fungible_local_id(raw).value == expected

    def test_malformed_local_id_rejected(self):
        with pytest.raises(ValidationError):
            NonFungibleLocalId(value="plain")

    def test_bool_local_id_rejected(self):
        with pytest.raises(TypeError):
            non_fungible_local_id(False)

    def test_global_id(self):
        global_id = non_fungible_global_id(XRD, 5)
        assert global_id.resource_address.address == XRD
        assert global_id.local_id.value == "#5#"


class TestContainers:
    def test_nested_values(self):
        value = tuple_(address(XRD), enum(0, some(string("x"))), decimal(1))
        assert value.elements[1].fields[0].value.value == "x"

    def test_array_requires_homogeneous_elements(self):
        assert len(array("U8", u8(1), u8(2)).elements) == 2
        with pytest.raises(ValidationError):
            array("U8", u8(1), string("two"))

    def test_map_from_dict(self):
        value = map_("String", "U8", {string("a"): u8(1)})
        assert value.entries == ((string("a"), u8(1)),)

    def test_map_checks_kinds(self):
        with pytest.raises(ValidationError):
            map_("String", "U8", [(u8(1), u8(1))])

    def test_values_are_frozen(self):
        value = u8(1)
        with pytest.raises(ValidationError):
            value.value = 2

    def test_discriminated_parsing(self):
        adapter = TypeAdapter(Value)
        parsed = adapter.validate_python({
            "kind": "Array",
            "element_kind": "Bucket",
            "elements": [{"kind": "Bucket", "identifier": "bucket0"}],
        })
        assert isinstance(parsed, Array)
        assert parsed.elements == (bucket("bucket0"),)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Value).validate_python({"kind": "Float", "value": 1.5})
