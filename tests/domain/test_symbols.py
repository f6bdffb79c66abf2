from __future__ import annotations

import pytest

from lib_enum_symbols.domain.errors import FlagComponentError, NoMatchingSymbolError, NumericFallbackError
from lib_enum_symbols.domain.symbols import Representation, Symbol, ValueLayout, describe_layout


def test_symbol_is_immutable() -> None:
    symbol = Symbol("Red", 1)
    with pytest.raises(AttributeError):
        symbol.name = "Blue"  # type: ignore[misc]


def test_int_subclasses_default_to_signed_64_bit() -> None:
    class Plain(int):
        pass

    assert describe_layout(Plain) == ValueLayout(Representation.SIGNED, 64)


@pytest.mark.parametrize(
    "signed, bits, expected",
    [
        (True, 8, (-128, 127)),
        (False, 8, (0, 255)),
        (True, 32, (-(2**31), 2**31 - 1)),
        (False, 64, (0, 2**64 - 1)),
    ],
)
def test_layout_bounds_follow_class_attributes(signed: bool, bits: int, expected: tuple[int, int]) -> None:
    attributes = {"__enum_signed__": signed, "__enum_bits__": bits}
    enum_type = type("Sized", (int,), attributes)
    assert describe_layout(enum_type).bounds() == expected


def test_unsigned_bounds_ignore_signedness() -> None:
    assert ValueLayout(Representation.SIGNED, 16).unsigned_bounds() == (0, 65535)


def test_string_layout_has_no_integer_bounds() -> None:
    layout = describe_layout(type("Text", (str,), {}))
    assert layout.representation is Representation.STRING
    assert not layout.representation.is_integer
    with pytest.raises(TypeError):
        layout.bounds()


def test_unsupported_width_is_rejected() -> None:
    with pytest.raises(ValueError, match="__enum_bits__"):
        describe_layout(type("Odd", (int,), {"__enum_bits__": 12}))


@pytest.mark.parametrize("enum_type", [float, bool, object])
def test_non_int_or_str_types_are_rejected(enum_type: type) -> None:
    with pytest.raises(TypeError):
        describe_layout(enum_type)


def test_error_attributes_and_messages() -> None:
    missing = NoMatchingSymbolError("Purple", "Color")
    fallback = NumericFallbackError("0xZZ", "Color", "not a symbol name or integer literal")
    component = FlagComponentError("Bogus", "Protection", "Read, Bogus")

    assert (missing.text, missing.type_name) == ("Purple", "Color")
    assert fallback.reason == "not a symbol name or integer literal"
    assert (component.component, component.text) == ("Bogus", "Read, Bogus")
    assert str(component) == "Cannot parse flag component 'Bogus' into 'Protection'"
