"""Behavioural tests for the public façade: base classes, declarations, and demo helpers."""

from __future__ import annotations

import pytest

import lib_enum_symbols
from lib_enum_symbols import (
    FlagComponentError,
    NoMatchingSymbolError,
    import_enum_type,
    summary_info,
    symbols_demo,
)
from lib_enum_symbols.examples import Color, Palette, Protection, SasProtocol


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()
    assert "Info for lib_enum_symbols" in summary
    assert "version" in summary
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_color_str_uses_symbol_names() -> None:
    assert str(Color().Red()) == "Red"
    assert str(Color(123)) == "123"


def test_color_parse_is_lenient_and_case_insensitive() -> None:
    assert Color.parse("blue") == Color().Blue()
    assert Color.parse("0x15") == 21
    with pytest.raises(ValueError):
        Color.parse("Bluex")


def test_color_symbols_follow_name_order() -> None:
    assert [symbol.name for symbol in Color.symbols()] == ["Black", "Blue", "Green", "Red"]


def test_palette_declares_a_none_symbol() -> None:
    assert str(Palette(0)) == "None"
    assert Palette.parse("none") == 0
    assert [symbol.name for symbol in Palette.symbols()] == ["None", "Red", "Green", "Blue"]


def test_strict_subclass_rejects_numbers() -> None:
    class StrictPalette(Palette):
        __enum_strict__ = True

    with pytest.raises(NoMatchingSymbolError):
        StrictPalette.parse("7")


def test_string_enum_formats_and_parses() -> None:
    protocol = SasProtocol.parse("HttpsAndHttp")
    assert protocol == "https,http"
    assert str(protocol) == "HttpsAndHttp"
    assert str(SasProtocol("ftp")) == ""
    with pytest.raises(NoMatchingSymbolError):
        SasProtocol.parse("https")


def test_flag_enum_operators_keep_the_type() -> None:
    combined = Protection().Write() | Protection().Read()

    assert type(combined) is Protection
    assert str(combined) == "Read, Write"
    assert combined.has(Protection().Read())
    assert not combined.has(Protection().Execute())
    assert type(combined & 1) is Protection
    assert type(1 | combined) is Protection
    assert str(combined ^ Protection().Read()) == "Write"


def test_flag_enum_parse_round_trip() -> None:
    value = Protection.parse("read, execute, 0x1001")
    assert value == 0x1005
    assert str(value) == "Execute, Read, 0x1000"
    assert Protection.parse(str(value)) == value
    assert str(Protection(0)) == "NoAccess"


@pytest.mark.parametrize("value", [256, 300, -1])
def test_unsigned_enum_rejects_values_outside_its_width(value: int) -> None:
    with pytest.raises(ValueError, match=r"outside the range 0\.\.255 of Color"):
        Color(value)


@pytest.mark.parametrize("value", [-32769, 32768])
def test_signed_enum_rejects_values_outside_its_width(value: int) -> None:
    with pytest.raises(ValueError, match="Palette"):
        Palette(value)


@pytest.mark.parametrize("value", [0, 1, 123, 255])
def test_every_accepted_color_round_trips(value: int) -> None:
    assert Color.parse(str(Color(value))) == value


@pytest.mark.parametrize("value", [-32768, -1, 7, 32767])
def test_every_accepted_palette_value_round_trips(value: int) -> None:
    assert Palette.parse(str(Palette(value))) == value


def test_flag_enum_operators_cannot_leave_the_type_width() -> None:
    with pytest.raises(ValueError, match="Protection"):
        Protection().Read() | (1 << 40)
    with pytest.raises(ValueError, match="Protection"):
        (1 << 32) ^ Protection().Write()

    widest = Protection().Read() | 0xFFFF_FFFE
    assert Protection.parse(str(widest)) == 0xFFFF_FFFF


def test_flag_enum_operators_defer_on_non_integers() -> None:
    read = Protection().Read()

    assert read.__or__("x") is NotImplemented
    assert read.__and__(1.5) is NotImplemented
    assert read.__xor__(None) is NotImplemented
    with pytest.raises(TypeError):
        read | "x"


def test_flag_enum_parse_failure_reports_component() -> None:
    with pytest.raises(FlagComponentError, match="'bogus'"):
        Protection.parse("read, bogus")


def test_import_enum_type_resolves_targets() -> None:
    assert import_enum_type("lib_enum_symbols.examples:Protection") is Protection


@pytest.mark.parametrize(
    "target, error",
    [
        ("lib_enum_symbols.examples", ValueError),
        ("lib_enum_symbols.examples:Missing", AttributeError),
        ("lib_enum_symbols:__name__", TypeError),
        ("lib_enum_symbols.nonexistent:Color", ImportError),
    ],
)
def test_import_enum_type_rejects_bad_targets(target: str, error: type[Exception]) -> None:
    with pytest.raises(error):
        import_enum_type(target)


def test_symbols_demo_reports_conversions() -> None:
    rows = symbols_demo()
    outputs = {(row["type"], row["operation"], row["input"]): row["output"] for row in rows}

    assert outputs[("Color", "format_scalar", "1")] == "Red"
    assert outputs[("Color", "format_scalar", "123")] == "123"
    assert outputs[("Color", "parse_scalar", "Blue")] == "3"
    assert outputs[("Color", "parse_scalar", "0x15")] == "21"
    assert outputs[("Color", "parse_scalar", "Bluex")].startswith("error:")
    assert outputs[("SasProtocol", "parse_symbol", "foo")].startswith("error:")
    assert outputs[("SasProtocol", "parse_symbol", "Https")] == "Https"
    assert outputs[("Protection", "parse_flags", "read, execute, 0x1001")] == "0x1005"
    assert outputs[("Protection", "parse_flags", "read, bogus")].startswith("error:")


def test_public_surface_exports_core_operations() -> None:
    for name in ("enumerate_symbols", "format_scalar", "format_flags", "parse_scalar", "parse_flags"):
        assert callable(getattr(lib_enum_symbols, name))
