from __future__ import annotations

from typing import Any

import pytest

from lib_enum_symbols.application.use_cases.enumerator import enumerate_symbols, is_symbol_method, iter_symbols
from lib_enum_symbols.domain.symbols import Symbol


def _collect(enum_type: type) -> list[tuple[str, int]]:
    seen: list[tuple[str, int]] = []

    def _record(name: str, value: Any) -> bool:
        seen.append((name, int(value)))
        return False

    enumerate_symbols(enum_type, _record)
    return seen


def test_symbol_methods_are_enumerated_in_name_order(color_type: type) -> None:
    assert _collect(color_type) == [("Blue", 3), ("Green", 2), ("Red", 1)]


def test_declared_table_keeps_declaration_order(declared_color_type: type) -> None:
    assert _collect(declared_color_type) == [("None", 0), ("Red", 1), ("Green", 2), ("Blue", 3)]


def test_values_are_instances_of_the_enum_type(color_type: type) -> None:
    assert all(type(symbol.value) is color_type for symbol in iter_symbols(color_type))


def test_callback_stop_halts_enumeration(color_type: type) -> None:
    seen: list[str] = []

    def _stop_at_green(name: str, value: Any) -> bool:
        seen.append(name)
        return name == "Green"

    enumerate_symbols(color_type, _stop_at_green)

    assert seen == ["Blue", "Green"]


def test_type_without_symbols_never_invokes_callback(empty_type: type) -> None:
    calls: list[str] = []
    enumerate_symbols(empty_type, lambda name, value: calls.append(name) or False)
    assert calls == []


def test_symbol_methods_are_only_invoked_when_reached() -> None:
    invoked: list[str] = []

    class Lazy(int):
        def A(self) -> "Lazy":
            invoked.append("A")
            return Lazy(1)

        def B(self) -> "Lazy":
            invoked.append("B")
            return Lazy(2)

    enumerate_symbols(Lazy, lambda name, value: True)

    assert invoked == ["A"]


def test_symbol_methods_receive_a_zero_valued_receiver() -> None:
    receivers: list[int] = []

    class Probe(int):
        def Only(self) -> "Probe":
            receivers.append(int(self))
            return Probe(7)

    assert list(iter_symbols(Probe)) == [Symbol("Only", 7)]
    assert receivers == [0]


def test_bare_return_values_are_coerced_to_the_enum_type() -> None:
    class Loose(int):
        def One(self) -> "Loose":
            return 1  # type: ignore[return-value]

    (symbol,) = iter_symbols(Loose)
    assert type(symbol.value) is Loose


def test_string_typed_symbols_use_empty_string_receiver(protocol_type: type) -> None:
    assert [symbol.name for symbol in iter_symbols(protocol_type)] == ["None", "Https", "HttpsAndHttp"]


class _Shapes(int):
    def Square(self) -> "_Shapes":
        return _Shapes(1)

    def scaled(self, factor: int) -> "_Shapes":
        return _Shapes(int(self) * factor)

    def label(self) -> str:
        return "shape"

    def unannotated(self):  # noqa: ANN201
        return _Shapes(2)

    @staticmethod
    def factory() -> "_Shapes":
        return _Shapes(3)

    @classmethod
    def default(cls) -> "_Shapes":
        return cls(4)


@pytest.mark.parametrize(
    "attribute, expected",
    [
        ("Square", True),
        ("scaled", False),
        ("label", False),
        ("unannotated", False),
        ("factory", False),
    ],
)
def test_is_symbol_method_applies_structural_contract(attribute: str, expected: bool) -> None:
    assert is_symbol_method(_Shapes, getattr(_Shapes, attribute)) is expected


def test_only_structural_symbol_methods_are_enumerated() -> None:
    assert [symbol.name for symbol in iter_symbols(_Shapes)] == ["Square"]


def test_class_object_annotation_is_accepted() -> None:
    class Direct(int):
        pass

    def North(self) -> Direct:  # type: ignore[valid-type]
        return Direct(1)

    North.__annotations__["return"] = Direct
    Direct.North = North  # type: ignore[attr-defined]

    assert [symbol.name for symbol in iter_symbols(Direct)] == ["North"]


def test_enumeration_is_stable_across_calls(color_type: type) -> None:
    assert list(iter_symbols(color_type)) == list(iter_symbols(color_type))
