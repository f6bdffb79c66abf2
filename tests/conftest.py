from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_enum_symbols import declare_symbols


@pytest.fixture
def record_console() -> Console:
    """Rich console capturing output for assertions."""

    return Console(file=StringIO(), record=True, width=120, force_terminal=False, color_system=None)


class Color(int):
    __enum_bits__ = 8

    def Red(self) -> "Color":
        return Color(1)

    def Green(self) -> "Color":
        return Color(2)

    def Blue(self) -> "Color":
        return Color(3)


@declare_symbols(("None", 0), ("Red", 1), ("Green", 2), ("Blue", 3))
class DeclaredColor(int):
    __enum_bits__ = 16


class Protection(int):
    __enum_signed__ = False
    __enum_bits__ = 32

    def Empty(self) -> "Protection":
        return Protection(0)

    def Read(self) -> "Protection":
        return Protection(1)

    def Write(self) -> "Protection":
        return Protection(2)

    def Execute(self) -> "Protection":
        return Protection(4)


@declare_symbols(("None", 0), ("Read", 1), ("Write", 2), ("Execute", 4))
class DeclaredProtection(int):
    __enum_signed__ = False


@declare_symbols(("None", ""), ("Https", "https"), ("HttpsAndHttp", "https,http"))
class Protocol(str):
    pass


class Empty(int):
    def helper(self) -> int:
        return 1


@pytest.fixture
def color_type() -> type:
    return Color


@pytest.fixture
def declared_color_type() -> type:
    return DeclaredColor


@pytest.fixture
def protection_type() -> type:
    return Protection


@pytest.fixture
def declared_protection_type() -> type:
    return DeclaredProtection


@pytest.fixture
def protocol_type() -> type:
    return Protocol


@pytest.fixture
def empty_type() -> type:
    return Empty
