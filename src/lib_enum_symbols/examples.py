"""Example enum types exercising both symbol mechanisms.

Symbol methods (discovered by name order): :class:`Color` and
:class:`Protection`. Declared tables (kept in declaration order):
:class:`Palette` and :class:`SasProtocol`.
"""

from __future__ import annotations

from .lib_enum_symbols import FlagEnum, SignedEnum, StringEnum, UnsignedEnum, declare_symbols


class Color(UnsignedEnum):
    """Unsigned 8-bit colours defined through symbol methods."""

    __enum_bits__ = 8

    def Black(self) -> Color:
        return Color(0)

    def Red(self) -> Color:
        return Color(1)

    def Green(self) -> Color:
        return Color(2)

    def Blue(self) -> Color:
        return Color(3)


@declare_symbols(("None", 0), ("Red", 1), ("Green", 2), ("Blue", 3))
class Palette(SignedEnum):
    """Signed 16-bit colours with a declared table, including a ``None`` symbol."""

    __enum_bits__ = 16


@declare_symbols(("None", ""), ("Https", "https"), ("HttpsAndHttp", "https,http"))
class SasProtocol(StringEnum):
    """String-valued protocol selector."""


class Protection(FlagEnum):
    """Memory protection bits."""

    def NoAccess(self) -> Protection:
        return Protection(0)

    def Read(self) -> Protection:
        return Protection(1)

    def Write(self) -> Protection:
        return Protection(2)

    def Execute(self) -> Protection:
        return Protection(4)


__all__ = ["Color", "Palette", "Protection", "SasProtocol"]
