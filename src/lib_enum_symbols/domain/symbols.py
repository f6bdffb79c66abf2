"""Value objects describing enum symbols and their underlying representation.

Purpose
-------
Model the two facts every conversion needs: the ``(name, value)`` pairs of a
type and the integer or string layout its values use.

Contents
--------
* :class:`Symbol` – immutable named constant of an enum-like type.
* :class:`Representation` – signed, unsigned, or string values.
* :class:`ValueLayout` – representation plus bit width and integer bounds.
* :func:`describe_layout` – derive the layout from a class.

System Role
-----------
Shared by the enumerator, formatter, and parser so that bounds checks and
type names stay consistent across operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

_SUPPORTED_BITS = (8, 16, 32, 64)


@dataclass(frozen=True, slots=True)
class Symbol:
    """Named constant belonging to an enum-like type.

    Examples
    --------
    >>> Symbol("Red", 1)
    Symbol(name='Red', value=1)
    """

    name: str
    value: Any


class Representation(Enum):
    """Underlying storage kind of an enum-like type's values."""

    SIGNED = "signed"
    UNSIGNED = "unsigned"
    STRING = "string"

    @property
    def is_integer(self) -> bool:
        return self is not Representation.STRING


@dataclass(frozen=True, slots=True)
class ValueLayout:
    """Representation and width shared by all values of one type.

    Examples
    --------
    >>> ValueLayout(Representation.UNSIGNED, 8).bounds()
    (0, 255)
    >>> ValueLayout(Representation.SIGNED, 16).bounds()
    (-32768, 32767)
    """

    representation: Representation
    bits: int = 64

    def bounds(self) -> tuple[int, int]:
        """Return the inclusive ``(minimum, maximum)`` integer range."""
        if self.representation is Representation.SIGNED:
            return -(1 << (self.bits - 1)), (1 << (self.bits - 1)) - 1
        if self.representation is Representation.UNSIGNED:
            return 0, (1 << self.bits) - 1
        raise TypeError("string layouts have no integer bounds")

    def unsigned_bounds(self) -> tuple[int, int]:
        """Return the range of an unsigned integer of the same width."""
        return 0, (1 << self.bits) - 1


def describe_layout(enum_type: type) -> ValueLayout:
    """Derive the :class:`ValueLayout` of ``enum_type`` from its bases.

    ``str`` subclasses are string layouts. ``int`` subclasses read the optional
    ``__enum_signed__`` (default ``True``) and ``__enum_bits__`` (default 64)
    class attributes.

    Examples
    --------
    >>> class Mode(int):
    ...     __enum_signed__ = False
    ...     __enum_bits__ = 8
    >>> describe_layout(Mode)
    ValueLayout(representation=<Representation.UNSIGNED: 'unsigned'>, bits=8)
    >>> describe_layout(str).representation
    <Representation.STRING: 'string'>
    """

    if issubclass(enum_type, str):
        return ValueLayout(Representation.STRING, 0)
    if issubclass(enum_type, int) and not issubclass(enum_type, bool):
        bits = getattr(enum_type, "__enum_bits__", 64)
        if bits not in _SUPPORTED_BITS:
            raise ValueError(f"{enum_type.__name__}.__enum_bits__ must be one of {_SUPPORTED_BITS}, got {bits!r}")
        signed = bool(getattr(enum_type, "__enum_signed__", True))
        return ValueLayout(Representation.SIGNED if signed else Representation.UNSIGNED, bits)
    raise TypeError(f"{enum_type.__name__} must subclass int or str to be used as an enum type")


__all__ = ["Representation", "Symbol", "ValueLayout", "describe_layout"]
