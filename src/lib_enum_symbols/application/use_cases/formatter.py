"""Render enum values as symbol names.

Purpose
-------
Convert a value of an enum-like type to text without losing information:
known values render as their symbol, unknown values as numeric literals.

Contents
--------
* :func:`format_string` – symbol name or ``""``.
* :func:`format_scalar` – symbol name or decimal fallback.
* :func:`format_flags` – comma-separated flag names plus leftover bits.
* :data:`LITERAL_PREFIXES` – prefixes marking the base of flag literals.

System Role
-----------
Built on :mod:`lib_enum_symbols.application.use_cases.enumerator`. Output of
:func:`format_scalar` and :func:`format_flags` parses back through the
parser to the original value.
"""

from __future__ import annotations

from typing import Any

from lib_enum_symbols.application.use_cases.enumerator import enumerate_symbols
from lib_enum_symbols.domain.symbols import Representation, describe_layout

LITERAL_PREFIXES: dict[int, str] = {2: "0b", 8: "0o", 10: "", 16: "0x"}
"""Bases whose literals Python's ``int(text, 0)`` reads back, with their prefixes."""

_DIGIT_FORMATS = {2: "b", 8: "o", 10: "d", 16: "x"}


def format_string(value: Any, enum_type: type) -> str:
    """Return the first symbol name whose value equals ``value`` or ``""``.

    Examples
    --------
    >>> class Protocol(str):
    ...     def Https(self) -> "Protocol":
    ...         return Protocol("https")
    >>> format_string(Protocol("https"), Protocol)
    'Https'
    >>> format_string(Protocol("ftp"), Protocol)
    ''
    """

    found = ""

    def _match(name: str, symbol_value: Any) -> bool:
        nonlocal found
        if _same(symbol_value, value):
            found = name
            return True
        return False

    enumerate_symbols(enum_type, _match)
    return found


def _same(symbol_value: Any, value: Any) -> bool:
    # Compare underlying representations so int 1 never equals str "1".
    if isinstance(symbol_value, str) or isinstance(value, str):
        return isinstance(symbol_value, str) and isinstance(value, str) and symbol_value == value
    return int(symbol_value) == int(value)


def format_scalar(value: Any, enum_type: type) -> str:
    """Return the symbol for ``value`` or a literal fallback.

    Integer layouts fall back to the decimal rendering; string layouts fall
    back to ``""`` because no numeric rendering is meaningful for them.

    Examples
    --------
    >>> class Color(int):
    ...     def Red(self) -> "Color":
    ...         return Color(1)
    >>> format_scalar(Color(1), Color)
    'Red'
    >>> format_scalar(Color(123), Color)
    '123'
    """

    name = format_string(value, enum_type)
    if name or describe_layout(enum_type).representation is Representation.STRING:
        return name
    return str(int(value))


def _render_literal(bits: int, base: int) -> str:
    return f"{LITERAL_PREFIXES[base]}{bits:{_DIGIT_FORMATS[base]}}"


def format_flags(value: int, enum_type: type, base: int = 16) -> str:
    """Render ``value`` as the OR-combination of ``enum_type`` flag symbols.

    Zero renders as the first zero-valued symbol. Any other value lists every
    non-zero symbol whose bits are all present, in enumeration order, and
    appends the bits no symbol covers as a literal in ``base``.

    Parameters
    ----------
    value:
        Non-negative flag set.
    enum_type:
        Integer enum-like type declaring the flag symbols.
    base:
        Base of the trailing literal: 2, 8, 10 or 16.

    Raises
    ------
    ValueError
        If ``value`` is negative or ``base`` is unsupported.
    TypeError
        If ``enum_type`` has a string layout.

    Examples
    --------
    >>> class Access(int):
    ...     __enum_signed__ = False
    ...     def Read(self) -> "Access":
    ...         return Access(1)
    ...     def Write(self) -> "Access":
    ...         return Access(2)
    >>> format_flags(3, Access)
    'Read, Write'
    >>> format_flags(0x12, Access)
    'Write, 0x10'
    >>> format_flags(0, Access)
    '0x0'
    """

    if base not in LITERAL_PREFIXES:
        raise ValueError(f"Unsupported flag literal base: {base!r} (expected one of {sorted(LITERAL_PREFIXES)})")
    if not describe_layout(enum_type).representation.is_integer:
        raise TypeError(f"{enum_type.__name__} is not an integer enum type and cannot hold flags")
    value = int(value)
    if value < 0:
        raise ValueError(f"Flag values must be non-negative, got {value}")

    names: list[str] = []
    matched = 0

    def _collect(name: str, symbol_value: Any) -> bool:
        nonlocal matched
        bits = int(symbol_value)
        if value == 0:
            if bits == 0:
                names.append(name)
                return True
            return False
        if bits != 0 and value & bits == bits:
            matched |= bits
            names.append(name)
        return False

    enumerate_symbols(enum_type, _collect)
    if value == 0 and not names:
        return _render_literal(0, base)
    if matched != value:
        names.append(_render_literal(value ^ matched, base))
    return ", ".join(names)


__all__ = ["LITERAL_PREFIXES", "format_flags", "format_scalar", "format_string"]
