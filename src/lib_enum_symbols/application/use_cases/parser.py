"""Convert text back into enum values.

Purpose
-------
Resolve symbol names (optionally case-insensitive) and fall back to literal
integers so that every formatted value parses back without loss.

Contents
--------
* :func:`find_symbol` – name lookup with the first-match tie-break.
* :func:`parse_symbol` – name lookup that raises when nothing matches.
* :func:`parse_scalar` – name lookup with strict or lenient numeric fallback.
* :func:`parse_flags` – comma-separated flag names and literals OR-ed together.

System Role
-----------
Built on :mod:`lib_enum_symbols.application.use_cases.enumerator`; failures
surface as :class:`~lib_enum_symbols.domain.errors.EnumSymbolError`
subclasses and never return partial results.
"""

from __future__ import annotations

import logging
from typing import Any

from lib_enum_symbols.application.use_cases.enumerator import enumerate_symbols
from lib_enum_symbols.domain.errors import FlagComponentError, NoMatchingSymbolError, NumericFallbackError
from lib_enum_symbols.domain.symbols import Symbol, describe_layout

LOGGER = logging.getLogger(__name__)


def find_symbol(enum_type: type, name: str, case_insensitive: bool = False) -> Symbol | None:
    """Return the symbol of ``enum_type`` called ``name`` or ``None``.

    Case-insensitive lookups compare lowercased names and pick the first
    match in enumeration order.

    Examples
    --------
    >>> class Color(int):
    ...     def Red(self) -> "Color":
    ...         return Color(1)
    >>> find_symbol(Color, "red") is None
    True
    >>> find_symbol(Color, "red", case_insensitive=True).name
    'Red'
    """

    wanted = name.lower() if case_insensitive else name
    found: Symbol | None = None

    def _match(symbol_name: str, value: Any) -> bool:
        nonlocal found
        candidate = symbol_name.lower() if case_insensitive else symbol_name
        if candidate == wanted:
            found = Symbol(symbol_name, value)
            return True
        return False

    enumerate_symbols(enum_type, _match)
    return found


def parse_symbol(enum_type: type, text: str, case_insensitive: bool = False) -> Any:
    """Return the value of the symbol named ``text``.

    Raises
    ------
    NoMatchingSymbolError
        If no symbol carries that name.
    """

    symbol = find_symbol(enum_type, text, case_insensitive)
    if symbol is None:
        raise NoMatchingSymbolError(text, enum_type.__name__)
    return symbol.value


def _parse_literal(text: str, bounds: tuple[int, int], type_name: str) -> int:
    try:
        number = int(text, 0)
    except ValueError as exc:
        raise NumericFallbackError(text, type_name, "not a symbol name or integer literal") from exc
    low, high = bounds
    if not low <= number <= high:
        raise NumericFallbackError(text, type_name, f"{number} is outside the range {low}..{high}")
    return number


def parse_scalar(enum_type: type, text: str, case_insensitive: bool = False, strict: bool = False) -> Any:
    """Return the value named by ``text`` or, when lenient, its literal integer.

    Parameters
    ----------
    enum_type:
        Enum-like type to resolve against.
    text:
        Symbol name or, in lenient mode, an integer literal (decimal or
        ``0x``/``0o``/``0b`` prefixed).
    case_insensitive:
        Match symbol names ignoring case.
    strict:
        Reject anything that is not a symbol name.

    Raises
    ------
    NoMatchingSymbolError
        If no symbol matches and ``strict`` is set or the type stores strings.
    NumericFallbackError
        If the literal is malformed or outside the type's integer range.

    Examples
    --------
    >>> class Color(int):
    ...     __enum_bits__ = 8
    ...     def Blue(self) -> "Color":
    ...         return Color(3)
    >>> int(parse_scalar(Color, "Blue"))
    3
    >>> int(parse_scalar(Color, "0x15"))
    21
    >>> parse_scalar(Color, "Purple", strict=True)
    Traceback (most recent call last):
    ...
    lib_enum_symbols.domain.errors.NoMatchingSymbolError: Cannot parse 'Purple' into 'Color': no matching symbol
    """

    symbol = find_symbol(enum_type, text, case_insensitive)
    if symbol is not None:
        return symbol.value
    layout = describe_layout(enum_type)
    if strict or not layout.representation.is_integer:
        raise NoMatchingSymbolError(text, enum_type.__name__)
    LOGGER.debug("No symbol %r on %s; trying numeric literal", text, enum_type.__name__)
    return enum_type(_parse_literal(text, layout.bounds(), enum_type.__name__))


def parse_flags(enum_type: type, text: str, case_insensitive: bool = False) -> Any:
    """Return the OR of every comma-separated flag name or literal in ``text``.

    Raises
    ------
    FlagComponentError
        Naming the first component that is neither a symbol nor an unsigned
        literal of the type's width.

    Examples
    --------
    >>> class Access(int):
    ...     __enum_signed__ = False
    ...     def Read(self) -> "Access":
    ...         return Access(1)
    ...     def Execute(self) -> "Access":
    ...         return Access(4)
    >>> int(parse_flags(Access, "read, execute", case_insensitive=True))
    5
    >>> int(parse_flags(Access, "Execute, 0x100"))
    260
    """

    layout = describe_layout(enum_type)
    if not layout.representation.is_integer:
        raise TypeError(f"{enum_type.__name__} is not an integer enum type and cannot hold flags")
    accumulated = 0
    for raw in text.split(","):
        component = raw.strip()
        symbol = find_symbol(enum_type, component, case_insensitive)
        if symbol is not None:
            accumulated |= int(symbol.value)
            continue
        try:
            accumulated |= _parse_literal(component, layout.unsigned_bounds(), enum_type.__name__)
        except NumericFallbackError as exc:
            raise FlagComponentError(component, enum_type.__name__, text) from exc
        LOGGER.debug("Flag component %r of %s parsed as literal", component, enum_type.__name__)
    return enum_type(accumulated)


__all__ = ["find_symbol", "parse_flags", "parse_scalar", "parse_symbol"]
