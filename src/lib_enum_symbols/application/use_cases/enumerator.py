"""Discover the symbols of an enum-like type.

Purpose
-------
Turn a class into its ordered ``(name, value)`` symbols without any
per-type conversion table written by hand.

Contents
--------
* :func:`is_symbol_method` – structural test for symbol methods.
* :func:`iter_symbols` – lazily yield :class:`Symbol` objects.
* :func:`enumerate_symbols` – callback-driven enumeration with early stop.

System Role
-----------
Leaf of the engine; the formatter and parser consume it and it never calls
back into them. Nothing is cached: symbols are recomputed from the class on
every call.
"""

from __future__ import annotations

import inspect
import logging
import typing
from typing import Any, Callable, Iterator

from lib_enum_symbols.application.ports.symbol_source import declared_pairs
from lib_enum_symbols.domain.symbols import Symbol

LOGGER = logging.getLogger(__name__)

SymbolCallback = Callable[[str, Any], bool]
"""Receives ``(name, value)``; a truthy return stops the enumeration."""

_SELF = getattr(typing, "Self", None)
_SELF_ANNOTATIONS = {"Self", "typing.Self", "typing_extensions.Self"}
_RECEIVER_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _returns_enum_type(function: Callable[..., Any], enum_type: type) -> bool:
    annotation = getattr(function, "__annotations__", {}).get("return", inspect.Signature.empty)
    if annotation is enum_type or (_SELF is not None and annotation is _SELF):
        return True
    if isinstance(annotation, str):
        name = annotation.strip().strip("'\"")
        return name in {enum_type.__name__, enum_type.__qualname__} or name in _SELF_ANNOTATIONS
    return False


def is_symbol_method(enum_type: type, function: Callable[..., Any]) -> bool:
    """Return ``True`` when ``function`` defines a symbol of ``enum_type``.

    A symbol method accepts only its receiver and is annotated to return the
    enum type itself.

    Examples
    --------
    >>> class Color(int):
    ...     def Red(self) -> "Color":
    ...         return Color(1)
    ...     def shade(self, amount: int) -> "Color":
    ...         return Color(amount)
    >>> is_symbol_method(Color, Color.Red)
    True
    >>> is_symbol_method(Color, Color.shade)
    False
    """

    if not _returns_enum_type(function, enum_type):
        return False
    try:
        parameters = list(inspect.signature(function).parameters.values())
    except (TypeError, ValueError):
        return False
    return len(parameters) == 1 and parameters[0].kind in _RECEIVER_KINDS


def _coerce(value: Any, enum_type: type) -> Any:
    return value if isinstance(value, enum_type) else enum_type(value)


def iter_symbols(enum_type: type) -> Iterator[Symbol]:
    """Yield the symbols of ``enum_type`` in enumeration order.

    A declared ``__enum_symbols__`` table wins and keeps its declared order.
    Otherwise symbol methods are discovered with :func:`inspect.getmembers`
    (ordered by name) and each is called with a zero-valued receiver only
    when the iteration reaches it.

    Examples
    --------
    >>> class Color(int):
    ...     def Red(self) -> "Color":
    ...         return Color(1)
    ...     def Blue(self) -> "Color":
    ...         return Color(3)
    >>> [(symbol.name, int(symbol.value)) for symbol in iter_symbols(Color)]
    [('Blue', 3), ('Red', 1)]
    """

    pairs = declared_pairs(enum_type)
    if pairs is not None:
        LOGGER.debug("Enumerating %d declared symbols of %s", len(pairs), enum_type.__name__)
        for name, value in pairs:
            yield Symbol(name, _coerce(value, enum_type))
        return

    methods = [
        (name, function)
        for name, function in inspect.getmembers(enum_type, inspect.isfunction)
        if is_symbol_method(enum_type, function)
    ]
    LOGGER.debug("Discovered %d symbol methods on %s", len(methods), enum_type.__name__)
    if not methods:
        return
    receiver = enum_type()
    for name, function in methods:
        yield Symbol(name, _coerce(function(receiver), enum_type))


def enumerate_symbols(enum_type: type, callback: SymbolCallback) -> None:
    """Invoke ``callback(name, value)`` once per symbol of ``enum_type``.

    Enumeration halts as soon as ``callback`` returns a truthy value. Types
    without symbols never invoke the callback.

    Examples
    --------
    >>> class Color(int):
    ...     def Red(self) -> "Color":
    ...         return Color(1)
    ...     def Green(self) -> "Color":
    ...         return Color(2)
    >>> seen = []
    >>> enumerate_symbols(Color, lambda name, value: seen.append(name) or True)
    >>> seen
    ['Green']
    """

    for symbol in iter_symbols(enum_type):
        if callback(symbol.name, symbol.value):
            return


__all__ = ["SymbolCallback", "enumerate_symbols", "is_symbol_method", "iter_symbols"]
