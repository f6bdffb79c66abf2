"""Symbol source port describing types that declare their own symbol table.

Purpose
-------
Name the capability "a type that can produce its ordered ``(name, value)``
pairs" so the enumerator can prefer an explicit registration over method
discovery.

Contents
--------
* :class:`SymbolSource` – runtime-checkable protocol exposing
  ``__enum_symbols__``.
* :func:`declared_pairs` – normalise a declared table into ordered pairs.

System Role
-----------
Keeps the enumerator independent from how a type registered its symbols;
the ``declare_symbols`` decorator is the canonical producer.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable


@runtime_checkable
class SymbolSource(Protocol):
    """Type carrying an ordered symbol table."""

    __enum_symbols__: Iterable[tuple[str, Any]] | Mapping[str, Any]


def declared_pairs(enum_type: type) -> tuple[tuple[str, Any], ...] | None:
    """Return the declared ``(name, value)`` pairs of ``enum_type`` or ``None``.

    Examples
    --------
    >>> class Level(int):
    ...     __enum_symbols__ = {"Low": 1, "High": 2}
    >>> declared_pairs(Level)
    (('Low', 1), ('High', 2))
    >>> declared_pairs(int) is None
    True
    """

    if not isinstance(enum_type, SymbolSource):
        return None
    table = enum_type.__enum_symbols__
    if table is None:
        return None
    if isinstance(table, Mapping):
        return tuple(table.items())
    return tuple((str(name), value) for name, value in table)


__all__ = ["SymbolSource", "declared_pairs"]
