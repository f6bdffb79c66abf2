"""Precomputed symbol lookups for hot conversion paths.

Purpose
-------
Offer consumers an explicit cache for types converted in tight loops: the
symbols are enumerated once and served from dictionaries afterwards.

Contents
--------
* :class:`SymbolTable` – immutable lookup snapshot of one type.
* :class:`SymbolTableCache` – thread-safe, never-invalidated per-type cache.
* :func:`symbol_table` – module-level cache accessor.

System Role
-----------
Optional layer owned by consumers. The enumerator, formatter, and parser
never consult it; symbol sets are fixed per type so entries never go stale.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Iterator

from lib_enum_symbols.application.use_cases.enumerator import enumerate_symbols
from lib_enum_symbols.domain.symbols import Symbol


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Ordered symbols of ``enum_type`` with name and value indexes.

    Examples
    --------
    >>> class Color(int):
    ...     def Red(self) -> "Color":
    ...         return Color(1)
    >>> table = SymbolTable.build(Color)
    >>> table.value_of("RED", case_insensitive=True)
    1
    >>> table.name_of(1)
    'Red'
    """

    enum_type: type
    symbols: tuple[Symbol, ...]
    _by_name: dict[str, Any] = field(repr=False)
    _by_lower_name: dict[str, Any] = field(repr=False)
    _by_value: dict[Any, str] = field(repr=False)

    @classmethod
    def build(cls, enum_type: type) -> "SymbolTable":
        """Enumerate ``enum_type`` once and index the result."""
        collected: list[Symbol] = []

        def _append(name: str, value: Any) -> bool:
            collected.append(Symbol(name, value))
            return False

        enumerate_symbols(enum_type, _append)
        by_name: dict[str, Any] = {}
        by_lower_name: dict[str, Any] = {}
        by_value: dict[Any, str] = {}
        for symbol in collected:
            by_name.setdefault(symbol.name, symbol.value)
            by_lower_name.setdefault(symbol.name.lower(), symbol.value)
            by_value.setdefault(symbol.value, symbol.name)
        return cls(enum_type, tuple(collected), by_name, by_lower_name, by_value)

    def name_of(self, value: Any) -> str | None:
        """Return the first symbol name carrying ``value``."""
        return self._by_value.get(value)

    def value_of(self, name: str, *, case_insensitive: bool = False) -> Any | None:
        """Return the value of the symbol called ``name``."""
        if case_insensitive:
            return self._by_lower_name.get(name.lower())
        return self._by_name.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(symbol.name for symbol in self.symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)


class SymbolTableCache:
    """Per-type :class:`SymbolTable` cache guarded by a re-entrant lock."""

    def __init__(self) -> None:
        self._tables: dict[type, SymbolTable] = {}
        self._lock = RLock()

    def get(self, enum_type: type) -> SymbolTable:
        """Return the cached table for ``enum_type``, building it on first use."""
        with self._lock:
            table = self._tables.get(enum_type)
            if table is None:
                table = SymbolTable.build(enum_type)
                self._tables[enum_type] = table
            return table

    def __contains__(self, enum_type: object) -> bool:
        with self._lock:
            return enum_type in self._tables

    def __len__(self) -> int:
        with self._lock:
            return len(self._tables)


_CACHE = SymbolTableCache()


def symbol_table(enum_type: type) -> SymbolTable:
    """Return the process-wide cached :class:`SymbolTable` for ``enum_type``."""

    return _CACHE.get(enum_type)


__all__ = ["SymbolTable", "SymbolTableCache", "symbol_table"]
