"""Adapters around the conversion engine: lookup caches and console output."""

from __future__ import annotations

from .console.rich_symbols import RichSymbolPrinter
from .symbol_table import SymbolTable, SymbolTableCache, symbol_table

__all__ = ["RichSymbolPrinter", "SymbolTable", "SymbolTableCache", "symbol_table"]
