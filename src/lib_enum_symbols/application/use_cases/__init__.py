"""Enumeration, formatting, and parsing use cases."""

from __future__ import annotations

from .enumerator import SymbolCallback, enumerate_symbols, is_symbol_method, iter_symbols
from .formatter import LITERAL_PREFIXES, format_flags, format_scalar, format_string
from .parser import find_symbol, parse_flags, parse_scalar, parse_symbol

__all__ = [
    "LITERAL_PREFIXES",
    "SymbolCallback",
    "enumerate_symbols",
    "find_symbol",
    "format_flags",
    "format_scalar",
    "format_string",
    "is_symbol_method",
    "iter_symbols",
    "parse_flags",
    "parse_scalar",
    "parse_symbol",
]
