"""Public package surface of the enum symbol conversion engine.

``enumerate_symbols``, ``format_scalar``, ``format_flags``, ``parse_scalar``
and ``parse_flags`` are the core operations; the base classes and
``declare_symbols`` make enum-like types convenient to define.
"""

from __future__ import annotations

from .adapters.symbol_table import SymbolTable, SymbolTableCache, symbol_table
from .application.ports.symbol_source import SymbolSource
from .application.use_cases.enumerator import SymbolCallback, enumerate_symbols, is_symbol_method, iter_symbols
from .application.use_cases.formatter import format_flags, format_scalar, format_string
from .application.use_cases.parser import find_symbol, parse_flags, parse_scalar, parse_symbol
from .domain.errors import EnumSymbolError, FlagComponentError, NoMatchingSymbolError, NumericFallbackError
from .domain.symbols import Representation, Symbol, ValueLayout, describe_layout
from .lib_enum_symbols import (
    FlagEnum,
    SignedEnum,
    StringEnum,
    UnsignedEnum,
    declare_symbols,
    import_enum_type,
    summary_info,
    symbols_demo,
)

__all__ = [
    "EnumSymbolError",
    "FlagComponentError",
    "FlagEnum",
    "NoMatchingSymbolError",
    "NumericFallbackError",
    "Representation",
    "SignedEnum",
    "StringEnum",
    "Symbol",
    "SymbolCallback",
    "SymbolSource",
    "SymbolTable",
    "SymbolTableCache",
    "UnsignedEnum",
    "ValueLayout",
    "declare_symbols",
    "describe_layout",
    "enumerate_symbols",
    "find_symbol",
    "format_flags",
    "format_scalar",
    "format_string",
    "import_enum_type",
    "is_symbol_method",
    "iter_symbols",
    "parse_flags",
    "parse_scalar",
    "parse_symbol",
    "summary_info",
    "symbol_table",
    "symbols_demo",
]
