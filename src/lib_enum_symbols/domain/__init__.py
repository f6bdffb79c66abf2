"""Domain value objects and errors used by the conversion engine."""

from __future__ import annotations

from .errors import EnumSymbolError, FlagComponentError, NoMatchingSymbolError, NumericFallbackError
from .symbols import Representation, Symbol, ValueLayout, describe_layout

__all__ = [
    "EnumSymbolError",
    "FlagComponentError",
    "NoMatchingSymbolError",
    "NumericFallbackError",
    "Representation",
    "Symbol",
    "ValueLayout",
    "describe_layout",
]
