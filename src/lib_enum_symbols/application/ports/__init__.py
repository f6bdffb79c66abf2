"""Ports describing how enum-like types expose their symbols."""

from __future__ import annotations

from .symbol_source import SymbolSource, declared_pairs

__all__ = ["SymbolSource", "declared_pairs"]
