"""Error taxonomy raised when text cannot be converted into an enum value.

Purpose
-------
Give callers one exception family for every parse failure while still
distinguishing *why* the conversion failed.

Contents
--------
* :class:`EnumSymbolError` – base class carrying the offending text and type.
* :class:`NoMatchingSymbolError` – no symbol name matched.
* :class:`NumericFallbackError` – the lenient numeric fallback failed.
* :class:`FlagComponentError` – one comma-separated flag component failed.

System Role
-----------
All errors subclass :class:`ValueError` so they behave like the
``from_name`` helpers that reject unknown human-entered names.
"""

from __future__ import annotations


class EnumSymbolError(ValueError):
    """Base class for conversion failures of enum-like types."""

    def __init__(self, text: str, type_name: str, message: str | None = None) -> None:
        self.text = text
        self.type_name = type_name
        super().__init__(message or f"Cannot parse {text!r} into {type_name!r}")


class NoMatchingSymbolError(EnumSymbolError):
    """Raised when ``text`` names no symbol and no fallback applies.

    Examples
    --------
    >>> str(NoMatchingSymbolError("Purple", "Color"))
    "Cannot parse 'Purple' into 'Color': no matching symbol"
    """

    def __init__(self, text: str, type_name: str) -> None:
        super().__init__(text, type_name, f"Cannot parse {text!r} into {type_name!r}: no matching symbol")


class NumericFallbackError(EnumSymbolError):
    """Raised when lenient parsing cannot read ``text`` as an in-range integer."""

    def __init__(self, text: str, type_name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(text, type_name, f"Cannot parse {text!r} into {type_name!r}: {reason}")


class FlagComponentError(EnumSymbolError):
    """Raised when one flag component is neither a symbol nor an unsigned literal."""

    def __init__(self, component: str, type_name: str, text: str) -> None:
        self.component = component
        super().__init__(text, type_name, f"Cannot parse flag component {component!r} into {type_name!r}")


__all__ = [
    "EnumSymbolError",
    "FlagComponentError",
    "NoMatchingSymbolError",
    "NumericFallbackError",
]
