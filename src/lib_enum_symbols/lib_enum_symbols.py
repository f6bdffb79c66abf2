"""Public façade: enum base classes, symbol declaration, and demo helpers.

Purpose
-------
Expose the conversion engine in the shape host code consumes it: base
classes whose ``str()`` and ``parse()`` delegate to the engine, a decorator
for declaring symbol tables, and the helpers behind the CLI.

Contents
--------
* :func:`declare_symbols` – register an ordered symbol table on a class.
* Base classes: :class:`SignedEnum`, :class:`UnsignedEnum`,
  :class:`StringEnum`, :class:`FlagEnum`.
* :func:`symbols_demo` – format and parse the bundled example types.
* :func:`summary_info` – metadata banner used by the CLI.
* :func:`import_enum_type` – resolve ``module:QualName`` targets.

System Role
-----------
Sits above :mod:`lib_enum_symbols.application.use_cases` and
:mod:`lib_enum_symbols.domain`; nothing in the inner layers imports it.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Callable, TypeVar

from .application.use_cases.enumerator import iter_symbols
from .application.use_cases.formatter import format_flags, format_scalar, format_string
from .application.use_cases.parser import parse_flags, parse_scalar, parse_symbol
from .domain.errors import EnumSymbolError
from .domain.symbols import Symbol, describe_layout

_T = TypeVar("_T", bound=type)


def declare_symbols(*pairs: tuple[str, Any], **named: Any) -> Callable[[_T], _T]:
    """Attach an ordered ``__enum_symbols__`` table to the decorated class.

    Positional ``(name, value)`` pairs come first, keyword symbols after them;
    values are coerced to the class. The table replaces symbol-method
    discovery for that class.

    Examples
    --------
    >>> @declare_symbols(("None", 0), ("Red", 1), Green=2)
    ... class Palette(int):
    ...     pass
    >>> [(name, int(value)) for name, value in Palette.__enum_symbols__]
    [('None', 0), ('Red', 1), ('Green', 2)]
    """

    entries = [(str(name), value) for name, value in pairs] + list(named.items())

    def _decorate(cls: _T) -> _T:
        cls.__enum_symbols__ = tuple(  # type: ignore[attr-defined]
            (name, value if isinstance(value, cls) else cls(value)) for name, value in entries
        )
        return cls

    return _decorate


class SignedEnum(int):
    """Signed integer enum whose ``str()`` and ``parse()`` use its symbols.

    Class attributes tune parsing: ``__enum_case_insensitive__`` (default
    ``True``) and ``__enum_strict__`` (default ``False``, so unknown numbers
    round-trip). Values outside the range of ``__enum_bits__`` and
    ``__enum_signed__`` are rejected on construction.

    Examples
    --------
    >>> class Level(UnsignedEnum):
    ...     __enum_bits__ = 8
    >>> Level(255)
    255
    >>> Level(256)
    Traceback (most recent call last):
    ...
    ValueError: 256 is outside the range 0..255 of Level
    """

    __enum_signed__ = True
    __enum_bits__ = 64
    __enum_case_insensitive__ = True
    __enum_strict__ = False

    def __new__(cls, *args: Any) -> Any:
        instance = super().__new__(cls, *args)
        low, high = describe_layout(cls).bounds()
        number = int(instance)
        if not low <= number <= high:
            raise ValueError(f"{number} is outside the range {low}..{high} of {cls.__name__}")
        return instance

    def __str__(self) -> str:
        return format_scalar(self, type(self))

    @classmethod
    def parse(cls, text: str) -> Any:
        """Return the value named by ``text`` (or its literal when lenient)."""
        return parse_scalar(cls, text, cls.__enum_case_insensitive__, cls.__enum_strict__)

    @classmethod
    def symbols(cls) -> tuple[Symbol, ...]:
        """Return every symbol in enumeration order."""
        return tuple(iter_symbols(cls))


class UnsignedEnum(SignedEnum):
    """Unsigned variant of :class:`SignedEnum`."""

    __enum_signed__ = False


class StringEnum(str):
    """String enum; unknown values render as ``""`` and never parse."""

    __enum_case_insensitive__ = False

    def __str__(self) -> str:
        return format_string(self, type(self))

    @classmethod
    def parse(cls, text: str) -> Any:
        return parse_symbol(cls, text, cls.__enum_case_insensitive__)

    @classmethod
    def symbols(cls) -> tuple[Symbol, ...]:
        return tuple(iter_symbols(cls))


class FlagEnum(UnsignedEnum):
    """Bit-flag enum rendered as comma-separated symbol names.

    Bitwise operators keep the flag type so combinations still render by
    name.
    """

    __enum_bits__ = 32
    __enum_flag_base__ = 16

    def __str__(self) -> str:
        return format_flags(self, type(self), type(self).__enum_flag_base__)

    @classmethod
    def parse(cls, text: str) -> Any:
        return parse_flags(cls, text, cls.__enum_case_insensitive__)

    def __or__(self, other: int) -> Any:
        if not isinstance(other, int):
            return NotImplemented
        return type(self)(int(self) | int(other))

    def __and__(self, other: int) -> Any:
        if not isinstance(other, int):
            return NotImplemented
        return type(self)(int(self) & int(other))

    def __xor__(self, other: int) -> Any:
        if not isinstance(other, int):
            return NotImplemented
        return type(self)(int(self) ^ int(other))

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def has(self, flags: int) -> bool:
        """Return ``True`` when every bit of ``flags`` is set."""
        return int(self) & int(flags) == int(flags)


def import_enum_type(target: str) -> type:
    """Resolve ``package.module:QualName`` into the referenced class.

    Examples
    --------
    >>> import_enum_type("lib_enum_symbols.examples:Color").__name__
    'Color'
    >>> import_enum_type("lib_enum_symbols.examples")
    Traceback (most recent call last):
    ...
    ValueError: Enum type targets must look like 'package.module:ClassName', got 'lib_enum_symbols.examples'
    """

    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"Enum type targets must look like 'package.module:ClassName', got {target!r}")
    obj: Any = import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise TypeError(f"{target!r} does not name a class")
    return obj


def _attempt(operation: Callable[[], Any]) -> str:
    try:
        result = operation()
    except EnumSymbolError as exc:
        return f"error: {exc}"
    return result if isinstance(result, str) else str(int(result))


def symbols_demo() -> list[dict[str, str]]:
    """Format and parse sample values of the bundled example types.

    Returns
    -------
    list[dict[str, str]]
        One row per conversion with the keys ``type``, ``operation``,
        ``input`` and ``output``; failed parses report their error message.

    Examples
    --------
    >>> rows = symbols_demo()
    >>> [row["output"] for row in rows if row["operation"] == "format_flags"]
    ['Read, Write']
    """

    from .examples import Color, Protection, SasProtocol

    rows: list[dict[str, str]] = []

    def _row(enum_type: type, operation: str, given: object, output: str) -> None:
        rows.append({"type": enum_type.__name__, "operation": operation, "input": str(given), "output": output})

    for symbol in iter_symbols(Color):
        _row(Color, "symbol", symbol.name, str(int(symbol.value)))
    _row(Color, "format_scalar", 1, _attempt(lambda: format_scalar(Color(1), Color)))
    _row(Color, "format_scalar", 123, _attempt(lambda: format_scalar(Color(123), Color)))
    for text in ("Bluex", "Blue", "0x15"):
        _row(Color, "parse_scalar", text, _attempt(lambda text=text: parse_scalar(Color, text, True, False)))

    _row(SasProtocol, "format_string", "https,http", _attempt(lambda: format_string(SasProtocol("https,http"), SasProtocol)))
    for text in ("foo", "Https"):
        _row(SasProtocol, "parse_symbol", text, _attempt(lambda text=text: str(parse_symbol(SasProtocol, text))))

    combined = Protection().Write() | Protection().Read()
    _row(Protection, "format_flags", hex(combined), _attempt(lambda: format_flags(combined, Protection)))
    for text in ("read, execute, 0x1001", "read, bogus"):
        _row(Protection, "parse_flags", text, _attempt(lambda text=text: hex(parse_flags(Protection, text, True))))
    return rows


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "FlagEnum",
    "SignedEnum",
    "StringEnum",
    "UnsignedEnum",
    "declare_symbols",
    "import_enum_type",
    "summary_info",
    "symbols_demo",
]
