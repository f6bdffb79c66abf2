"""Rich-powered rendering of symbol listings and conversion rows.

Purpose
-------
Present enum symbols and demo conversions as tables on interactive
consoles.

Contents
--------
* :data:`_STYLE_MAP` – default column styles.
* :class:`RichSymbolPrinter` – adapter used by the CLI.

System Role
-----------
Human-facing sink of the CLI; it formats through the engine and never
implements conversions itself.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.console import Console
from rich.table import Table

from lib_enum_symbols.application.use_cases.enumerator import iter_symbols
from lib_enum_symbols.domain.symbols import Representation, describe_layout

_STYLE_MAP: Mapping[str, str] = {
    "name": "bold cyan",
    "value": "yellow",
    "text": "green",
}

#: Default Rich styles keyed by column role.


class RichSymbolPrinter:
    """Render symbol tables with optional colour."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: Mapping[str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color
        self._style_map = {**_STYLE_MAP, **(styles or {})}

    def _style(self, role: str) -> str:
        return "" if self._no_color else self._style_map.get(role, "")

    def print_symbols(self, enum_type: type) -> int:
        """Print one row per symbol of ``enum_type`` and return the row count.

        Examples
        --------
        >>> from io import StringIO
        >>> class Color(int):
        ...     def Red(self) -> "Color":
        ...         return Color(1)
        >>> console = Console(file=StringIO(), record=True, width=80)
        >>> RichSymbolPrinter(console=console).print_symbols(Color)
        1
        >>> 'Red' in console.export_text()
        True
        """
        layout = describe_layout(enum_type)
        table = Table(title=f"{enum_type.__module__}.{enum_type.__qualname__} ({layout.representation.value})")
        table.add_column("Symbol", style=self._style("name"))
        table.add_column("Value", style=self._style("value"), justify="right")
        if layout.representation.is_integer:
            table.add_column("Hex", style=self._style("value"), justify="right")
        count = 0
        for symbol in iter_symbols(enum_type):
            if layout.representation is Representation.STRING:
                table.add_row(symbol.name, repr(str.__str__(symbol.value)))
            else:
                number = int(symbol.value)
                table.add_row(symbol.name, str(number), hex(number))
            count += 1
        self._console.print(table)
        return count

    def print_rows(self, title: str, headers: Iterable[str], rows: Iterable[Iterable[object]]) -> None:
        """Print an arbitrary table whose cells are rendered with :func:`str`."""
        table = Table(title=title)
        for index, header in enumerate(headers):
            table.add_column(header, style=self._style("name" if index == 0 else "text"))
        for row in rows:
            table.add_row(*(str(cell) for cell in row))
        self._console.print(table)


__all__ = ["RichSymbolPrinter"]
