"""Static package metadata surfaced by the CLI banner.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_enum_symbols"
title = "Symbol-based formatting and parsing for enum-like Python types"
version = "1.0.0"
shell_command = "lib_enum_symbols"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner, one ``key = value`` line per field.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_enum_symbols:\\n\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    write = writer if writer is not None else sys.stdout.write
    pad = max(len(label) for label, _ in fields)
    write(f"Info for {name}:\n\n")
    for label, value in fields:
        write(f"    {label:<{pad}} = {value}\n")


__all__ = ["name", "print_info", "shell_command", "title", "version"]
