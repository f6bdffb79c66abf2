"""Command-line adapter exposing symbol listing, formatting, and parsing.

Purpose
-------
Give operators a shell entry point to inspect enum-like types and to convert
values without writing Python.

Contents
--------
* :func:`cli` – rich-click group with ``info``, ``symbols``, ``format``,
  ``parse`` and ``demo`` sub-commands.
* :func:`main` – wraps :func:`lib_cli_exit_tools.run_cli` and restores the
  traceback preferences afterwards.

System Role
-----------
Presentation layer: resolves ``module:ClassName`` targets, applies the
environment defaults from :mod:`lib_enum_symbols.config`, and reports
conversion errors as Click errors.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource
from rich.logging import RichHandler

from . import __init__conf__
from . import config as enum_config
from .adapters.console.rich_symbols import RichSymbolPrinter
from .application.use_cases.formatter import format_flags, format_scalar
from .application.use_cases.parser import parse_flags, parse_scalar
from .domain.errors import EnumSymbolError
from .domain.symbols import Representation, describe_layout
from .lib_enum_symbols import import_enum_type, summary_info, symbols_demo

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_PACKAGE_LOGGER = "lib_enum_symbols"
_BASE_CHOICES = [str(base) for base in (2, 8, 10, 16)]


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER)
    if not verbose:
        return
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False))


def _explicit(ctx: click.Context, name: str, value: Any, fallback: Any) -> Any:
    """Return ``value`` when given on the command line, else ``fallback``."""
    if ctx.get_parameter_source(name) in (ParameterSource.DEFAULT, None):
        return fallback
    return value


def _load_target(target: str) -> type:
    try:
        return import_enum_type(target)
    except (ImportError, AttributeError, ValueError, TypeError) as exc:
        raise click.BadParameter(str(exc), param_hint="TARGET") from exc


def _render_value(value: Any, enum_type: type) -> str:
    if describe_layout(enum_type).representation is Representation.STRING:
        return repr(str.__str__(value))
    return str(int(value))


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from a nearby .env (also via {enum_config.DOTENV_ENV_VAR}).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug diagnostics of the conversion engine.")
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool, verbose: bool) -> None:
    """Root command storing global flags and loading configuration."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    _configure_logging(verbose)

    explicit = None if ctx.get_parameter_source("use_dotenv") is ParameterSource.DEFAULT else use_dotenv
    if enum_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(enum_config.DOTENV_ENV_VAR)):
        enum_config.enable_dotenv()

    ctx.ensure_object(dict)
    ctx.obj.setdefault("printer", RichSymbolPrinter())
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""
    click.echo(summary_info(), nl=False)


@cli.command("symbols", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target")
@click.pass_context
def cli_symbols(ctx: click.Context, target: str) -> None:
    """List the symbols of TARGET (``package.module:ClassName``)."""
    enum_type = _load_target(target)
    ctx.obj["printer"].print_symbols(enum_type)


@cli.command("format", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target")
@click.argument("value")
@click.option("--flags", is_flag=True, help="Treat VALUE as an OR-combination of flag symbols.")
@click.option("--base", type=click.Choice(_BASE_CHOICES), default=None, help="Base of leftover flag bits.")
def cli_format(target: str, value: str, flags: bool, base: str | None) -> None:
    """Render VALUE of TARGET as its symbol name(s)."""
    enum_type = _load_target(target)
    layout = describe_layout(enum_type)
    if layout.representation is Representation.STRING and not flags:
        click.echo(format_scalar(enum_type(value), enum_type))
        return
    try:
        number = int(value, 0)
    except ValueError as exc:
        raise click.BadParameter(f"{value!r} is not an integer literal", param_hint="VALUE") from exc
    if flags:
        flag_base = int(base) if base is not None else enum_config.ParseDefaults.from_env().flag_base
        try:
            click.echo(format_flags(number, enum_type, flag_base))
        except (TypeError, ValueError) as exc:
            raise click.ClickException(str(exc)) from exc
    else:
        try:
            value_of_type = enum_type(number)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(format_scalar(value_of_type, enum_type))


@cli.command("parse", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("target")
@click.argument("text")
@click.option("--flags", is_flag=True, help="Parse a comma-separated flag list.")
@click.option("--case-insensitive/--case-sensitive", default=False, help="Match symbol names ignoring case.")
@click.option("--strict/--lenient", default=False, help="Reject numeric literals that name no symbol.")
@click.pass_context
def cli_parse(ctx: click.Context, target: str, text: str, flags: bool, case_insensitive: bool, strict: bool) -> None:
    """Convert TEXT into a value of TARGET."""
    enum_type = _load_target(target)
    defaults = enum_config.ParseDefaults.from_env()
    case_insensitive = _explicit(ctx, "case_insensitive", case_insensitive, defaults.case_insensitive)
    strict = _explicit(ctx, "strict", strict, defaults.strict)
    try:
        if flags:
            value = parse_flags(enum_type, text, case_insensitive)
        else:
            value = parse_scalar(enum_type, text, case_insensitive, strict)
    except EnumSymbolError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(_render_value(value, enum_type))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_demo(ctx: click.Context) -> None:
    """Format and parse values of the bundled example types."""
    rows = symbols_demo()
    ctx.obj["printer"].print_rows(
        "lib_enum_symbols demo",
        ["Type", "Operation", "Input", "Output"],
        ([row["type"], row["operation"], row["input"], row["output"]] for row in rows),
    )


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI via ``lib_cli_exit_tools`` and return its exit code.

    Parameters
    ----------
    argv:
        Optional argument list; ``None`` lets Click read ``sys.argv``.
    restore_traceback:
        Reset the traceback preferences changed by ``--traceback`` once the
        command finished.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
