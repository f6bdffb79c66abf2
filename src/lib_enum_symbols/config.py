"""Environment-driven defaults and optional ``.env`` loading.

Purpose
-------
Let operators choose parsing defaults for the CLI through environment
variables, optionally sourced from a ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – ``.env`` handling via
  :mod:`dotenv`.
* :class:`ParseDefaults` – case sensitivity, strictness, and flag base read
  from ``ENUM_SYMBOLS_*`` variables.

System Role
-----------
Edge of the system: only the CLI reads configuration; the conversion
engine receives every option explicitly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from .application.use_cases.formatter import LITERAL_PREFIXES

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "ENUM_SYMBOLS_USE_DOTENV"
CASE_INSENSITIVE_ENV_VAR = "ENUM_SYMBOLS_CASE_INSENSITIVE"
STRICT_ENV_VAR = "ENUM_SYMBOLS_STRICT"
FLAG_BASE_ENV_VAR = "ENUM_SYMBOLS_FLAG_BASE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_LOADED_DOTENV: Path | None = None


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    """Return the boolean value of ``name`` with fallback.

    Examples
    --------
    >>> _env_bool({}, 'FLAG', default=True)
    True
    >>> _env_bool({'FLAG': 'off'}, 'FLAG', default=True)
    False
    >>> _env_bool({'FLAG': 'maybe'}, 'FLAG', default=True)
    Traceback (most recent call last):
    ...
    ValueError: FLAG must be one of 1/true/yes/on or 0/false/no/off, got 'maybe'
    """
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be one of 1/true/yes/on or 0/false/no/off, got {raw!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is enabled; an explicit flag wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` above ``search_from`` (default: cwd).

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when no file exists.
    """
    global _LOADED_DOTENV
    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        candidate = next(
            (directory / ".env" for directory in (search_from, *search_from.parents) if (directory / ".env").is_file()),
            None,
        )
    if candidate is None:
        LOGGER.debug("No .env file found")
        return None
    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _LOADED_DOTENV = resolved
    LOGGER.debug("Loaded environment from %s", resolved)
    return resolved


def loaded_dotenv() -> Path | None:
    """Return the path loaded by the last :func:`enable_dotenv` call."""
    return _LOADED_DOTENV


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_DOTENV
    _LOADED_DOTENV = None


@dataclass(frozen=True, slots=True)
class ParseDefaults:
    """Default conversion options applied by the CLI.

    Examples
    --------
    >>> ParseDefaults.from_env({'ENUM_SYMBOLS_STRICT': 'true', 'ENUM_SYMBOLS_FLAG_BASE': '10'})
    ParseDefaults(case_insensitive=False, strict=True, flag_base=10)
    """

    case_insensitive: bool = False
    strict: bool = False
    flag_base: int = 16

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ParseDefaults":
        """Read defaults from ``environ`` (default: :data:`os.environ`).

        Raises
        ------
        ValueError
            If a variable holds an unrecognised value.
        """
        env = os.environ if environ is None else environ
        raw_base = env.get(FLAG_BASE_ENV_VAR, "").strip()
        flag_base = 16
        if raw_base:
            try:
                flag_base = int(raw_base)
            except ValueError as exc:
                raise ValueError(f"{FLAG_BASE_ENV_VAR} must be an integer, got {raw_base!r}") from exc
            if flag_base not in LITERAL_PREFIXES:
                raise ValueError(f"{FLAG_BASE_ENV_VAR} must be one of {sorted(LITERAL_PREFIXES)}, got {flag_base}")
        return cls(
            case_insensitive=_env_bool(env, CASE_INSENSITIVE_ENV_VAR, False),
            strict=_env_bool(env, STRICT_ENV_VAR, False),
            flag_base=flag_base,
        )


__all__ = [
    "CASE_INSENSITIVE_ENV_VAR",
    "DOTENV_ENV_VAR",
    "FLAG_BASE_ENV_VAR",
    "ParseDefaults",
    "STRICT_ENV_VAR",
    "enable_dotenv",
    "loaded_dotenv",
    "should_use_dotenv",
]
