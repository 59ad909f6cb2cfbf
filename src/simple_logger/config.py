"""Environment-driven configuration helpers.

Purpose
-------
Evaluate the per-backend kill switch and optionally hydrate the process
environment from a ``.env`` file before backends are constructed.

Contents
--------
* :data:`DEFAULT_ENVIRONMENT_KEY` - default kill-switch variable name.
* :func:`is_disabled_by_environment` / :func:`logger_enabled` - kill-switch lookup.
* :func:`enable_dotenv` - load the nearest ``.env`` via python-dotenv.
* :func:`use_dotenv_requested` - resolve the CLI/environment dotenv toggle.

System Role
-----------
Called by the composition root (:mod:`simple_logger.simple_logger`) so
backends receive a plain ``enabled`` flag and never read the environment
themselves.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

DEFAULT_ENVIRONMENT_KEY = "DisableLogger"
DOTENV_ENV_VAR = "SIMPLE_LOGGER_USE_DOTENV"

_DISABLING_VALUES = frozenset({"true", "1", "yes"})

_dotenv_lock = threading.Lock()
_dotenv_loaded: Path | None = None
_dotenv_attempted = False


def is_disabled_by_environment(key: str = DEFAULT_ENVIRONMENT_KEY, environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when ``key`` holds exactly ``true``/``1``/``yes`` in any case.

    Examples
    --------
    >>> is_disabled_by_environment("DisableLogger", {"DisableLogger": "YES"})
    True
    >>> is_disabled_by_environment("DisableLogger", {"DisableLogger": "0"})
    False
    >>> is_disabled_by_environment("DisableLogger", {})
    False
    """

    source = os.environ if environ is None else environ
    value = source.get(key)
    if value is None:
        return False
    return value.lower() in _DISABLING_VALUES


def logger_enabled(key: str = DEFAULT_ENVIRONMENT_KEY, environ: Mapping[str, str] | None = None) -> bool:
    """Return the ``enabled`` flag a backend should be constructed with."""

    return not is_disabled_by_environment(key, environ)


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('SIMPLE_LOGGER_EXAMPLE_BOOL', None)
    >>> _env_bool('SIMPLE_LOGGER_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['SIMPLE_LOGGER_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('SIMPLE_LOGGER_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def use_dotenv_requested(flag: bool | None) -> bool:
    """Resolve whether ``.env`` loading is wanted; an explicit flag wins."""

    if flag is not None:
        return flag
    return _env_bool(DOTENV_ENV_VAR, False)


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search walks upwards from the current working directory. Only the
    first call per process touches the filesystem; later calls return the
    cached result.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _dotenv_loaded, _dotenv_attempted
    with _dotenv_lock:
        if _dotenv_attempted:
            return _dotenv_loaded
        _dotenv_attempted = True
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        path = Path(found).resolve()
        load_dotenv(path, override=False)
        _dotenv_loaded = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    """Forget cached ``.env`` results so tests can load again."""

    global _dotenv_loaded, _dotenv_attempted
    with _dotenv_lock:
        _dotenv_loaded = None
        _dotenv_attempted = False


__all__ = [
    "DEFAULT_ENVIRONMENT_KEY",
    "DOTENV_ENV_VAR",
    "enable_dotenv",
    "is_disabled_by_environment",
    "logger_enabled",
    "use_dotenv_requested",
]
