"""
envpilot package.

Typed, hot-reloading access to ``.env`` style files. Key modules:

- parser: Line parser turning file contents into ``(key, value)`` pairs.
- values: Tagged scalars (``Str``, ``Int``, ``Bool``, ``Float``).
- coerce: Literal parsers and the coercion table behind the typed accessors.
- store: Lock-protected in-memory mapping.
- writer: Append-only writes of typed entries.
- watcher: watchdog based reload of the backing file.
- env: ``Env`` facade and the process-wide handle.
- cli: ``pilot`` command line entry point.
"""

from .env import MISSING, Env, get_env, reset_env, set_env
from .errors import (
    EnvFileError,
    EnvPilotError,
    EnvWriteError,
    InvalidValueError,
    VariableNotFoundError,
    WatchError,
)
from .values import Bool, Float, Int, Str

__all__ = [
    "Env",
    "MISSING",
    "get_env",
    "reset_env",
    "set_env",
    "EnvFileError",
    "EnvPilotError",
    "EnvWriteError",
    "InvalidValueError",
    "VariableNotFoundError",
    "WatchError",
    "Bool",
    "Float",
    "Int",
    "Str",
]
