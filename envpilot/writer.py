"""
Append typed entries to an env file.

The file is never rewritten. Setting a key twice leaves two lines behind and
the next load resolves the key to the later one.
"""

from __future__ import annotations

import logging
import os
import pathlib

from .coerce import parse_as
from .errors import EnvWriteError, InvalidValueError
from .store import EnvStore
from .values import TYPE_NAMES

logger = logging.getLogger(__name__)

_APPEND_FLAGS = os.O_APPEND | os.O_WRONLY | os.O_CREAT
_FILE_MODE = 0o644


def append_entry(path: str | pathlib.Path, key: str, raw_value: str) -> None:
    record = f"{key}={raw_value}\n"
    try:
        fd = os.open(path, _APPEND_FLAGS, _FILE_MODE)
    except OSError as exc:
        raise EnvWriteError(f"error opening file {path}: {exc}") from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(record)
    except OSError as exc:
        raise EnvWriteError(f"error writing to file {path}: {exc}") from exc


def set_value(
    store: EnvStore,
    key: str,
    raw_value: str,
    value_type: str,
    path: str | pathlib.Path,
) -> None:
    """
    Validate ``raw_value`` as ``value_type``, store it, then append it to ``path``.

    A value that does not parse leaves both the store and the file untouched.
    The store is updated before the append, so a failed write still leaves the
    new value visible in memory.
    """
    if value_type not in TYPE_NAMES:
        raise InvalidValueError(f"unsupported value type: {value_type}")
    try:
        value = parse_as(raw_value, value_type)
    except ValueError as exc:
        raise InvalidValueError(f"invalid {value_type} value: {exc}") from exc

    store.upsert(key, value)
    append_entry(path, key, raw_value)
    logger.debug("Appended %s as %s to %s", key, value_type, path)
