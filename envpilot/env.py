"""
Typed access to a ``.env`` file that reloads itself when the file changes.

Usage::

    from envpilot import set_env

    env = set_env(".env")
    port = env.get_as_int("PORT", 8080)
    debug = env.get_as_bool("DEBUG", False)

Values are read as strings. The first successful typed read of a key replaces
the stored string with the parsed value, so ``get_as_string`` on that key is a
type mismatch until the file is reloaded.
"""

from __future__ import annotations

import logging
import pathlib
from typing import Any, Dict, Optional

from .coerce import coerce
from .errors import CoercionError, VariableNotFoundError
from .parser import parse_file
from .store import EnvStore
from .values import Scalar
from .watcher import EnvWatcher
from .writer import set_value

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Env:
    """
    Store, parser and watcher bound to one backing file.

    Constructing an ``Env`` loads the file immediately and raises
    :class:`~envpilot.errors.EnvFileError` if it cannot be read. With
    ``watch=True`` (the default) a watcher keeps the values in sync with the
    file until :meth:`close` is called or the process exits.
    """

    def __init__(self, path: str | pathlib.Path = "", *, watch: bool = True) -> None:
        self.path = pathlib.Path(path or DEFAULT_ENV_FILE)
        self.store = EnvStore(parse_file(self.path))
        logger.debug("Loaded %d variables from %s", len(self.store), self.path)
        self.watcher: Optional[EnvWatcher] = None
        if watch:
            watcher = EnvWatcher(self.path, self.reload)
            watcher.start()
            self.watcher = watcher

    @classmethod
    def open(cls, path: str | pathlib.Path = "", *, watch: bool = True) -> "Env":
        return cls(path, watch=watch)

    def reload(self) -> None:
        """Re-read the backing file and replace every stored value."""
        self.store.replace(parse_file(self.path))

    def close(self) -> None:
        if self.watcher is not None:
            self.watcher.stop()
            self.watcher = None

    def __enter__(self) -> "Env":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _lookup(self, key: str, target: str, default: Any) -> Any:
        current = self.store.get(key)
        if current is not None:
            try:
                coerced = coerce(current, target)
            except CoercionError:
                pass
            else:
                if coerced is not current:
                    self.store.memoise(key, current, coerced)
                return coerced.value
        if default is not MISSING:
            return default
        raise VariableNotFoundError(key)

    def get_as_string(self, key: str, default: Any = MISSING) -> str:
        return self._lookup(key, "string", default)

    def get_as_int(self, key: str, default: Any = MISSING) -> int:
        return self._lookup(key, "int", default)

    def get_as_bool(self, key: str, default: Any = MISSING) -> bool:
        return self._lookup(key, "bool", default)

    def get_as_float(self, key: str, default: Any = MISSING) -> float:
        return self._lookup(key, "float", default)

    def get_as_any(self, key: str, target_type: str, default: Any = MISSING) -> Any:
        """
        Read ``key`` as the type named by ``target_type``.

        ``target_type`` is one of ``"string"``, ``"int"``, ``"bool"`` or
        ``"float"``; any other name behaves like a failed conversion.
        """
        return self._lookup(key, target_type, default)

    def set(
        self,
        key: str,
        value: str,
        value_type: str = "string",
        file_path: str | pathlib.Path | None = None,
    ) -> None:
        """Store ``key`` and append ``key=value`` to ``file_path`` (default: the backing file)."""
        set_value(self.store, key, value, value_type, file_path or self.path)

    def snapshot(self) -> Dict[str, Scalar]:
        return self.store.snapshot()


_ENV: Optional[Env] = None


def set_env(path: str | pathlib.Path = "", *, watch: bool = True) -> Env:
    """Initialise the process-wide :class:`Env`, replacing any previous one."""
    global _ENV
    env = Env(path, watch=watch)
    if _ENV is not None:
        _ENV.close()
    _ENV = env
    return env


def get_env() -> Env:
    if _ENV is None:
        raise RuntimeError("Environment not initialised; call set_env() first")
    return _ENV


def reset_env() -> None:
    """Close and forget the process-wide :class:`Env`."""
    global _ENV
    if _ENV is not None:
        _ENV.close()
    _ENV = None
