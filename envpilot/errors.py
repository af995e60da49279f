"""
Exceptions raised by the environment store and its collaborators.
"""

from __future__ import annotations

NOT_FOUND_MESSAGE = "variable not found or type mismatch and no default value provided"


class EnvPilotError(Exception):
    """Base class for every error raised by envpilot."""


class EnvFileError(EnvPilotError, OSError):
    """The backing file could not be opened or read."""


class WatchError(EnvFileError):
    """The file watcher could not be installed."""


class EnvWriteError(EnvPilotError, OSError):
    """Appending a record to an env file failed."""


class VariableNotFoundError(EnvPilotError, LookupError):
    """
    Raised when a key is absent or cannot be coerced and no default was given.

    Both cases share one message so callers cannot tell them apart.
    """

    def __init__(self, key: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE)
        self.key = key


class InvalidValueError(EnvPilotError, ValueError):
    """A raw value passed to the writer does not parse as the requested type."""


class CoercionError(ValueError):
    """A stored value cannot be converted to the requested type."""
