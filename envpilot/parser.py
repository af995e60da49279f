"""
Line parser for ``.env`` style files.

Each well-formed line is ``KEY=value``. The first ``=`` separates key from
value; anything after it, including further ``=`` or ``#`` characters, is the
value. There is no quoting, escaping or variable expansion.
"""

from __future__ import annotations

import logging
import pathlib
import string
from typing import BinaryIO, Iterable, Iterator, List, Tuple

from .errors import EnvFileError

logger = logging.getLogger(__name__)

Pair = Tuple[str, str]

_WHITESPACE = string.whitespace


def parse_line(line: str) -> Pair | None:
    """Return the ``(key, value)`` pair for ``line`` or ``None`` when it is skipped."""
    line = line.rstrip("\n").rstrip("\r")
    if not line:
        return None
    if line.lstrip(_WHITESPACE).startswith("#"):
        return None
    key, sep, value = line.partition("=")
    if not sep:
        return None
    key = key.strip(_WHITESPACE)
    if not key:
        return None
    return key, value.strip(_WHITESPACE)


def parse_lines(lines: Iterable[str]) -> Iterator[Pair]:
    for line in lines:
        pair = parse_line(line)
        if pair is not None:
            yield pair


def parse_stream(stream: BinaryIO, name: str = "<stream>") -> List[Pair]:
    """
    Parse an open binary stream.

    Read failures surface as :class:`EnvFileError`. Malformed lines, including
    lines that are not valid UTF-8, are dropped.
    """
    pairs: List[Pair] = []
    try:
        for lineno, raw in enumerate(stream, start=1):
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Skipping line %d of %s: not valid UTF-8", lineno, name)
                continue
            pair = parse_line(text)
            if pair is not None:
                pairs.append(pair)
    except OSError as exc:
        raise EnvFileError(f"Error reading env file {name}: {exc}") from exc
    return pairs


def parse_file(path: str | pathlib.Path) -> List[Pair]:
    path = pathlib.Path(path)
    try:
        stream = path.open("rb")
    except OSError as exc:
        raise EnvFileError(f"Error opening env file {path}: {exc}") from exc
    with stream:
        return parse_stream(stream, str(path))
