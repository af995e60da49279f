"""
Literal parsers and the coercion table used by the typed accessors.

Only a ``Str`` value is ever re-parsed. A value that already carries a scalar
tag converts to that same tag and nothing else.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Dict

from .errors import CoercionError
from .values import Bool, Float, Int, Scalar, Str

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity)|nan",
    re.IGNORECASE,
)


def parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if number < INT_MIN or number > INT_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def parse_bool(text: str) -> bool:
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid syntax: {text!r}")


def parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = float(text)
    # A finite literal that rounds to infinity is out of range.
    if math.isinf(number) and "inf" not in text.lower():
        raise ValueError(f"value out of range: {text!r}")
    return number


PARSERS: Dict[str, Callable[[str], Scalar]] = {
    "string": Str,
    "int": lambda text: Int(parse_int(text)),
    "bool": lambda text: Bool(parse_bool(text)),
    "float": lambda text: Float(parse_float(text)),
}


def parse_as(text: str, type_name: str) -> Scalar:
    """Parse ``text`` into the tagged scalar named by ``type_name``."""
    try:
        parser = PARSERS[type_name]
    except KeyError:
        raise CoercionError(f"unsupported value type: {type_name}") from None
    return parser(text)


def coerce(value: Scalar, target: str) -> Scalar:
    """
    Convert ``value`` to the tag named by ``target``.

    Returns ``value`` itself when it already has the requested tag, a new
    scalar when a ``Str`` parses successfully, and raises
    :class:`CoercionError` for every other combination.
    """
    if value.type_name == target:
        return value
    if isinstance(value, Str) and target != "string":
        try:
            return parse_as(value.value, target)
        except ValueError as exc:
            raise CoercionError(f"cannot convert {value.value!r} to {target}: {exc}") from exc
    raise CoercionError(f"cannot convert {value.type_name} value to {target}")
