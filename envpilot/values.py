"""
Tagged scalar values held by the environment store.

A parsed entry always starts life as ``Str``; the typed accessors replace it
with ``Int``, ``Bool`` or ``Float`` after the first successful coercion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Tuple, Union

TypeName = Literal["string", "int", "bool", "float"]

TYPE_NAMES: Tuple[str, ...] = ("string", "int", "bool", "float")


@dataclass(frozen=True, slots=True)
class Str:
    value: str
    type_name: ClassVar[str] = "string"


@dataclass(frozen=True, slots=True)
class Int:
    value: int
    type_name: ClassVar[str] = "int"


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool
    type_name: ClassVar[str] = "bool"


@dataclass(frozen=True, slots=True)
class Float:
    value: float
    type_name: ClassVar[str] = "float"


Scalar = Union[Str, Int, Bool, Float]
