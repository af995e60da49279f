"""In-memory mapping from key to tagged scalar, shared with the reload thread."""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from .values import Scalar, Str


class EnvStore:
    """
    Lock-protected key/value mapping.

    Reloads build a complete new dictionary and swap it in while holding the
    lock, so a single lookup always sees either the old or the new mapping.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()) -> None:
        self._lock = threading.Lock()
        self._values: Dict[str, Scalar] = self._build(pairs)

    @staticmethod
    def _build(pairs: Iterable[Tuple[str, str]]) -> Dict[str, Scalar]:
        values: Dict[str, Scalar] = {}
        for key, raw in pairs:
            values[key] = Str(raw)
        return values

    def get(self, key: str) -> Optional[Scalar]:
        with self._lock:
            return self._values.get(key)

    def upsert(self, key: str, value: Scalar) -> None:
        with self._lock:
            self._values[key] = value

    def replace(self, pairs: Iterable[Tuple[str, str]]) -> None:
        """Swap in a mapping built from parser output; the last pair for a key wins."""
        fresh = self._build(pairs)
        with self._lock:
            self._values = fresh

    def memoise(self, key: str, expected: Scalar, coerced: Scalar) -> bool:
        """Store ``coerced`` only if ``key`` still holds the exact ``expected`` object."""
        with self._lock:
            if self._values.get(key) is not expected:
                return False
            self._values[key] = coerced
            return True

    def snapshot(self) -> Dict[str, Scalar]:
        with self._lock:
            return dict(self._values)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
