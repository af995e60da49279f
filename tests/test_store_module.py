"""Tests for :mod:`envpilot.store`."""

from __future__ import annotations

from envpilot.store import EnvStore
from envpilot.values import Int, Str


def test_store_builds_str_values_with_last_occurrence_winning():
    """Parser pairs become ``Str`` values and a repeated key keeps its last value."""

    store = EnvStore([("A", "1"), ("B", "2"), ("A", "3")])

    assert store.snapshot() == {"A": Str("3"), "B": Str("2")}
    assert len(store) == 2
    assert "A" in store and "C" not in store


def test_store_upsert_replaces_unconditionally():
    """Upserting sets new keys and overwrites existing ones regardless of tag."""

    store = EnvStore([("PORT", "80")])

    store.upsert("PORT", Int(8080))
    store.upsert("NEW", Str("x"))

    assert store.get("PORT") == Int(8080)
    assert store.get("NEW") == Str("x")
    assert store.get("MISSING") is None


def test_store_replace_swaps_whole_mapping():
    """A replace drops keys and memoised tags that are not in the new pairs."""

    store = EnvStore([("OLD", "1")])
    store.upsert("PORT", Int(1))

    store.replace([("PORT", "2")])

    assert store.snapshot() == {"PORT": Str("2")}


def test_store_replace_is_idempotent_for_same_input():
    """Replacing twice with the same pairs yields the same mapping."""

    pairs = [("A", "1"), ("B", "x")]
    store = EnvStore()

    store.replace(pairs)
    first = store.snapshot()
    store.replace(pairs)

    assert store.snapshot() == first


def test_store_memoise_only_applies_to_expected_entry():
    """Memoisation is skipped when the entry changed since it was read."""

    store = EnvStore([("PORT", "80")])
    current = store.get("PORT")

    assert store.memoise("PORT", current, Int(80)) is True
    assert store.get("PORT") == Int(80)

    # A reload between lookup and memoisation must win.
    stale = Str("80")
    store.replace([("PORT", "81")])
    assert store.memoise("PORT", stale, Int(80)) is False
    assert store.get("PORT") == Str("81")


def test_store_snapshot_is_a_copy():
    """Mutating a snapshot leaves the store alone."""

    store = EnvStore([("A", "1")])

    snapshot = store.snapshot()
    snapshot["B"] = Str("2")

    assert store.keys() == ["A"]
