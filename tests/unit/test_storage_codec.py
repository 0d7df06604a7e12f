"""
Storage slot codec tests: absent and malformed payloads read as empty.
"""

from __future__ import annotations

import json

import pytest

from festplanner.infra.exceptions import StorageError
from festplanner.runtime.storage import (
    InMemoryKeyValueStore,
    decode_id_list,
    load_id_list,
    save_id_list,
)


class FailingStore(InMemoryKeyValueStore):
    def get(self, key):
        raise StorageError("disk on fire")

    def set(self, key, value):
        raise StorageError("quota exceeded")


@pytest.mark.parametrize(
    "payload",
    ["{not json", '{"a": 1}', '"favorites"', "[1, 2]", '["ok", null]', "42"],
)
def test_malformed_payloads_decode_to_none(payload):
    assert decode_id_list(payload) is None


def test_absent_payload_is_empty_list():
    assert decode_id_list(None) == []


def test_load_round_trips_saved_list_order():
    store = InMemoryKeyValueStore()
    assert save_id_list(store, "favorites", ["b", "a", "c"]) is True
    assert json.loads(store.get("favorites")) == ["b", "a", "c"]
    assert load_id_list(store, "favorites") == ["b", "a", "c"]


def test_load_malformed_slot_is_empty():
    store = InMemoryKeyValueStore({"favorites": "[oops"})
    assert load_id_list(store, "favorites") == []
    # the corrupt slot itself is left alone
    assert store.get("favorites") == "[oops"


def test_backend_failures_are_absorbed():
    store = FailingStore()
    assert load_id_list(store, "favorites") == []
    assert save_id_list(store, "favorites", ["a"]) is False
