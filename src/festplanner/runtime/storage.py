"""
Durable key/value storage for the planner's user collections.

Two independent string slots hold JSON lists of ids (see
:class:`~festplanner.shared.types.StorageKey`). Reads happen once at session
start; writes happen on every mutation. Both are best-effort: a missing or
malformed slot reads as an empty list, and a failed write is logged and
reported back as ``False`` without raising.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from festplanner.domain.entities import StorageSlot
from festplanner.infra.exceptions import StorageError
from festplanner.infra.logging import get_logger
from festplanner.infra.uow import session


class KeyValueStore(Protocol):
    """Port for local, single-device string storage."""

    def get(self, key: str) -> str | None:
        """Return the stored string, or None if the slot is empty."""
        ...

    def set(self, key: str, value: str) -> None:
        """Overwrite the slot. Raises StorageError on backend failure."""
        ...


class InMemoryKeyValueStore:
    """
    In-memory implementation of KeyValueStore.

    Lost on process restart. Used by tests and throwaway sessions.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._slots)


class SqlKeyValueStore:
    """KeyValueStore backed by the ``storage_slots`` table."""

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get(self, key: str) -> str | None:
        try:
            with session(self._db_url) as db:
                slot = db.get(StorageSlot, key)
                return slot.value if slot is not None else None
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Failed to read slot {key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with session(self._db_url) as db:
                slot = db.get(StorageSlot, key)
                if slot is None:
                    db.add(StorageSlot(key=key, value=value))
                else:
                    slot.value = value
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(f"Failed to write slot {key!r}: {e}") from e


def decode_id_list(payload: str | None) -> list[str] | None:
    """Decode a JSON list of string ids; None when the payload is unusable."""
    if payload is None:
        return []
    try:
        data = json.loads(payload)
    except ValueError:
        return None
    if not isinstance(data, list) or not all(isinstance(i, str) for i in data):
        return None
    return data


def load_id_list(store: KeyValueStore, key: str) -> list[str]:
    """Read one slot. Absent, unreadable or malformed slots read as empty."""
    log = get_logger(__name__)
    try:
        payload = store.get(key)
    except StorageError as e:
        log.warning("storage_read_failed", key=key, error=str(e))
        return []
    ids = decode_id_list(payload)
    if ids is None:
        log.warning("storage_payload_malformed", key=key)
        return []
    return ids


def save_id_list(store: KeyValueStore, key: str, ids: Iterable[str]) -> bool:
    """Write one slot in full. Returns False (after logging) if the write failed."""
    payload = json.dumps(list(ids))
    try:
        store.set(key, payload)
    except StorageError as e:
        get_logger(__name__).warning("storage_write_failed", key=key, error=str(e))
        return False
    return True


__all__ = [
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "decode_id_list",
    "load_id_list",
    "save_id_list",
]
