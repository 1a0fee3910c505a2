"""Key-value store persisted in the ``kv_entries`` table.

Each visitor gets its own namespace, so one namespace behaves like the
local storage of a single browser. Every ``set`` commits on its own; there
is no batching across keys.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from setmystay.models.kv_entry import KeyValueEntry
from setmystay.storage.base import KeyValueStore

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

VISITOR_NAMESPACE_PREFIX = "visitor:"
ADMIN_NAMESPACE = "admin"


def visitor_namespace(visitor_id: str) -> str:
    return f"{VISITOR_NAMESPACE_PREFIX}{visitor_id}"


class SqlKeyValueStore(KeyValueStore):
    def __init__(self, db: Session, namespace: str) -> None:
        self.db = db
        self.namespace = namespace

    def _entry(self, key: str) -> KeyValueEntry | None:
        return (
            self.db.query(KeyValueEntry)
            .filter(
                KeyValueEntry.namespace == self.namespace,
                KeyValueEntry.key == key,
            )
            .first()
        )

    def get(self, key: str) -> str | None:
        entry = self._entry(key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        entry = self._entry(key)
        if entry:
            entry.value = value
        else:
            self.db.add(KeyValueEntry(namespace=self.namespace, key=key, value=value))
        self.db.commit()

    def delete(self, key: str) -> None:
        entry = self._entry(key)
        if entry:
            self.db.delete(entry)
            self.db.commit()
            logger.debug("Deleted %s from namespace %s", key, self.namespace)


def values_for_key(db: Session, key: str, namespace_prefix: str) -> list[str]:
    """Return the value of ``key`` from every namespace with the given prefix."""
    rows = (
        db.query(KeyValueEntry.value)
        .filter(
            KeyValueEntry.key == key,
            KeyValueEntry.namespace.startswith(namespace_prefix),
        )
        .all()
    )
    return [row[0] for row in rows]
