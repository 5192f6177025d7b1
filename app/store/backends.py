"""
Key-value backends for the record store.

A backend holds opaque text under string keys. Backends raise on failure;
the record store decides what a failure means.
"""

from typing import Dict, Iterable, Optional, Protocol

from sqlalchemy.orm import Session

from app.db.models import StorageEntry


class KeyValueBackend(Protocol):
    """Minimal storage capability used by the record store."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete_many(self, keys: Iterable[str]) -> None:
        ...


class SQLKeyValueBackend:
    """Stores entries as rows of the ``storage_entries`` table.

    Each write commits on its own, so overlapping writers never leave a
    partially written value behind; the last commit wins.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        try:
            entry = self.db.get(StorageEntry, key)
        except Exception:
            self.db.rollback()
            raise
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        try:
            entry = self.db.get(StorageEntry, key)
            if entry:
                entry.value = value
            else:
                self.db.add(StorageEntry(key=key, value=value))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def delete_many(self, keys: Iterable[str]) -> None:
        try:
            self.db.query(StorageEntry).filter(
                StorageEntry.key.in_(list(keys))
            ).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


class MemoryKeyValueBackend:
    """Process-local backend, used for tests and scripting."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.entries: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def set(self, key: str, value: str) -> None:
        self.entries[key] = value

    def delete_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self.entries.pop(key, None)
