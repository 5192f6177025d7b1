"""
Persistence for portfolio records.
"""

from app.store.backends import KeyValueBackend, MemoryKeyValueBackend, SQLKeyValueBackend
from app.store.records import LoadResult, LoadStatus, RecordStore, StorageKeys

__all__ = [
    "KeyValueBackend",
    "LoadResult",
    "LoadStatus",
    "MemoryKeyValueBackend",
    "RecordStore",
    "SQLKeyValueBackend",
    "StorageKeys",
]
