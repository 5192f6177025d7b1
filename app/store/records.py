"""
Record store: persisted properties, renovations and the onboarded flag.

Loads and saves never raise for storage problems. A load reports through
``LoadResult.status`` whether the value came from storage, from the seed
provider because nothing was stored, or from the seed provider because
storage could not be read. A save reports success as a boolean; callers
keep their in-memory collection either way.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import TypeAdapter
from sqlalchemy.exc import SQLAlchemyError

from app.config import Settings
from app.records.models import Property, Renovation
from app.records.seed import SeedProvider, sample_portfolio
from app.store.backends import KeyValueBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")

STORAGE_ERRORS = (SQLAlchemyError, OSError)

_properties_adapter = TypeAdapter(List[Property])
_renovations_adapter = TypeAdapter(List[Renovation])


class LoadStatus(str, enum.Enum):
    loaded = "loaded"
    default_used = "default_used"
    failed = "failed"


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of a load."""

    value: T
    status: LoadStatus
    error: Optional[str] = None

    @property
    def used_default(self) -> bool:
        return self.status != LoadStatus.loaded


@dataclass(frozen=True)
class StorageKeys:
    """Names of the three stored entries."""

    properties: str = "@realestate_properties"
    renovations: str = "@realestate_renovations"
    onboarded: str = "@realestate_onboarded"

    @classmethod
    def from_settings(cls, settings: Settings) -> "StorageKeys":
        return cls(
            properties=settings.properties_key,
            renovations=settings.renovations_key,
            onboarded=settings.onboarded_key,
        )

    def all(self) -> List[str]:
        return [self.properties, self.renovations, self.onboarded]


class RecordStore:
    """Single-writer persistence for the portfolio collections."""

    def __init__(
        self,
        backend: KeyValueBackend,
        seed: SeedProvider = sample_portfolio,
        keys: Optional[StorageKeys] = None,
    ):
        self.backend = backend
        self.seed = seed
        self.keys = keys or StorageKeys()

    # === Collections ===

    def load_properties(self) -> LoadResult[List[Property]]:
        return self._load_collection(
            self.keys.properties,
            _properties_adapter,
            lambda: self.seed().properties,
        )

    def load_renovations(self) -> LoadResult[List[Renovation]]:
        return self._load_collection(
            self.keys.renovations,
            _renovations_adapter,
            lambda: self.seed().renovations,
        )

    def save_properties(self, properties: Sequence[Property]) -> bool:
        return self._write(
            self.keys.properties,
            _properties_adapter.dump_json(list(properties), by_alias=True).decode(),
        )

    def save_renovations(self, renovations: Sequence[Renovation]) -> bool:
        return self._write(
            self.keys.renovations,
            _renovations_adapter.dump_json(list(renovations), by_alias=True).decode(),
        )

    # === Onboarded flag ===

    def load_onboarded(self) -> LoadResult[bool]:
        try:
            raw = self.backend.get(self.keys.onboarded)
        except STORAGE_ERRORS as e:
            logger.warning(f"Failed to read onboarded flag: {e}")
            return LoadResult(False, LoadStatus.failed, str(e))
        if raw is None:
            return LoadResult(False, LoadStatus.default_used)
        return LoadResult(raw == "true", LoadStatus.loaded)

    def is_onboarded(self) -> bool:
        return self.load_onboarded().value

    def set_onboarded(self) -> bool:
        return self._write(self.keys.onboarded, "true")

    def reset_onboarding(self) -> bool:
        return self._delete([self.keys.onboarded])

    def clear_all(self) -> bool:
        """Remove properties, renovations and the onboarded flag together."""
        return self._delete(self.keys.all())

    # === Internals ===

    def _load_collection(self, key, adapter, default) -> LoadResult:
        try:
            raw = self.backend.get(key)
        except STORAGE_ERRORS as e:
            logger.warning(f"Failed to read {key}, using defaults: {e}")
            return LoadResult(default(), LoadStatus.failed, str(e))

        if not raw:
            value = default()
            logger.info(f"No data stored under {key}, seeding {len(value)} records")
            self._write(key, adapter.dump_json(value, by_alias=True).decode())
            return LoadResult(value, LoadStatus.default_used)

        try:
            return LoadResult(adapter.validate_json(raw), LoadStatus.loaded)
        except ValueError as e:
            logger.warning(f"Stored data under {key} is unreadable, using defaults: {e}")
            return LoadResult(default(), LoadStatus.failed, str(e))

    def _write(self, key: str, value: str) -> bool:
        try:
            self.backend.set(key, value)
            return True
        except STORAGE_ERRORS:
            logger.exception(f"Failed to save {key}")
            return False

    def _delete(self, keys: List[str]) -> bool:
        try:
            self.backend.delete_many(keys)
            return True
        except STORAGE_ERRORS:
            logger.exception(f"Failed to remove {', '.join(keys)}")
            return False
