"""
FastAPI dependencies for record storage and the clock.
"""

from datetime import datetime

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import get_settings
from app.db.database import get_db
from app.records.factory import Clock
from app.records.seed import empty_portfolio, sample_portfolio
from app.store import RecordStore, SQLKeyValueBackend, StorageKeys


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    """Record store bound to the request's database session."""
    settings = get_settings()
    seed = sample_portfolio if settings.seed_on_first_access else empty_portfolio
    return RecordStore(
        SQLKeyValueBackend(db),
        seed=seed,
        keys=StorageKeys.from_settings(settings),
    )


def get_clock() -> Clock:
    """Source of the current time; overridden in tests."""
    return datetime.now
