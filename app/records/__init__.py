"""
Portfolio records: properties, renovations, and their lifecycle helpers.
"""

from app.records.models import (
    Priority,
    Property,
    PropertyType,
    Renovation,
    RenovationCategory,
    RenovationStatus,
)
from app.records.collections import (
    change_status,
    find_by_id,
    with_added,
    with_removed,
    with_status_changed,
)

__all__ = [
    "Priority",
    "Property",
    "PropertyType",
    "Renovation",
    "RenovationCategory",
    "RenovationStatus",
    "change_status",
    "find_by_id",
    "with_added",
    "with_removed",
    "with_status_changed",
]
