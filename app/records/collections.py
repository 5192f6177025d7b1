"""
Immutable updates over record collections.

Every function returns a new list and leaves its input untouched; the
record store is the only place a changed collection is persisted.
"""

from typing import List, Optional, Sequence, TypeVar, Union

from app.records.models import Property, Renovation, RenovationStatus

Record = TypeVar("Record", Property, Renovation)


def find_by_id(records: Sequence[Record], record_id: str) -> Optional[Record]:
    """Return the first record with the given id, or None."""
    return next((r for r in records if r.id == record_id), None)


def with_added(records: Sequence[Record], record: Record) -> List[Record]:
    """Append a record."""
    return [*records, record]


def with_removed(records: Sequence[Record], record_id: str) -> List[Record]:
    """Drop every record with the given id. Unknown ids are a no-op."""
    return [r for r in records if r.id != record_id]


def change_status(
    renovation: Renovation,
    new_status: Union[RenovationStatus, str],
    actual_cost: Optional[int] = None,
) -> Renovation:
    """
    Move a renovation to another status.

    Any status may follow any other, including the current one. An actual
    cost is only accepted when the new status is completed. The copy is
    validated like a freshly loaded record, so a negative, fractional or
    non-numeric cost raises a ValidationError.
    """
    status = RenovationStatus(new_status)
    update = {"status": status}
    if actual_cost is not None:
        if status != RenovationStatus.completed:
            raise ValueError("Actual cost can only be recorded on completion")
        update["actual_cost"] = actual_cost
    return Renovation.model_validate({**renovation.model_dump(), **update})


def with_status_changed(
    renovations: Sequence[Renovation],
    renovation_id: str,
    new_status: Union[RenovationStatus, str],
    actual_cost: Optional[int] = None,
) -> List[Renovation]:
    """Replace the renovation with the given id by its status-changed copy."""
    return [
        change_status(r, new_status, actual_cost) if r.id == renovation_id else r
        for r in renovations
    ]
