"""
Renovation Filters and Groupings

Predicates and groupings over the renovation collection. Every filter keeps
input order. Counts are recomputed from the collection on each call.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from app.records.models import Priority, Property, Renovation, RenovationStatus

UNKNOWN_PROPERTY = "Unknown"
DEFAULT_ATTENTION_LIMIT = 3

FILTER_ALL = "all"
FILTER_HIGH = "high"


@dataclass
class FilterChip:
    """A renovation filter option and how many renovations it matches."""

    key: str
    label: str
    count: int


@dataclass
class AttentionItem:
    """A renovation on the needs-attention list."""

    renovation: Renovation
    property_name: str
    badge: str


def filter_by_status(
    renovations: Sequence[Renovation], status: Union[RenovationStatus, str]
) -> List[Renovation]:
    status = RenovationStatus(status)
    return [r for r in renovations if r.status == status]


def filter_by_priority(
    renovations: Sequence[Renovation], priority: Union[Priority, str]
) -> List[Renovation]:
    priority = Priority(priority)
    return [r for r in renovations if r.priority == priority]


def active_renovations(renovations: Sequence[Renovation]) -> List[Renovation]:
    return [r for r in renovations if not r.is_completed]


def completed_renovations(renovations: Sequence[Renovation]) -> List[Renovation]:
    return filter_by_status(renovations, RenovationStatus.completed)


def high_priority_open(renovations: Sequence[Renovation]) -> List[Renovation]:
    """High priority renovations that are not completed."""
    return [
        r for r in renovations if r.priority == Priority.high and not r.is_completed
    ]


def renovations_for_property(
    renovations: Sequence[Renovation], property_id: str
) -> List[Renovation]:
    """Open renovations pointing at ``property_id``, whether or not it exists."""
    return [
        r for r in renovations if r.property_id == property_id and not r.is_completed
    ]


def active_counts_by_property(
    properties: Sequence[Property], renovations: Sequence[Renovation]
) -> Dict[str, int]:
    return {
        p.id: len(renovations_for_property(renovations, p.id)) for p in properties
    }


def attention_list(
    renovations: Sequence[Renovation], limit: int = DEFAULT_ATTENTION_LIMIT
) -> List[Renovation]:
    """
    Renovations needing attention: everything in progress, then pending
    high priority work, cut to ``limit``.
    """
    in_progress = filter_by_status(renovations, RenovationStatus.in_progress)
    urgent = [
        r
        for r in renovations
        if r.status == RenovationStatus.pending and r.priority == Priority.high
    ]
    return (in_progress + urgent)[:limit]


def property_name(
    properties: Sequence[Property],
    property_id: str,
    default: str = UNKNOWN_PROPERTY,
) -> str:
    """Name of the property with ``property_id``, or ``default`` if gone."""
    match = next((p for p in properties if p.id == property_id), None)
    return match.name if match else default


def attention_items(
    properties: Sequence[Property],
    renovations: Sequence[Renovation],
    limit: int = DEFAULT_ATTENTION_LIMIT,
) -> List[AttentionItem]:
    return [
        AttentionItem(
            renovation=r,
            property_name=property_name(properties, r.property_id, "Unknown Property"),
            badge="Active" if r.status == RenovationStatus.in_progress else "Urgent",
        )
        for r in attention_list(renovations, limit)
    ]


# === Filter chips ===

FILTERS = {
    FILTER_ALL: ("All", lambda rs: list(rs)),
    RenovationStatus.pending.value: (
        "Pending",
        lambda rs: filter_by_status(rs, RenovationStatus.pending),
    ),
    RenovationStatus.in_progress.value: (
        "Active",
        lambda rs: filter_by_status(rs, RenovationStatus.in_progress),
    ),
    FILTER_HIGH: ("Urgent", high_priority_open),
    RenovationStatus.completed.value: ("Done", completed_renovations),
}


def apply_filter(
    renovations: Sequence[Renovation], key: Optional[str]
) -> List[Renovation]:
    """Renovations matching a filter chip; unknown keys match everything."""
    _, predicate = FILTERS.get(key or FILTER_ALL, FILTERS[FILTER_ALL])
    return predicate(renovations)


def filter_chips(renovations: Sequence[Renovation]) -> List[FilterChip]:
    return [
        FilterChip(key=key, label=label, count=len(predicate(renovations)))
        for key, (label, predicate) in FILTERS.items()
    ]


# === Groupings ===

def group_by_status(
    renovations: Sequence[Renovation],
) -> Dict[RenovationStatus, List[Renovation]]:
    """Partition renovations by status. Every status has an entry."""
    return {status: filter_by_status(renovations, status) for status in RenovationStatus}


def group_by_priority(
    renovations: Sequence[Renovation],
) -> Dict[Priority, List[Renovation]]:
    return {priority: filter_by_priority(renovations, priority) for priority in Priority}


def group_by_category(renovations: Sequence[Renovation]) -> Dict[str, List[Renovation]]:
    groups: Dict[str, List[Renovation]] = {}
    for r in renovations:
        groups.setdefault(r.category.value, []).append(r)
    return groups
