"""
Renovation tracking API endpoints.
"""

from datetime import date
from fastapi import APIRouter, HTTPException, Depends, Query
from pydantic import BaseModel
from typing import Optional, List, Union

from app.api.dependencies import get_clock, get_record_store
from app.calculations import filters
from app.calculations.formatting import format_currency, priority_label, status_label
from app.records import (
    Property,
    Renovation,
    RenovationStatus,
    find_by_id,
    with_added,
    with_removed,
    with_status_changed,
)
from app.records.factory import Clock, RecordValidationError, new_renovation
from app.store import RecordStore

router = APIRouter()


class RenovationCreate(BaseModel):
    """Schema for creating a renovation."""

    title: Optional[str] = None
    property_id: Optional[str] = None
    description: Optional[str] = None
    estimated_cost: Optional[Union[int, str]] = None
    priority: str = "medium"
    category: str = "Other"
    due_date: Optional[str] = None
    notes: Optional[str] = None


class StatusChange(BaseModel):
    """Schema for moving a renovation to another status."""

    status: RenovationStatus
    actual_cost: Optional[int] = None


class RenovationResponse(BaseModel):
    """Schema for renovation response."""

    id: str
    property_id: str
    property_name: str
    title: str
    description: str
    category: str
    estimated_cost: int
    actual_cost: Optional[int]
    priority: str
    priority_label: str
    status: str
    status_label: str
    created_at: date
    due_date: Optional[date]
    notes: str
    estimated_cost_display: str


class FilterChipResponse(BaseModel):
    key: str
    label: str
    count: int


class RenovationListResponse(BaseModel):
    """Response for listing renovations."""

    renovations: List[RenovationResponse]
    filters: List[FilterChipResponse]
    active: int
    total: int


def renovation_to_response(
    reno: Renovation, properties: List[Property]
) -> RenovationResponse:
    """Convert a Renovation record to response schema."""
    return RenovationResponse(
        id=reno.id,
        property_id=reno.property_id,
        property_name=filters.property_name(properties, reno.property_id),
        title=reno.title,
        description=reno.description,
        category=reno.category.value,
        estimated_cost=reno.estimated_cost,
        actual_cost=reno.actual_cost,
        priority=reno.priority.value,
        priority_label=priority_label(reno.priority),
        status=reno.status.value,
        status_label=status_label(reno.status),
        created_at=reno.created_at,
        due_date=reno.due_date,
        notes=reno.notes,
        estimated_cost_display=format_currency(reno.estimated_cost),
    )


def _get_or_404(renovations: List[Renovation], renovation_id: str) -> Renovation:
    reno = find_by_id(renovations, renovation_id)
    if not reno:
        raise HTTPException(status_code=404, detail="Renovation not found")
    return reno


@router.get("/", response_model=RenovationListResponse)
async def list_renovations(
    filter_key: Optional[str] = Query(None, alias="filter"),
    store: RecordStore = Depends(get_record_store),
):
    """List renovations matching a filter chip, with counts for every chip."""
    properties = store.load_properties().value
    renovations = store.load_renovations().value

    matching = filters.apply_filter(renovations, filter_key)

    return RenovationListResponse(
        renovations=[renovation_to_response(r, properties) for r in matching],
        filters=[
            FilterChipResponse(key=c.key, label=c.label, count=c.count)
            for c in filters.filter_chips(renovations)
        ],
        active=len(filters.active_renovations(renovations)),
        total=len(matching),
    )


@router.post("/", response_model=RenovationResponse, status_code=201)
async def create_renovation(
    renovation_data: RenovationCreate,
    store: RecordStore = Depends(get_record_store),
    clock: Clock = Depends(get_clock),
):
    """Create a new pending renovation."""
    renovations = store.load_renovations().value
    estimated_cost = renovation_data.estimated_cost
    try:
        reno = new_renovation(
            title=renovation_data.title,
            property_id=renovation_data.property_id,
            description=renovation_data.description,
            estimated_cost=None if estimated_cost is None else str(estimated_cost),
            priority=renovation_data.priority,
            category=renovation_data.category,
            due_date=renovation_data.due_date,
            notes=renovation_data.notes,
            clock=clock,
            taken_ids=[r.id for r in renovations],
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    store.save_renovations(with_added(renovations, reno))

    return renovation_to_response(reno, store.load_properties().value)


@router.get("/{renovation_id}", response_model=RenovationResponse)
async def get_renovation(
    renovation_id: str,
    store: RecordStore = Depends(get_record_store),
):
    """Get a renovation by ID."""
    reno = _get_or_404(store.load_renovations().value, renovation_id)
    return renovation_to_response(reno, store.load_properties().value)


@router.patch("/{renovation_id}/status", response_model=RenovationResponse)
async def change_renovation_status(
    renovation_id: str,
    change: StatusChange,
    store: RecordStore = Depends(get_record_store),
):
    """Move a renovation to any status."""
    renovations = store.load_renovations().value
    _get_or_404(renovations, renovation_id)

    try:
        updated = with_status_changed(
            renovations, renovation_id, change.status, change.actual_cost
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    store.save_renovations(updated)

    return renovation_to_response(
        find_by_id(updated, renovation_id), store.load_properties().value
    )


@router.delete("/{renovation_id}")
async def delete_renovation(
    renovation_id: str,
    store: RecordStore = Depends(get_record_store),
):
    """Delete a renovation."""
    renovations = store.load_renovations().value
    _get_or_404(renovations, renovation_id)

    saved = store.save_renovations(with_removed(renovations, renovation_id))

    return {"deleted": True, "id": renovation_id, "saved": saved}
