"""
Property management API endpoints.
"""

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Optional, List, Union

from app.api.dependencies import get_clock, get_record_store
from app.calculations import filters, metrics
from app.calculations.formatting import property_count_label
from app.records import Property, find_by_id, with_added, with_removed
from app.records.factory import Clock, RecordValidationError, new_property
from app.store import RecordStore

router = APIRouter()

Amount = Optional[Union[int, str]]


class PropertyCreate(BaseModel):
    """Schema for creating a property.

    Amounts may be sent as numbers or as typed text ("$285,000").
    """

    name: Optional[str] = None
    address: Optional[str] = None
    type: str = "Single Family"
    purchase_price: Amount = None
    current_value: Amount = None
    monthly_rent: Amount = None
    monthly_expenses: Amount = None
    sqft: Amount = None
    units: Amount = None


class PropertyResponse(BaseModel):
    """Schema for property response."""

    id: str
    name: str
    address: str
    type: str
    purchase_price: int
    current_value: int
    monthly_rent: int
    monthly_expenses: int
    sqft: Optional[int]
    units: Optional[int]
    year_purchased: Optional[int]
    equity: int
    equity_percent: float
    monthly_cashflow: int
    active_renovations: int


class PropertyListResponse(BaseModel):
    """Response for listing properties."""

    properties: List[PropertyResponse]
    total: int
    label: str


def _text(value: Amount) -> Optional[str]:
    return None if value is None else str(value)


def property_to_response(prop: Property, active_renovations: int = 0) -> PropertyResponse:
    """Convert a Property record to response schema."""
    return PropertyResponse(
        id=prop.id,
        name=prop.name,
        address=prop.address,
        type=prop.type.value,
        purchase_price=prop.purchase_price,
        current_value=prop.current_value,
        monthly_rent=prop.monthly_rent,
        monthly_expenses=prop.monthly_expenses,
        sqft=prop.sqft,
        units=prop.units,
        year_purchased=prop.year_purchased,
        equity=metrics.property_equity(prop),
        equity_percent=metrics.equity_percent(prop),
        monthly_cashflow=metrics.property_monthly_cashflow(prop),
        active_renovations=active_renovations,
    )


def _get_or_404(properties: List[Property], property_id: str) -> Property:
    prop = find_by_id(properties, property_id)
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.get("/", response_model=PropertyListResponse)
async def list_properties(
    property_type: Optional[str] = None,
    store: RecordStore = Depends(get_record_store),
):
    """List all properties with optional filtering by type."""
    properties = store.load_properties().value
    renovations = store.load_renovations().value

    if property_type:
        properties = [p for p in properties if p.type.value == property_type]

    counts = filters.active_counts_by_property(properties, renovations)
    return PropertyListResponse(
        properties=[property_to_response(p, counts[p.id]) for p in properties],
        total=len(properties),
        label=property_count_label(len(properties)),
    )


@router.post("/", response_model=PropertyResponse, status_code=201)
async def create_property(
    property_data: PropertyCreate,
    store: RecordStore = Depends(get_record_store),
    clock: Clock = Depends(get_clock),
):
    """Create a new property."""
    properties = store.load_properties().value
    try:
        prop = new_property(
            name=property_data.name,
            purchase_price=_text(property_data.purchase_price),
            address=property_data.address,
            property_type=property_data.type,
            current_value=_text(property_data.current_value),
            monthly_rent=_text(property_data.monthly_rent),
            monthly_expenses=_text(property_data.monthly_expenses),
            sqft=_text(property_data.sqft),
            units=_text(property_data.units),
            clock=clock,
            taken_ids=[p.id for p in properties],
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    store.save_properties(with_added(properties, prop))

    return property_to_response(prop)


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str,
    store: RecordStore = Depends(get_record_store),
):
    """Get a property by ID."""
    prop = _get_or_404(store.load_properties().value, property_id)
    renovations = store.load_renovations().value
    active = len(filters.renovations_for_property(renovations, prop.id))
    return property_to_response(prop, active)


@router.delete("/{property_id}")
async def delete_property(
    property_id: str,
    store: RecordStore = Depends(get_record_store),
):
    """Delete a property. Its renovations are kept."""
    properties = store.load_properties().value
    _get_or_404(properties, property_id)

    saved = store.save_properties(with_removed(properties, property_id))

    return {"deleted": True, "id": property_id, "saved": saved}


@router.get("/{property_id}/renovations")
async def list_property_renovations(
    property_id: str,
    store: RecordStore = Depends(get_record_store),
):
    """List open renovations for a property, including deleted properties."""
    properties = store.load_properties().value
    renovations = filters.renovations_for_property(
        store.load_renovations().value, property_id
    )

    return {
        "property_id": property_id,
        "property_name": filters.property_name(properties, property_id),
        "renovations": [r.model_dump(mode="json") for r in renovations],
        "total": len(renovations),
    }
