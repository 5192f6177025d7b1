"""
Portfolio record models.

Records are immutable Pydantic models. Field names are snake_case in Python
and camelCase on the wire, which is the layout the stored collections use.
"""

import enum
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PropertyType(str, enum.Enum):
    """Property category."""
    single_family = "Single Family"
    duplex = "Duplex"
    triplex = "Triplex"
    fourplex = "Fourplex"
    condo = "Condo"
    townhome = "Townhome"
    apartment = "Apartment"


class RenovationCategory(str, enum.Enum):
    """Renovation category, in display order."""
    kitchen = "Kitchen"
    bathroom = "Bathroom"
    exterior = "Exterior"
    interior = "Interior"
    hvac = "HVAC"
    plumbing = "Plumbing"
    electrical = "Electrical"
    flooring = "Flooring"
    landscaping = "Landscaping"
    other = "Other"


class Priority(str, enum.Enum):
    low = "low"
    medium = "medium"
    high = "high"


class RenovationStatus(str, enum.Enum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


class RecordModel(BaseModel):
    """Base for stored records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Property(RecordModel):
    """A property in the portfolio. Amounts are whole currency units."""

    id: str
    name: str
    address: str = ""
    type: PropertyType = PropertyType.single_family
    purchase_price: int = Field(ge=0)
    current_value: int = Field(ge=0)
    monthly_rent: int = Field(default=0, ge=0)
    monthly_expenses: int = Field(default=0, ge=0)
    sqft: Optional[int] = None
    units: Optional[int] = None
    year_purchased: Optional[int] = None
    image: Optional[str] = None


class Renovation(RecordModel):
    """A renovation project attached to a property.

    ``property_id`` is not checked against the property collection; a
    renovation may outlive the property it points at.
    """

    id: str
    property_id: str
    title: str
    description: str = ""
    category: RenovationCategory = RenovationCategory.other
    estimated_cost: int = Field(ge=0)
    actual_cost: Optional[int] = Field(default=None, ge=0)
    priority: Priority = Priority.medium
    status: RenovationStatus = RenovationStatus.pending
    created_at: date
    due_date: Optional[date] = None
    notes: str = ""

    @property
    def is_completed(self) -> bool:
        return self.status == RenovationStatus.completed

    @property
    def spent(self) -> int:
        """Actual cost when recorded, otherwise the estimate."""
        if self.actual_cost is None:
            return self.estimated_cost
        return self.actual_cost
