"""
Record creation from user input.

Form fields arrive as free text (as typed into the add dialogs). Amounts are
reduced to their digits, dates are parsed leniently, and the required fields
are checked before a record is built.
"""

from datetime import date, datetime
from typing import Callable, Iterable, Optional, Type, TypeVar, Union

from dateutil import parser as date_parser

from app.calculations.formatting import parse_whole_amount
from app.records.models import (
    Priority,
    Property,
    PropertyType,
    Renovation,
    RenovationCategory,
    RenovationStatus,
)

Clock = Callable[[], datetime]
E = TypeVar("E")


class RecordValidationError(ValueError):
    """Raised when form input cannot produce a valid record."""


def timestamp_id(now: datetime, taken_ids: Iterable[str] = ()) -> str:
    """
    Creation timestamp in milliseconds, used as the record id.

    Ids already present in ``taken_ids`` are skipped by counting up, so two
    records created within the same millisecond stay distinct.
    """
    taken = set(taken_ids)
    stamp = int(now.timestamp() * 1000)
    while str(stamp) in taken:
        stamp += 1
    return str(stamp)


def _text(value: Optional[str]) -> str:
    return (value or "").strip()


def _choice(enum_type: Type[E], value, label: str) -> E:
    try:
        return enum_type(value)
    except ValueError as e:
        raise RecordValidationError(f"Unknown {label} '{value}'.") from e


def parse_due_date(text: Optional[str]) -> Optional[date]:
    """Parse a due date. Blank input means no due date."""
    text = _text(text)
    if not text:
        return None
    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise RecordValidationError(f"Could not read due date '{text}'.") from e


def new_property(
    name: Optional[str],
    purchase_price: Optional[str],
    address: Optional[str] = None,
    property_type: Union[PropertyType, str] = PropertyType.single_family,
    current_value: Optional[str] = None,
    monthly_rent: Optional[str] = None,
    monthly_expenses: Optional[str] = None,
    sqft: Optional[str] = None,
    units: Optional[str] = None,
    clock: Clock = datetime.now,
    taken_ids: Iterable[str] = (),
) -> Property:
    """
    Build a property from form input.

    Current value falls back to the purchase price. The purchase year is the
    current year.

    Raises:
        RecordValidationError: If the name or purchase price is missing.
    """
    if not _text(name):
        raise RecordValidationError("Please enter a property name.")
    if not _text(purchase_price):
        raise RecordValidationError("Please enter the purchase price.")

    now = clock()
    price = parse_whole_amount(purchase_price) or 0
    value = parse_whole_amount(current_value) or price

    return Property(
        id=timestamp_id(now, taken_ids),
        name=_text(name),
        address=_text(address),
        type=_choice(PropertyType, property_type, "property type"),
        purchase_price=price,
        current_value=value,
        monthly_rent=parse_whole_amount(monthly_rent) or 0,
        monthly_expenses=parse_whole_amount(monthly_expenses) or 0,
        sqft=parse_whole_amount(sqft) or 0,
        units=parse_whole_amount(units) or 1,
        year_purchased=now.year,
    )


def new_renovation(
    title: Optional[str],
    property_id: Optional[str],
    description: Optional[str] = None,
    estimated_cost: Optional[str] = None,
    priority: Union[Priority, str] = Priority.medium,
    category: Union[RenovationCategory, str] = RenovationCategory.other,
    due_date: Optional[str] = None,
    notes: Optional[str] = None,
    clock: Clock = datetime.now,
    taken_ids: Iterable[str] = (),
) -> Renovation:
    """
    Build a pending renovation from form input.

    Raises:
        RecordValidationError: If the title or property is missing, or the
            due date cannot be read.
    """
    if not _text(title):
        raise RecordValidationError("Please enter a renovation title.")
    if not _text(property_id):
        raise RecordValidationError("Please select a property.")

    now = clock()
    return Renovation(
        id=timestamp_id(now, taken_ids),
        property_id=_text(property_id),
        title=_text(title),
        description=_text(description),
        estimated_cost=parse_whole_amount(estimated_cost) or 0,
        actual_cost=None,
        priority=_choice(Priority, priority, "priority"),
        status=RenovationStatus.pending,
        category=_choice(RenovationCategory, category, "category"),
        created_at=now.date(),
        due_date=parse_due_date(due_date),
        notes=_text(notes),
    )
