"""
Sample portfolio written on first access.

The record store takes a seed provider at construction; ``sample_portfolio``
is the default and ``empty_portfolio`` turns seeding into a no-op.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List

from app.records.models import (
    Priority,
    Property,
    PropertyType,
    Renovation,
    RenovationCategory,
    RenovationStatus,
)


@dataclass(frozen=True)
class SeedData:
    """Collections returned when nothing is stored yet."""

    properties: List[Property] = field(default_factory=list)
    renovations: List[Renovation] = field(default_factory=list)


SeedProvider = Callable[[], SeedData]


def empty_portfolio() -> SeedData:
    return SeedData()


def sample_portfolio() -> SeedData:
    """Three Austin rentals with six renovation projects between them."""
    properties = [
        Property(
            id="1",
            name="Maple Street Duplex",
            address="142 Maple Street, Austin, TX",
            type=PropertyType.duplex,
            purchase_price=285000,
            current_value=340000,
            monthly_rent=2800,
            monthly_expenses=1200,
            image="house1",
            year_purchased=2021,
            sqft=2200,
            units=2,
        ),
        Property(
            id="2",
            name="Oak Park Townhome",
            address="78 Oak Park Dr, Austin, TX",
            type=PropertyType.townhome,
            purchase_price=195000,
            current_value=245000,
            monthly_rent=1800,
            monthly_expenses=850,
            image="house2",
            year_purchased=2022,
            sqft=1500,
            units=1,
        ),
        Property(
            id="3",
            name="River Bend Condo",
            address="310 River Bend Blvd #4B, Austin, TX",
            type=PropertyType.condo,
            purchase_price=165000,
            current_value=198000,
            monthly_rent=1450,
            monthly_expenses=720,
            image="house3",
            year_purchased=2023,
            sqft=950,
            units=1,
        ),
    ]

    renovations = [
        Renovation(
            id="1",
            property_id="1",
            title="Kitchen Remodel - Unit A",
            description="Full kitchen renovation including new cabinets, countertops, and appliances",
            estimated_cost=15000,
            priority=Priority.high,
            status=RenovationStatus.in_progress,
            category=RenovationCategory.kitchen,
            created_at=date(2024, 1, 15),
            due_date=date(2024, 4, 1),
            notes="Contractor scheduled for next month. Need to finalize countertop selection.",
        ),
        Renovation(
            id="2",
            property_id="1",
            title="Bathroom Tile Repair - Unit B",
            description="Replace cracked tiles and fix grout in master bathroom",
            estimated_cost=2500,
            priority=Priority.medium,
            status=RenovationStatus.pending,
            category=RenovationCategory.bathroom,
            created_at=date(2024, 2, 1),
            due_date=date(2024, 5, 15),
        ),
        Renovation(
            id="3",
            property_id="2",
            title="Roof Inspection & Repair",
            description="Annual roof inspection, patch any damaged shingles",
            estimated_cost=3500,
            actual_cost=2800,
            priority=Priority.high,
            status=RenovationStatus.completed,
            category=RenovationCategory.exterior,
            created_at=date(2023, 11, 1),
            due_date=date(2024, 1, 15),
            notes="Completed ahead of schedule. Minor repairs only.",
        ),
        Renovation(
            id="4",
            property_id="2",
            title="HVAC System Replacement",
            description="Replace aging HVAC unit with energy-efficient model",
            estimated_cost=8000,
            priority=Priority.high,
            status=RenovationStatus.pending,
            category=RenovationCategory.hvac,
            created_at=date(2024, 2, 10),
            due_date=date(2024, 6, 1),
            notes="Get 3 quotes from local HVAC contractors.",
        ),
        Renovation(
            id="5",
            property_id="3",
            title="Interior Paint Refresh",
            description="Repaint all walls in neutral tones before next tenant",
            estimated_cost=1800,
            priority=Priority.low,
            status=RenovationStatus.pending,
            category=RenovationCategory.interior,
            created_at=date(2024, 2, 15),
            due_date=date(2024, 7, 1),
            notes="Wait until current lease ends in June.",
        ),
        Renovation(
            id="6",
            property_id="3",
            title="Window Replacement",
            description="Replace single-pane windows with double-pane for energy efficiency",
            estimated_cost=4200,
            priority=Priority.medium,
            status=RenovationStatus.pending,
            category=RenovationCategory.exterior,
            created_at=date(2024, 1, 20),
            due_date=date(2024, 8, 1),
            notes="Energy audit recommended this upgrade.",
        ),
    ]

    return SeedData(properties=properties, renovations=renovations)
