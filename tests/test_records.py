"""
Tests for record creation and immutable collection updates.
"""

import pytest
from datetime import date, datetime

from app.records import (
    Priority,
    PropertyType,
    RenovationCategory,
    RenovationStatus,
    change_status,
    find_by_id,
    with_added,
    with_removed,
    with_status_changed,
)
from app.records.factory import (
    RecordValidationError,
    new_property,
    new_renovation,
    timestamp_id,
)
from factories import make_property, make_renovation

NOW = datetime(2026, 3, 14, 9, 30)


def clock():
    return NOW


class TestNewProperty:
    """Test property creation from form input."""

    def test_create_with_defaults(self):
        prop = new_property(name="  Elm Cottage ", purchase_price="$250,000", clock=clock)
        assert prop.name == "Elm Cottage"
        assert prop.purchase_price == 250000
        assert prop.current_value == 250000  # falls back to purchase price
        assert prop.monthly_rent == 0
        assert prop.units == 1
        assert prop.type == PropertyType.single_family
        assert prop.year_purchased == 2026
        assert prop.id == timestamp_id(NOW)

    def test_create_with_all_fields(self):
        prop = new_property(
            name="Elm Fourplex",
            purchase_price="400000",
            address="9 Elm St",
            property_type="Fourplex",
            current_value="450,000",
            monthly_rent="4800",
            monthly_expenses="2100",
            sqft="3600",
            units="4",
            clock=clock,
        )
        assert prop.type == PropertyType.fourplex
        assert prop.current_value == 450000
        assert prop.monthly_expenses == 2100
        assert prop.units == 4

    def test_missing_name(self):
        with pytest.raises(RecordValidationError, match="property name"):
            new_property(name="   ", purchase_price="1000", clock=clock)

    def test_missing_purchase_price(self):
        with pytest.raises(RecordValidationError, match="purchase price"):
            new_property(name="Elm", purchase_price="", clock=clock)

    def test_unknown_type(self):
        with pytest.raises(RecordValidationError):
            new_property(name="Elm", purchase_price="1", property_type="Castle", clock=clock)


class TestNewRenovation:
    """Test renovation creation from form input."""

    def test_create_pending(self):
        reno = new_renovation(
            title="Deck Rebuild",
            property_id="1",
            estimated_cost="$6,500",
            category="Exterior",
            priority="high",
            due_date="2026-06-01",
            clock=clock,
        )
        assert reno.status == RenovationStatus.pending
        assert reno.actual_cost is None
        assert reno.estimated_cost == 6500
        assert reno.category == RenovationCategory.exterior
        assert reno.priority == Priority.high
        assert reno.created_at == date(2026, 3, 14)
        assert reno.due_date == date(2026, 6, 1)

    def test_defaults(self):
        reno = new_renovation(title="Paint", property_id="1", clock=clock)
        assert reno.priority == Priority.medium
        assert reno.category == RenovationCategory.other
        assert reno.estimated_cost == 0
        assert reno.due_date is None
        assert reno.notes == ""

    def test_missing_title(self):
        with pytest.raises(RecordValidationError, match="renovation title"):
            new_renovation(title="", property_id="1", clock=clock)

    def test_missing_property(self):
        with pytest.raises(RecordValidationError, match="select a property"):
            new_renovation(title="Paint", property_id=None, clock=clock)

    def test_unreadable_due_date(self):
        with pytest.raises(RecordValidationError, match="due date"):
            new_renovation(title="Paint", property_id="1", due_date="someday", clock=clock)


def test_timestamp_id_skips_taken_ids():
    stamp = timestamp_id(NOW)
    assert timestamp_id(NOW, [stamp]) == str(int(stamp) + 1)
    assert timestamp_id(NOW, [stamp, str(int(stamp) + 1)]) == str(int(stamp) + 2)
    assert timestamp_id(NOW, ["1", "2"]) == stamp


def test_new_records_avoid_existing_ids():
    first = new_property(name="A", purchase_price="1000", clock=clock)
    second = new_property(name="B", purchase_price="1000", clock=clock, taken_ids=[first.id])
    assert second.id != first.id

    reno = new_renovation(title="Paint", property_id="1", clock=clock, taken_ids=[first.id])
    assert reno.id == second.id


class TestCollections:
    """Test immutable collection updates."""

    def test_with_added_returns_new_list(self):
        original = [make_property(id="a")]
        updated = with_added(original, make_property(id="b"))
        assert [p.id for p in updated] == ["a", "b"]
        assert [p.id for p in original] == ["a"]

    def test_with_removed(self):
        original = [make_property(id="a"), make_property(id="b")]
        assert [p.id for p in with_removed(original, "a")] == ["b"]
        assert with_removed(original, "missing") == original
        assert len(original) == 2

    def test_change_status_leaves_other_fields(self):
        reno = make_renovation(status=RenovationStatus.pending)
        moved = change_status(reno, RenovationStatus.in_progress)
        assert moved.status == RenovationStatus.in_progress
        assert moved.model_dump(exclude={"status"}) == reno.model_dump(exclude={"status"})
        assert reno.status == RenovationStatus.pending

    def test_any_status_can_follow_any_other(self):
        reno = make_renovation(status=RenovationStatus.completed, actual_cost=100)
        assert change_status(reno, "pending").status == RenovationStatus.pending
        assert change_status(reno, "completed").status == RenovationStatus.completed

    def test_actual_cost_on_completion(self):
        reno = make_renovation(estimated_cost=3500)
        done = change_status(reno, RenovationStatus.completed, actual_cost=2800)
        assert done.actual_cost == 2800

    def test_actual_cost_requires_completion(self):
        with pytest.raises(ValueError):
            change_status(make_renovation(), RenovationStatus.in_progress, actual_cost=10)

    def test_actual_cost_must_be_whole_dollars(self):
        with pytest.raises(ValueError):
            change_status(make_renovation(), "completed", actual_cost=2400.5)
        with pytest.raises(ValueError):
            change_status(make_renovation(), "completed", actual_cost="lots")
        with pytest.raises(ValueError):
            change_status(make_renovation(), "completed", actual_cost=-5)

    def test_unknown_status(self):
        with pytest.raises(ValueError):
            change_status(make_renovation(), "archived")

    def test_with_status_changed(self):
        renovations = [make_renovation(id="a"), make_renovation(id="b")]
        updated = with_status_changed(renovations, "b", "completed")
        assert find_by_id(updated, "b").status == RenovationStatus.completed
        assert find_by_id(updated, "a").status == RenovationStatus.pending
        assert find_by_id(renovations, "b").status == RenovationStatus.pending

    def test_records_are_immutable(self):
        prop = make_property()
        with pytest.raises(Exception):
            prop.name = "Changed"
