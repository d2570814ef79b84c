"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date

from src.models import (
    Medicine,
    MedicineReminder,
    ShelfLifeRule,
)


# Fixed "today" so every status calculation is deterministic
TODAY = date(2025, 10, 1)


@pytest.fixture
def today():
    """Fixture for the fixed current date used across tests."""
    return TODAY


@pytest.fixture
def ibuprofen():
    """Fixture for an unopened pill box governed by its box date."""
    return Medicine(
        id="mock-1",
        name="Ibuprofen (Pills)",
        dosage="200mg (45 pills)",
        expiry_date="2026-10-25",
        opening_date=None,
        rule=ShelfLifeRule.BOX_DATE,
    )


@pytest.fixture
def amoxicillin():
    """Fixture for a liquid opened long ago with a two-week rule (expired)."""
    return Medicine(
        id="mock-2",
        name="Amoxicillin (Liquid)",
        dosage="500mg (5 tablets)",
        expiry_date="2025-06-01",
        opening_date="2025-01-15",
        rule=ShelfLifeRule.TWO_WEEKS,
    )


@pytest.fixture
def eye_drops():
    """Fixture for eye drops opened recently with a three-month rule."""
    return Medicine(
        id="mock-3",
        name="Eye Drops",
        dosage="10ml",
        expiry_date="2026-03-01",
        opening_date="2025-09-01",
        rule=ShelfLifeRule.THREE_MONTHS,
    )


@pytest.fixture
def sample_medicines(ibuprofen, amoxicillin, eye_drops):
    """Fixture for the three demo medicines in their original (unsorted) order."""
    return [ibuprofen, amoxicillin, eye_drops]


@pytest.fixture
def low_stock_reminder():
    """Fixture for a reminder already at low stock."""
    return MedicineReminder(
        id="r3",
        medicine_name="Antibiotic X",
        pills_remaining=2,
        dosage=1,
        low_stock_threshold=5,
        schedule="12:00 PM",
        member="Omar (Son)",
    )
