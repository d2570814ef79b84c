"""Tests for medicine reminders: stock control and schedule grouping."""

import logging

import pytest

from src.models import MedicineReminder, StockStatus
from src.reminders import (
    AFTERNOON,
    EVENING,
    MORNING,
    ReminderBoard,
    calculate_stock_status,
    group_by_time_of_day,
    parse_schedule_hour,
    restock,
    sample_reminders,
    take_dose,
    time_of_day,
)


def make_reminder(schedule: str, **kwargs) -> MedicineReminder:
    """Create a reminder with sensible defaults for schedule tests."""
    fields = dict(
        medicine_name="Vitamin D",
        pills_remaining=30,
        schedule=schedule,
        member="Aisha",
    )
    fields.update(kwargs)
    return MedicineReminder(**fields)


class TestStockControl:
    """Tests for take_dose and restock."""

    def test_calculate_stock_status(self):
        """Test status thresholds."""
        assert calculate_stock_status(0, 5) == StockStatus.EMPTY
        assert calculate_stock_status(5, 5) == StockStatus.LOW
        assert calculate_stock_status(6, 5) == StockStatus.IN_STOCK

    def test_take_dose_reduces_count(self):
        """Test taking a dose reduces the supply by the dosage."""
        reminder = make_reminder("8:00 AM", pills_remaining=30, dosage=2, low_stock_threshold=7)
        updated = take_dose(reminder)
        assert updated.pills_remaining == 28
        assert updated.stock_status == StockStatus.IN_STOCK
        assert reminder.pills_remaining == 30

    def test_take_dose_low_stock_alert(self, low_stock_reminder, caplog):
        """Test dropping to low stock logs a restock alert."""
        with caplog.at_level(logging.WARNING):
            updated = take_dose(low_stock_reminder)

        assert updated.pills_remaining == 1
        assert updated.stock_status == StockStatus.LOW
        assert "Omar (Son)'s Antibiotic X is now LOW STOCK" in caplog.text

    def test_take_dose_to_empty(self, low_stock_reminder, caplog):
        """Test the supply is floored at zero and reported empty."""
        oversized = low_stock_reminder.model_copy(update={'dosage': 3})
        with caplog.at_level(logging.WARNING):
            updated = take_dose(oversized)

        assert updated.pills_remaining == 0
        assert updated.stock_status == StockStatus.EMPTY
        assert "EMPTY STOCK" in caplog.text

    def test_take_dose_when_empty_is_noop(self):
        """Test no dose can be taken from an empty supply."""
        empty = make_reminder("8:00 AM", pills_remaining=0)
        assert take_dose(empty) is empty

    def test_restock(self, low_stock_reminder):
        """Test restocking adds pills and recomputes status."""
        updated = restock(low_stock_reminder, 30)
        assert updated.pills_remaining == 32
        assert updated.stock_status == StockStatus.IN_STOCK

    def test_restock_non_positive_is_noop(self, low_stock_reminder):
        """Test restocking zero or negative amounts changes nothing."""
        assert restock(low_stock_reminder, 0) is low_stock_reminder
        assert restock(low_stock_reminder, -5) is low_stock_reminder


class TestSchedule:
    """Tests for schedule parsing and grouping."""

    @pytest.mark.parametrize("schedule,hour", [
        ("7:00 AM", 7),
        ("12:00 PM", 12),
        ("12:30 AM", 0),
        ("1:00 PM", 13),
        ("5:00 PM", 17),
        ("8:00 pm", 20),
        (" 10:15 AM ", 10),
    ])
    def test_parse_schedule_hour(self, schedule, hour):
        """Test 12-hour times convert to 24-hour hours."""
        assert parse_schedule_hour(schedule) == hour

    @pytest.mark.parametrize("schedule", ["As Needed", "13:00 PM", "0:30 AM", "7:75 AM", "7 AM"])
    def test_parse_schedule_invalid(self, schedule):
        """Test malformed schedules are rejected."""
        with pytest.raises(ValueError):
            parse_schedule_hour(schedule)

    def test_time_of_day_boundaries(self):
        """Test morning, afternoon and evening boundaries."""
        assert time_of_day("11:59 AM") == MORNING
        assert time_of_day("12:00 PM") == AFTERNOON
        assert time_of_day("4:59 PM") == AFTERNOON
        assert time_of_day("5:00 PM") == EVENING
        assert time_of_day("12:00 AM") == MORNING

    def test_group_by_time_of_day(self):
        """Test reminders are grouped and ordered within each group."""
        reminders = [
            make_reminder("8:00 PM", id="e1"),
            make_reminder("8:00 AM", id="m2"),
            make_reminder("1:00 PM", id="a1"),
            make_reminder("7:00 AM", id="m1"),
        ]
        groups = group_by_time_of_day(reminders)

        assert list(groups) == [MORNING, AFTERNOON, EVENING]
        assert [r.id for r in groups[MORNING]] == ["m1", "m2"]
        assert [r.id for r in groups[AFTERNOON]] == ["a1"]
        assert [r.id for r in groups[EVENING]] == ["e1"]

    @pytest.mark.parametrize("schedule", ["Before Bed", "As Needed", "13:00 PM"])
    def test_time_of_day_free_text_is_evening(self, schedule):
        """Test schedules without a clock time count as evening."""
        assert time_of_day(schedule) == EVENING

    def test_group_empty(self):
        """Test all groups are present even when empty."""
        assert group_by_time_of_day([]) == {MORNING: [], AFTERNOON: [], EVENING: []}


class TestReminderBoard:
    """Tests for ReminderBoard."""

    def test_sample_board(self):
        """Test the demo reminder board."""
        board = sample_reminders()
        assert len(board) == 3
        assert board.get("r3").stock_status == StockStatus.LOW
        assert board.refills_needed() == 1

    def test_take_dose_updates_board(self):
        """Test taking doses through the board replaces the stored reminder."""
        board = sample_reminders()
        board.take_dose("r3")
        assert board.get("r3").pills_remaining == 1
        board.take_dose("r3")
        assert board.get("r3").stock_status == StockStatus.EMPTY
        board.take_dose("r3")
        assert board.get("r3").pills_remaining == 0
        assert board.refills_needed() == 1

    def test_restock_default_amount(self):
        """Test restocking uses the configured default amount."""
        board = sample_reminders()
        updated = board.restock("r3")
        assert updated.pills_remaining == 32
        assert board.get("r3").stock_status == StockStatus.IN_STOCK
        assert board.refills_needed() == 0

    def test_restock_explicit_amount(self):
        """Test restocking with an explicit amount."""
        board = sample_reminders()
        assert board.restock("r1", 10).pills_remaining == 25

    def test_add_and_member_filter(self):
        """Test adding reminders and filtering by member."""
        board = ReminderBoard()
        board.add(make_reminder("8:00 AM", id="x1", member="Aisha"))
        board.add(make_reminder("9:00 PM", id="x2", member="Omar (Son)"))
        assert [r.id for r in board.for_member("Aisha")] == ["x1"]

    def test_add_duplicate(self):
        """Test duplicate reminder ids are rejected."""
        board = sample_reminders()
        with pytest.raises(ValueError, match="Duplicate reminder id"):
            board.add(make_reminder("8:00 AM", id="r1"))

    def test_unknown_reminder(self):
        """Test operations on unknown ids fail."""
        board = sample_reminders()
        with pytest.raises(KeyError):
            board.take_dose("missing")

    def test_schedule_groups(self):
        """Test board reminders grouped by time of day."""
        groups = sample_reminders().schedule_groups()
        assert [r.id for r in groups[MORNING]] == ["r1", "r2"]
        assert [r.id for r in groups[AFTERNOON]] == ["r3"]
        assert groups[EVENING] == []

    def test_schedule_groups_with_free_text(self):
        """Test a free-text schedule does not break grouping."""
        board = sample_reminders()
        board.add(make_reminder("Before Bed", id="r4", member="Grandpa Ahmed"))
        groups = board.schedule_groups()
        assert [r.id for r in groups[MORNING]] == ["r1", "r2"]
        assert [r.id for r in groups[AFTERNOON]] == ["r3"]
        assert [r.id for r in groups[EVENING]] == ["r4"]

    def test_add_low_stock_warns(self, caplog):
        """Test adding a reminder that already needs a refill is logged."""
        board = ReminderBoard()
        with caplog.at_level(logging.WARNING):
            board.add(make_reminder("8:00 AM", id="x1", pills_remaining=3, low_stock_threshold=5))
            board.add(make_reminder("9:00 PM", id="x2", pills_remaining=0))
        assert "Aisha's Vitamin D was added with LOW STOCK. Time to restock!" in caplog.text
        assert "was added with EMPTY STOCK" in caplog.text

    def test_add_in_stock_is_quiet(self, caplog):
        """Test adding a well-stocked reminder logs no warning."""
        with caplog.at_level(logging.WARNING):
            ReminderBoard().add(make_reminder("8:00 AM", id="x1"))
        assert "restock" not in caplog.text
